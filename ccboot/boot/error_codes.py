#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""Error kinds reported by the CC1800 boot protocol client."""

from ccboot.utils.ccboot_enum import CCBootEnum


########################################################################################################################
# Boot Error Kinds
########################################################################################################################
class ErrorKind(CCBootEnum):
    """Boot error kinds."""

    DEVICE_NOT_FOUND = (1, "DeviceNotFound", "Device not found")
    DEVICE_OPEN_FAILED = (2, "DeviceOpenFailed", "Unable to open the device")
    CONFIGURATION_FAILED = (3, "ConfigurationFailed", "Unable to configure the device")
    PROBE_FAILED = (4, "ProbeFailed", "Device does not respond")
    SHORT_TRANSFER = (5, "ShortTransfer", "Fewer bytes transferred than requested")
    TRANSPORT_TIMEOUT = (6, "TransportTimeout", "Transfer timed out")
    VERIFICATION_MISMATCH = (7, "VerificationMismatch", "Data mismatch")
    FILE_ACCESS_ERROR = (8, "FileAccessError", "File access failure")
    UNKNOWN_COMMAND = (9, "UnknownCommand", "Unknown command")
    INVALID_ARGUMENT = (10, "InvalidArgument", "Invalid argument")
    TRANSPORT_ERROR = (11, "TransportError", "USB transfer failure")
