#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot utilities exception classes.

Errors raised by the device interfaces. The protocol layer translates them into
the protocol specific exceptions.
"""

from ccboot.exceptions import CCBootConnectionError


class CCBootTimeoutError(CCBootConnectionError, TimeoutError):
    """ccboot timeout exception.

    Raised by the device layer when a transfer does not complete within the
    requested time.
    """


class CCBootDeviceOpenError(CCBootConnectionError):
    """The device handle could not be opened."""


class CCBootDeviceConfigError(CCBootConnectionError):
    """The device configuration could not be selected or its interface claimed."""
