#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""CC1800 USB boot mode communication module.

This module provides the boot mode client, its USB interface and the command
interpreter used by the ``ccboot`` tool.
"""

from ccboot.boot.interfaces.usb import BootUSBInterface as BootUSBInterface
from ccboot.boot.interpreter import CommandInterpreter as CommandInterpreter
from ccboot.boot.interpreter import parse_commands as parse_commands
from ccboot.boot.usbboot import UsbBoot as UsbBoot
