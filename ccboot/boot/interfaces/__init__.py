#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""CC1800 boot communication interfaces."""

from ccboot.boot.interfaces.usb import DEFAULT_USB_ID as DEFAULT_USB_ID
from ccboot.boot.interfaces.usb import BootUSBInterface as BootUSBInterface
from ccboot.boot.interfaces.usb import UsbId as UsbId
