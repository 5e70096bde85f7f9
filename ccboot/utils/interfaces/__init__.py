#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot device communication interfaces.

This module provides the interface layer between the boot protocol and the USB
device: the abstract device, the pyusb based device and the protocol base.
"""
