#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""Fixtures for the CC1800 boot mode tests."""

from typing import Iterator

import pytest

from ccboot.boot.interfaces.usb import BootUSBInterface
from ccboot.boot.usbboot import UsbBoot
from tests.boot.virtual_device import VirtualCC1800


@pytest.fixture
def device() -> VirtualCC1800:
    """Virtual CC1800 without faults."""
    return VirtualCC1800()


@pytest.fixture
def boot(device: VirtualCC1800) -> Iterator[UsbBoot]:
    """Opened boot mode client connected to the virtual device."""
    with UsbBoot(BootUSBInterface(device)) as usb_boot:  # type: ignore[arg-type]
        yield usb_boot
