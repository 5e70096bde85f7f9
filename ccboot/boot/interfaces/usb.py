#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""USB interface for the CC1800 boot mode.

This module provides discovery of the boot mode device by its USB identifier.
"""

import logging
from typing import NamedTuple, Optional

from typing_extensions import Self

from ccboot.boot.exceptions import BootDeviceNotFoundError, BootInvalidArgumentError
from ccboot.boot.protocol.vendor_protocol import BootVendorProtocol
from ccboot.exceptions import CCBootValueError
from ccboot.utils.interfaces.device.usb_device import UsbDevice
from ccboot.utils.interfaces.protocol.protocol_base import (
    CCBootMultipleDevicesFoundError,
    CCBootNoDeviceFoundError,
)
from ccboot.utils.misc import value_to_int

logger = logging.getLogger(__name__)


class UsbId(NamedTuple):
    """USB vendor and product identifier."""

    vid: int
    pid: int

    def __str__(self) -> str:
        return f"0x{self.vid:04X}:0x{self.pid:04X}"

    @classmethod
    def parse(cls, usb_id: str) -> "UsbId":
        """Parse identifier in 'VID:PID' format.

        :param usb_id: Identifier string, numbers are hexadecimal with 0x prefix or decimal.
        :return: Parsed identifier.
        :raises BootInvalidArgumentError: Malformed identifier.
        """
        parts = usb_id.split(":")
        if len(parts) != 2:
            raise BootInvalidArgumentError(f"Invalid USB identifier '{usb_id}', expected VID:PID")
        try:
            vid, pid = (value_to_int(part) for part in parts)
        except CCBootValueError as exc:
            raise BootInvalidArgumentError(f"Invalid USB identifier '{usb_id}'") from exc
        if vid > 0xFFFF or pid > 0xFFFF:
            raise BootInvalidArgumentError(f"Invalid USB identifier '{usb_id}', out of range")
        return cls(vid, pid)


# ChinaChip CC1800 in boot mode
DEFAULT_USB_ID = UsbId(0x2009, 0x1218)


class BootUSBInterface(BootVendorProtocol):
    """CC1800 boot mode USB interface.

    :cvar identifier: Interface type identifier for USB communication.
    """

    device: UsbDevice
    identifier = "usb"

    def __init__(self, device: UsbDevice) -> None:
        """Initialize the BootUSBInterface object.

        :param device: The USB device instance to be used for communication.
        """
        super().__init__(device=device)

    @classmethod
    def scan(cls, usb_id: Optional[str] = None, timeout: Optional[int] = None) -> list[Self]:
        """Scan connected USB devices.

        :param usb_id: Identifier in 'VID:PID' format, defaults to the CC1800 boot mode.
        :param timeout: Read/write timeout in milliseconds.
        :return: List of matching interfaces.
        """
        vid, pid = UsbId.parse(usb_id) if usb_id else DEFAULT_USB_ID
        return [cls(device) for device in UsbDevice.scan(vid=vid, pid=pid, timeout=timeout)]

    @classmethod
    def find(cls, usb_id: Optional[str] = None, timeout: Optional[int] = None) -> Self:
        """Find the boot mode device.

        When several devices match, the first one is used.

        :param usb_id: Identifier in 'VID:PID' format, defaults to the CC1800 boot mode.
        :param timeout: Read/write timeout in milliseconds.
        :return: Interface of the found device.
        :raises BootDeviceNotFoundError: No matching device is attached.
        """
        usb_id = usb_id or str(DEFAULT_USB_ID)
        try:
            return cls.scan_single(usb_id=usb_id, timeout=timeout)
        except CCBootNoDeviceFoundError as exc:
            raise BootDeviceNotFoundError(f"No device with USB identifier {usb_id} found") from exc
        except CCBootMultipleDevicesFoundError as exc:
            logger.warning(str(exc))
            return exc.interfaces[0]  # type: ignore[return-value]
