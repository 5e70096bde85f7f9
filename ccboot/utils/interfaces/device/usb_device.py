#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot USB device interface implementation.

This module provides low-level USB device communication functionality based on
the pyusb library: device enumeration by VID/PID, configuration, interface
claiming and blocking control and bulk transfers.
"""

import logging
from typing import Any, Optional, Union

import usb.core
import usb.util
from typing_extensions import Self

from ccboot.exceptions import CCBootConnectionError, CCBootError
from ccboot.utils.exceptions import (
    CCBootDeviceConfigError,
    CCBootDeviceOpenError,
    CCBootTimeoutError,
)
from ccboot.utils.interfaces.device.base import DeviceBase

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5000
DEFAULT_CONFIGURATION = 1
DEFAULT_INTERFACE = 0


class UsbDevice(DeviceBase):
    """USB device interface built on pyusb.

    Wraps a single ``usb.core.Device``. Opening the device selects the
    configuration and claims the interface; closing releases the interface and
    frees the underlying handle.
    """

    def __init__(
        self,
        device: Any,
        configuration: int = DEFAULT_CONFIGURATION,
        interface_number: int = DEFAULT_INTERFACE,
        timeout: Optional[int] = None,
    ) -> None:
        """Initialize the USB interface object.

        :param device: pyusb device object as returned by ``usb.core.find``.
        :param configuration: Configuration value to select when opening.
        :param interface_number: Interface to claim when opening.
        :param timeout: Communication timeout in milliseconds, defaults to 5000ms.
        """
        self._opened = False
        self._device = device
        self.vid: int = device.idVendor
        self.pid: int = device.idProduct
        self.bus: int = getattr(device, "bus", 0) or 0
        self.address: int = getattr(device, "address", 0) or 0
        self.configuration = configuration
        self.interface_number = interface_number
        self._timeout = timeout or DEFAULT_TIMEOUT

    @property
    def timeout(self) -> int:
        """Get timeout value for USB device communication.

        :return: Timeout value in milliseconds for USB operations.
        """
        return self._timeout

    @timeout.setter
    def timeout(self, value: int) -> None:
        """Set timeout value for USB device communication.

        :param value: Timeout value in milliseconds for USB operations.
        """
        self._timeout = value

    @property
    def is_opened(self) -> bool:
        """Indicates whether device is open.

        :return: True if device is open, False otherwise.
        """
        return self._opened

    def open(self) -> None:
        """Open the USB device, set its configuration and claim the interface.

        A kernel driver bound to the interface is detached first.

        :raises CCBootError: If device is already opened.
        :raises CCBootDeviceOpenError: If the device handle cannot be opened.
        :raises CCBootDeviceConfigError: If the configuration or the interface cannot be set.
        """
        logger.debug(f"Opening the Interface: {str(self)}")
        if self.is_opened:
            raise CCBootError("Can't open already opened device")
        try:
            if self._device.is_kernel_driver_active(self.interface_number):
                logger.debug(f"Detaching kernel driver from interface {self.interface_number}")
                self._device.detach_kernel_driver(self.interface_number)
        except NotImplementedError:
            # kernel drivers can't be queried on this platform
            pass
        except usb.core.USBError as error:
            usb.util.dispose_resources(self._device)
            raise CCBootDeviceOpenError(f"Unable to open device '{str(self)}': {error}") from error

        try:
            self._device.set_configuration(self.configuration)
        except usb.core.USBError as error:
            usb.util.dispose_resources(self._device)
            raise CCBootDeviceConfigError(
                f"Cannot set configuration {self.configuration} on '{str(self)}': {error}"
            ) from error

        try:
            usb.util.claim_interface(self._device, self.interface_number)
        except usb.core.USBError as error:
            usb.util.dispose_resources(self._device)
            raise CCBootDeviceConfigError(
                f"Cannot claim interface {self.interface_number} on '{str(self)}': {error}"
            ) from error
        self._opened = True

    def close(self) -> None:
        """Release the interface and close the USB device.

        If the device is not currently opened, the method does nothing. A failure
        to release the interface (e.g. the device was unplugged) is only logged.
        """
        logger.debug(f"Closing the Interface: {str(self)}")
        if not self.is_opened:
            return
        try:
            usb.util.release_interface(self._device, self.interface_number)
        except usb.core.USBError as error:
            logger.warning(f"Error releasing interface {self.interface_number}: {error}")
        finally:
            usb.util.dispose_resources(self._device)
            self._opened = False

    def control_transfer(
        self,
        request_type: int,
        request: int,
        value: int = 0,
        index: int = 0,
        data_or_length: Optional[Union[bytes, int]] = None,
        timeout: Optional[int] = None,
    ) -> Union[bytes, int]:
        """Perform a control transfer on the default endpoint.

        :param request_type: bmRequestType field; bit 7 set means device-to-host.
        :param request: bRequest field.
        :param value: wValue field.
        :param index: wIndex field.
        :param data_or_length: Payload for host-to-device requests, length to read otherwise.
        :param timeout: Timeout in milliseconds, uses default if None.
        :return: Data read for device-to-host requests, number of bytes sent otherwise.
        :raises CCBootConnectionError: Device is not opened or the transfer failed.
        :raises CCBootTimeoutError: The transfer timed out.
        """
        timeout = timeout or self.timeout
        if not self.is_opened:
            raise CCBootConnectionError("Device is not opened for control transfer")
        try:
            result = self._device.ctrl_transfer(
                request_type, request, value, index, data_or_length, timeout=timeout
            )
        except usb.core.USBTimeoutError as e:
            raise CCBootTimeoutError(f"Control request 0x{request:02X} timed out") from e
        except usb.core.USBError as e:
            raise CCBootConnectionError(str(e)) from e
        if request_type & usb.util.CTRL_IN:
            return bytes(result)
        return int(result)

    def bulk_write(self, endpoint: int, data: bytes, timeout: Optional[int] = None) -> int:
        """Write data to a bulk OUT endpoint.

        :param endpoint: Endpoint address.
        :param data: Data to be written.
        :param timeout: Timeout in milliseconds, uses default if None.
        :return: Number of bytes actually written.
        :raises CCBootConnectionError: Device is not opened or the transfer failed.
        :raises CCBootTimeoutError: The transfer timed out.
        """
        timeout = timeout or self.timeout
        if not self.is_opened:
            raise CCBootConnectionError("Device is not opened for writing")
        try:
            return self._device.write(endpoint, data, timeout=timeout)
        except usb.core.USBTimeoutError as e:
            raise CCBootTimeoutError(f"Bulk write to endpoint 0x{endpoint:02X} timed out") from e
        except usb.core.USBError as e:
            raise CCBootConnectionError(str(e)) from e

    def bulk_read(self, endpoint: int, length: int, timeout: Optional[int] = None) -> bytes:
        """Read data from a bulk IN endpoint.

        :param endpoint: Endpoint address.
        :param length: Number of bytes to read.
        :param timeout: Timeout in milliseconds, uses default if None.
        :return: Data actually read.
        :raises CCBootConnectionError: Device is not opened or the transfer failed.
        :raises CCBootTimeoutError: The transfer timed out.
        """
        timeout = timeout or self.timeout
        if not self.is_opened:
            raise CCBootConnectionError("Device is not opened for reading")
        try:
            return bytes(self._device.read(endpoint, length, timeout=timeout))
        except usb.core.USBTimeoutError as e:
            raise CCBootTimeoutError(f"Bulk read from endpoint 0x{endpoint:02X} timed out") from e
        except usb.core.USBError as e:
            raise CCBootConnectionError(str(e)) from e

    def __str__(self) -> str:
        """Return string representation of the USB device interface.

        :return: VID/PID in hexadecimal format together with bus and device address.
        """
        return f"(0x{self.vid:04X}, 0x{self.pid:04X}) bus={self.bus:03d} address={self.address:03d}"

    @classmethod
    def scan(cls, vid: int, pid: int, timeout: Optional[int] = None) -> list[Self]:
        """Scan connected USB devices with given VID/PID.

        :param vid: USB vendor ID.
        :param pid: USB product ID.
        :param timeout: Read/write timeout in milliseconds.
        :return: List of matching USB devices.
        :raises CCBootConnectionError: No usable USB backend was found.
        """
        try:
            devices = usb.core.find(find_all=True, idVendor=vid, idProduct=pid)
            found = list(devices) if devices else []
        except usb.core.NoBackendError as e:
            raise CCBootConnectionError("No USB backend (libusb) available") from e
        logger.debug(f"Found {len(found)} device(s) with VID:PID 0x{vid:04X}:0x{pid:04X}")
        return [cls(device, timeout=timeout) for device in found]
