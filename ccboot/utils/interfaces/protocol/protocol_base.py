#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot protocol base interface for device communication.

This module provides the abstract base class and the discovery exceptions for
protocols layered over a :class:`DeviceBase` transport.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any, Optional, Sequence, Type, Union

from typing_extensions import Self

from ccboot.exceptions import CCBootAttributeError, CCBootError
from ccboot.utils.interfaces.commands import CmdPacketBase
from ccboot.utils.interfaces.device.base import DeviceBase


class CCBootNoDeviceFoundError(CCBootError):
    """No device matching the scan parameters was found."""

    def __init__(self, interface: str, scan_params: str) -> None:
        """Initialize the CCBootNoDeviceFoundError exception.

        :param interface: Interface identifier string.
        :param scan_params: Interface parameters used for scanning devices.
        """
        super().__init__()
        self.interface = interface
        self.scan_params = scan_params

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Error message with the interface and the scan parameters.
        """
        return (
            f"No devices for given interface '{self.interface}' "
            f"and parameters '{self.scan_params}' was found."
        )


class CCBootMultipleDevicesFoundError(CCBootError):
    """More than one device matches the scan parameters."""

    def __init__(
        self,
        interface: str,
        scan_params: str,
        interfaces: Optional[Sequence["ProtocolBase"]] = None,
    ) -> None:
        """Initialize the CCBootMultipleDevicesFoundError exception.

        :param interface: Interface identifier used for device scanning.
        :param scan_params: Interface parameters used for scanning devices.
        :param interfaces: Protocol interfaces found during the scan.
        """
        super().__init__()
        self.interface = interface
        self.scan_params = scan_params
        self.interfaces = interfaces or []

    def __str__(self) -> str:
        """Return string representation of the multiple devices error.

        :return: Error message with enumerated list of detected devices.
        """
        msg = (
            f"Multiple devices for given interface '{self.interface}' and "
            f"parameters '{self.scan_params}' were found."
        )
        for idx, interface in enumerate(self.interfaces):
            msg += f"\n Device #{idx}: {str(interface.device)}"
        return msg


class ProtocolBase(ABC):
    """Abstract base class for communication protocols.

    A protocol owns a device and is a context manager over it.
    """

    device: DeviceBase
    identifier: str

    def __init__(self, device: DeviceBase) -> None:
        """Initialize the protocol object.

        :param device: The device instance to be used for communication.
        """
        self.device = device

    def __str__(self) -> str:
        """Get string representation of the protocol interface.

        :return: String representation in format "identifier='<id>', device=<device>".
        """
        return f"identifier='{self.identifier}', device={self.device}"

    def __enter__(self) -> Self:
        self.open()
        return self

    def __exit__(
        self,
        exception_type: Optional[Type[Exception]] = None,
        exception_value: Optional[Exception] = None,
        traceback: Optional[TracebackType] = None,
    ) -> None:
        self.close()

    @abstractmethod
    def open(self) -> None:
        """Open the interface.

        :raises CCBootError: If the interface cannot be opened or is already open.
        """

    @abstractmethod
    def close(self) -> None:
        """Close the interface and release associated resources."""

    @property
    @abstractmethod
    def is_opened(self) -> bool:
        """Indicates whether interface is open.

        :return: True if interface is open, False otherwise.
        """

    @classmethod
    def scan_single(cls, *args: Any, **kwargs: Any) -> Self:
        """Scan the existing connected devices and return a single interface.

        :param args: Positional arguments passed to the scan method.
        :param kwargs: Keyword arguments passed to the scan method.
        :raises CCBootAttributeError: If interface 'scan' method is not implemented.
        :raises CCBootNoDeviceFoundError: If no device is found.
        :raises CCBootMultipleDevicesFoundError: If multiple devices are found.
        :return: Single interface instance from the scan results.
        """
        try:
            scan = getattr(cls, "scan")
        except AttributeError as e:
            raise CCBootAttributeError("The scan method for the interface isn't implemented.") from e
        interfaces = scan(*args, **kwargs)
        # build a string containing params for the scan method
        params_groups = []
        args_str = ", ".join(str(arg) for arg in args)
        if args_str:
            params_groups.append(args_str)
        kwargs_str = ", ".join(f"{key}={value}" for key, value in kwargs.items())
        if kwargs_str:
            params_groups.append(kwargs_str)
        params_str = ", ".join(params_groups)
        if len(interfaces) == 0:
            raise CCBootNoDeviceFoundError(cls.identifier, params_str)
        if len(interfaces) > 1:
            raise CCBootMultipleDevicesFoundError(cls.identifier, params_str, interfaces)
        return interfaces[0]

    @abstractmethod
    def write_command(self, packet: CmdPacketBase) -> Union[bytes, int]:
        """Send a command to the device.

        :param packet: Command packet to be sent.
        :return: Response data for commands with an IN data stage, sent length otherwise.
        """

    @abstractmethod
    def write_data(self, data: bytes) -> int:
        """Write payload data to the device.

        :param data: Data to be sent to the device.
        :return: Number of bytes actually sent.
        """

    @abstractmethod
    def read(self, length: Optional[int] = None) -> bytes:
        """Read payload data from device.

        :param length: Number of bytes to read.
        :return: Data read from the device.
        """
