#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot device interface base class.

This module provides the abstract base class of the transport used by the boot
protocol: a device handle that can be opened and closed once and that performs
blocking control and bulk transfers with a per-call timeout.
"""

import logging
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type, Union

from typing_extensions import Self

logger = logging.getLogger(__name__)


class DeviceBase(ABC):
    """Abstract base class for device communication interfaces.

    Concrete devices provide the control and bulk transfer primitives. The class
    also acts as a context manager, so a device opened in a ``with`` block is
    closed on every exit path.
    """

    def __enter__(self) -> Self:
        """Open the device and return it for use in the 'with' block.

        :return: The device instance itself.
        """
        self.open()
        return self

    def __exit__(
        self,
        exception_type: Optional[Type[Exception]] = None,
        exception_value: Optional[Exception] = None,
        traceback: Optional[TracebackType] = None,
    ) -> None:
        """Close the device when leaving the 'with' block.

        :param exception_type: Type of exception that caused the context to exit, if any.
        :param exception_value: Exception instance that caused the context to exit, if any.
        :param traceback: Traceback object associated with the exception, if any.
        """
        self.close()

    @property
    @abstractmethod
    def is_opened(self) -> bool:
        """Indicates whether interface is open.

        :return: True if interface is open, False otherwise.
        """

    @abstractmethod
    def open(self) -> None:
        """Open the device, select its configuration and claim the interface.

        :raises CCBootDeviceOpenError: If the device handle cannot be opened.
        :raises CCBootDeviceConfigError: If the configuration or interface cannot be set.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the interface and close the device handle."""

    @abstractmethod
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
        :param timeout: Timeout in milliseconds, None for default timeout.
        :return: Data read for device-to-host requests, number of bytes sent otherwise.
        """

    @abstractmethod
    def bulk_write(self, endpoint: int, data: bytes, timeout: Optional[int] = None) -> int:
        """Write data to a bulk OUT endpoint.

        :param endpoint: Endpoint address.
        :param data: Data to be written.
        :param timeout: Timeout in milliseconds, None for default timeout.
        :return: Number of bytes actually written.
        """

    @abstractmethod
    def bulk_read(self, endpoint: int, length: int, timeout: Optional[int] = None) -> bytes:
        """Read data from a bulk IN endpoint.

        :param endpoint: Endpoint address.
        :param length: Number of bytes to read.
        :param timeout: Timeout in milliseconds, None for default timeout.
        :return: Data actually read, possibly shorter than requested.
        """

    @property
    @abstractmethod
    def timeout(self) -> int:
        """Get the timeout value for device communication.

        :return: Timeout value in milliseconds.
        """

    @timeout.setter
    @abstractmethod
    def timeout(self, value: int) -> None:
        """Set timeout value for device communication.

        :param value: Timeout value in milliseconds.
        """

    @abstractmethod
    def __str__(self) -> str:
        """Return string containing information about the interface."""
