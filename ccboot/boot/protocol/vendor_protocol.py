#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""CC1800 vendor request protocol implementation.

This module provides the BootVendorProtocol class that sends vendor control
requests on the default endpoint and moves payload data over bulk endpoint 1.
Errors raised by the device layer are translated into the boot exceptions.
"""

import logging
from typing import Optional, Union

from ccboot.boot.commands import BULK_ENDPOINT_IN, BULK_ENDPOINT_OUT, ControlRequest
from ccboot.boot.exceptions import (
    BootConfigurationError,
    BootConnectionError,
    BootDeviceOpenError,
    BootTimeoutError,
)
from ccboot.exceptions import CCBootAttributeError, CCBootConnectionError
from ccboot.utils.exceptions import (
    CCBootDeviceConfigError,
    CCBootDeviceOpenError,
    CCBootTimeoutError,
)
from ccboot.utils.interfaces.commands import CmdPacketBase
from ccboot.utils.interfaces.protocol.protocol_base import ProtocolBase

logger = logging.getLogger(__name__)

# payload bytes shown in debug log
LOG_PREVIEW_SIZE = 16


def _preview(data: bytes) -> str:
    text = ", ".join(f"{b:02X}" for b in data[:LOG_PREVIEW_SIZE])
    return text + (", ..." if len(data) > LOG_PREVIEW_SIZE else "")


class BootVendorProtocol(ProtocolBase):
    """CC1800 boot mode vendor protocol.

    Control requests are sent through :meth:`write_command`, upload payload
    through :meth:`write_data` and download payload through :meth:`read`.
    """

    def open(self) -> None:
        """Open the interface.

        :raises BootDeviceOpenError: The device cannot be opened.
        :raises BootConfigurationError: The configuration or interface cannot be set.
        """
        try:
            self.device.open()
        except CCBootDeviceOpenError as exc:
            raise BootDeviceOpenError(exc.description) from exc
        except CCBootDeviceConfigError as exc:
            raise BootConfigurationError(exc.description) from exc

    def close(self) -> None:
        """Close the interface."""
        self.device.close()

    @property
    def is_opened(self) -> bool:
        """Indicates whether the interface is open.

        :return: True if interface is open, False otherwise.
        """
        return self.device.is_opened

    def write_command(self, packet: CmdPacketBase) -> Union[bytes, int]:
        """Send vendor control request to the device.

        :param packet: Control request to be sent.
        :return: Data stage of device-to-host requests, sent length otherwise.
        :raises CCBootAttributeError: The packet isn't a control request.
        :raises BootTimeoutError: The request timed out.
        :raises BootConnectionError: The request failed.
        """
        if not isinstance(packet, ControlRequest):
            raise CCBootAttributeError("Incorrect packet type")
        logger.debug(f"SETUP: {packet.export().hex()}")
        try:
            response = self.device.control_transfer(
                request_type=packet.request_type,
                request=packet.code.tag,
                value=packet.w_value,
                index=packet.w_index,
                data_or_length=packet.length if packet.is_in else None,
            )
        except CCBootTimeoutError as exc:
            raise BootTimeoutError(f"{packet.code.label}: {exc.description}") from exc
        except CCBootConnectionError as exc:
            raise BootConnectionError(f"{packet.code.label}: {exc.description}") from exc
        if isinstance(response, bytes):
            logger.debug(f"IN [{len(response)}]: {_preview(response)}")
        return response

    def write_data(self, data: bytes) -> int:
        """Send payload to the bulk OUT endpoint.

        :param data: Data to be sent.
        :return: Number of bytes actually sent.
        :raises BootTimeoutError: The transfer timed out.
        :raises BootConnectionError: The transfer failed.
        """
        logger.debug(f"OUT[{len(data)}]: {_preview(data)}")
        try:
            return self.device.bulk_write(BULK_ENDPOINT_OUT, data)
        except CCBootTimeoutError as exc:
            raise BootTimeoutError(exc.description) from exc
        except CCBootConnectionError as exc:
            raise BootConnectionError(exc.description) from exc

    def read(self, length: Optional[int] = None) -> bytes:
        """Read payload from the bulk IN endpoint.

        :param length: Number of bytes to read.
        :return: Data read from the device.
        :raises BootTimeoutError: The transfer timed out.
        :raises BootConnectionError: The transfer failed.
        """
        if length is None:
            raise CCBootAttributeError("Length of the bulk transfer must be specified")
        try:
            data = self.device.bulk_read(BULK_ENDPOINT_IN, length)
        except CCBootTimeoutError as exc:
            raise BootTimeoutError(exc.description) from exc
        except CCBootConnectionError as exc:
            raise BootConnectionError(exc.description) from exc
        logger.debug(f"IN [{len(data)}]: {_preview(data)}")
        return data
