#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""CC1800 USB boot mode communication.

This module provides the UsbBoot class implementing the vendor requests of the
CC1800 boot ROM and the upload, download and execute sequences built from them.

The boot ROM keeps two registers between requests: the target address and the
transfer length with its direction. Every bulk transfer must directly follow
the SET_LENGTH request that armed it and EXECUTE jumps to whatever address the
device holds. The host never reads these registers back, so the client keeps
an explicit mirror of them in :class:`RegisterContext`.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from ccboot.boot.commands import ControlRequest, RequestCode, encode_length
from ccboot.boot.exceptions import (
    BootConnectionError,
    BootError,
    BootShortTransferError,
    BootVerificationError,
)
from ccboot.boot.protocol.vendor_protocol import BootVendorProtocol

logger = logging.getLogger(__name__)


@dataclass
class RegisterContext:
    """Host side mirror of the device address and length registers.

    ``armed`` is True between SET_LENGTH and the bulk transfer it announces;
    any other request disarms it.
    """

    address: Optional[int] = None
    length: Optional[int] = None
    is_write: Optional[bool] = None
    armed: bool = False

    def reset(self) -> None:
        """Forget the mirrored state (e.g. after reconnect)."""
        self.address = None
        self.length = None
        self.is_write = None
        self.armed = False

    def __str__(self) -> str:
        address = "unknown" if self.address is None else f"0x{self.address:08X}"
        direction = {None: "unknown", True: "write", False: "read"}[self.is_write]
        return f"Address={address}, Length={self.length}, Direction={direction}"


########################################################################################################################
# CC1800 USB Boot Class
########################################################################################################################
class UsbBoot:
    """Client of the CC1800 USB boot mode.

    All operations are blocking and strictly sequential. Composite operations
    are never retried: after a failure the whole sequence has to be started
    again from SET_ADDRESS.
    """

    def __init__(self, interface: BootVendorProtocol) -> None:
        """Initialize the UsbBoot object.

        :param interface: Protocol interface of the device.
        """
        self._interface = interface
        self.registers = RegisterContext()

    @property
    def is_opened(self) -> bool:
        """Check interface connection status.

        :return: True if device is open, False if it's closed.
        """
        return self._interface.is_opened

    @property
    def timeout(self) -> int:
        """Per-request timeout in milliseconds."""
        return self._interface.device.timeout

    @timeout.setter
    def timeout(self, value: int) -> None:
        self._interface.device.timeout = value

    def __enter__(self) -> "UsbBoot":
        self.open()
        return self

    def __exit__(self, *args: Any, **kwargs: Any) -> None:
        self.close()

    def open(self) -> None:
        """Connect to the device.

        :raises BootDeviceOpenError: The device cannot be opened.
        :raises BootConfigurationError: The configuration or interface cannot be set.
        """
        logger.info(f"Connect: {str(self._interface)}")
        self._interface.open()
        self.registers.reset()

    def close(self) -> None:
        """Close the connection to the device."""
        self._interface.close()

    def _request(self, code: RequestCode, value: int = 0) -> Union[bytes, int]:
        """Send one vendor request.

        :param code: Request code.
        :param value: 32-bit argument.
        :return: Response of the interface.
        :raises BootConnectionError: The device is disconnected or the request failed.
        """
        if not self.is_opened:
            logger.info("TX-REQ: Device Disconnected")
            raise BootConnectionError("Device Disconnected !")
        packet = ControlRequest(code, value)
        logger.debug(f"TX-PACKET: {str(packet)}")
        self.registers.armed = False
        return self._interface.write_command(packet)

    def get_cpu_info(self) -> bytes:
        """Read the CPU identifier.

        Serves as liveness probe; the registers are not affected.

        :return: Identifier bytes (8 bytes).
        """
        logger.info("TX-REQ: GetCpuInfo()")
        response = self._request(RequestCode.GET_CPU_INFO)
        assert isinstance(response, bytes)
        logger.info(f"RX-DATA: CPU info {response!r}")
        return response

    def set_address(self, address: int) -> None:
        """Set the target address register.

        :param address: 32-bit memory address.
        """
        logger.info(f"TX-REQ: SetAddress(address=0x{address:08X})")
        self._request(RequestCode.SET_ADDRESS, address)
        self.registers.address = address

    def set_length(self, length: int, is_write: bool) -> None:
        """Set the transfer length and direction register.

        Must be issued right before the bulk transfer it announces.

        :param length: Transfer length in bytes.
        :param is_write: True for upload, False for download.
        """
        logger.info(f"TX-REQ: SetLength(length={length}, write={is_write})")
        self._request(RequestCode.SET_LENGTH, encode_length(length, is_write))
        self.registers.length = length
        self.registers.is_write = is_write
        self.registers.armed = True

    def get_status(self) -> bytes:
        """Read the one byte status.

        The meaning of the status byte is not known; the value is returned raw.

        :return: Status byte(s) as returned by the device.
        """
        logger.info("TX-REQ: GetStatus()")
        response = self._request(RequestCode.GET_STATUS)
        assert isinstance(response, bytes)
        return response

    def execute(self) -> None:
        """Start execution at the address held by the device."""
        logger.info(f"TX-REQ: Execute() at {self.registers}")
        self._request(RequestCode.EXECUTE)

    def _check_armed(self, length: int, is_write: bool) -> None:
        registers = self.registers
        if not (registers.armed and registers.length == length and registers.is_write == is_write):
            raise BootError(f"Bulk transfer not announced by SET_LENGTH ({registers})")
        registers.armed = False

    def upload(self, data: bytes, address: int) -> int:
        """Write data into the device memory.

        :param data: Data to write.
        :param address: Target address.
        :return: Number of bytes written.
        :raises BootShortTransferError: The device accepted fewer bytes.
        """
        logger.info(f"TX-CMD: Upload(address=0x{address:08X}, length={len(data)})")
        self.set_address(address)
        self.set_length(len(data), is_write=True)
        self._check_armed(len(data), is_write=True)
        written = self._interface.write_data(data)
        if written != len(data):
            raise BootShortTransferError("Upload", len(data), written)
        return written

    def download(self, length: int, address: int) -> bytes:
        """Read data from the device memory.

        :param length: Number of bytes to read.
        :param address: Source address.
        :return: Data read.
        :raises BootShortTransferError: The device returned fewer bytes.
        """
        logger.info(f"TX-CMD: Download(address=0x{address:08X}, length={length})")
        self.set_address(address)
        self.set_length(length, is_write=False)
        self._check_armed(length, is_write=False)
        data = self._interface.read(length)
        if len(data) != length:
            raise BootShortTransferError("Download", length, len(data))
        return data

    def verify(self, data: bytes, address: int) -> None:
        """Read back data from the device and compare them with the expected ones.

        :param data: Expected data.
        :param address: Start address.
        :raises BootVerificationError: The data differ.
        """
        readback = self.download(len(data), address)
        offset = next((i for i, (a, b) in enumerate(zip(data, readback)) if a != b), None)
        if offset is not None:
            raise BootVerificationError(address, len(data), offset)

    def upload_verify_execute(self, data: bytes, address: int) -> None:
        """Write data, verify them and start execution at their address.

        Execution is not started when the verification fails.

        :param data: Code to write.
        :param address: Load and entry address.
        :raises BootVerificationError: Read back data differ; nothing was executed.
        """
        self.upload(data, address)
        self.verify(data, address)
        # verify's download left the address register at `address`
        self.execute()
