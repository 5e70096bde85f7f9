#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""CC1800 boot protocol requests.

This module provides the vendor request codes, the encoding of 32-bit values into
the two 16-bit setup fields and the control request packet.
"""

from struct import pack

from ccboot.boot.exceptions import BootInvalidArgumentError
from ccboot.utils.ccboot_enum import CCBootEnum
from ccboot.utils.interfaces.commands import CmdPacketBase
from ccboot.utils.misc import check_range

REQUEST_TYPE_VENDOR = 0x40
DIRECTION_IN = 0x80

BULK_ENDPOINT = 1
BULK_ENDPOINT_OUT = BULK_ENDPOINT
BULK_ENDPOINT_IN = BULK_ENDPOINT | DIRECTION_IN

CPU_INFO_LENGTH = 8
STATUS_LENGTH = 1

WRITE_FLAG = 1 << 31
MAX_LENGTH = WRITE_FLAG - 1


########################################################################################################################
# CC1800 Vendor Requests
########################################################################################################################
class RequestCode(CCBootEnum):
    """CC1800 boot mode vendor requests (bRequest values)."""

    GET_CPU_INFO = (0x00, "GetCpuInfo", "Read the 8 byte CPU identifier")
    SET_ADDRESS = (0x01, "SetAddress", "Set the target memory address")
    SET_LENGTH = (0x02, "SetLength", "Set the transfer length and direction")
    GET_STATUS = (0x03, "GetStatus", "Read one status byte")
    EXECUTE = (0x04, "Execute", "Execute code at the last set address")


# length of the data stage of device-to-host requests
IN_REQUESTS = {
    RequestCode.GET_CPU_INFO.tag: CPU_INFO_LENGTH,
    RequestCode.GET_STATUS.tag: STATUS_LENGTH,
}


def split_value(value: int) -> tuple[int, int]:
    """Split 32-bit value into the high and low 16-bit halves.

    :param value: Unsigned 32-bit value.
    :return: Tuple (high, low) used as wValue and wIndex.
    :raises BootInvalidArgumentError: Value doesn't fit into 32 bits.
    """
    if not check_range(value):
        raise BootInvalidArgumentError(f"Value 0x{value:X} doesn't fit into 32 bits")
    return (value >> 16) & 0xFFFF, value & 0xFFFF


def join_value(high: int, low: int) -> int:
    """Join the high and low 16-bit halves back into 32-bit value.

    :param high: Upper 16 bits (wValue).
    :param low: Lower 16 bits (wIndex).
    :return: Unsigned 32-bit value.
    """
    return ((high & 0xFFFF) << 16) | (low & 0xFFFF)


def encode_length(length: int, is_write: bool) -> int:
    """Encode transfer length and direction into the SET_LENGTH value.

    :param length: Transfer length in bytes.
    :param is_write: True for host-to-device transfer (upload).
    :return: Length with bit 31 set for writes and cleared for reads.
    :raises BootInvalidArgumentError: Length doesn't fit into 31 bits.
    """
    if not check_range(length, end=MAX_LENGTH):
        raise BootInvalidArgumentError(f"Transfer length {length} is out of range")
    return length | WRITE_FLAG if is_write else length


def decode_length(value: int) -> tuple[int, bool]:
    """Decode SET_LENGTH value into length and direction.

    :param value: Encoded 32-bit value.
    :return: Tuple (length, is_write).
    """
    return value & MAX_LENGTH, bool(value & WRITE_FLAG)


class ControlRequest(CmdPacketBase):
    """Vendor control request packet.

    The 32-bit argument travels in the setup stage: the upper half in wValue,
    the lower half in wIndex. Device-to-host requests have a fixed length data
    stage, host-to-device requests have none.
    """

    FORMAT = "<BBHHH"

    def __init__(self, code: RequestCode, value: int = 0) -> None:
        """Initialize the control request.

        :param code: Vendor request code.
        :param value: 32-bit argument of the request.
        """
        self.code = code
        self.value = value
        self.w_value, self.w_index = split_value(value)

    @property
    def is_in(self) -> bool:
        """Whether the request has a device-to-host data stage."""
        return self.code.tag in IN_REQUESTS

    @property
    def request_type(self) -> int:
        """The bmRequestType of the request."""
        return REQUEST_TYPE_VENDOR | (DIRECTION_IN if self.is_in else 0)

    @property
    def length(self) -> int:
        """Length of the data stage (wLength)."""
        return IN_REQUESTS.get(self.code.tag, 0)

    def __str__(self) -> str:
        return (
            f"Request={self.code.label}, Type=0x{self.request_type:02X}, "
            f"Value=0x{self.w_value:04X}, Index=0x{self.w_index:04X}, Length={self.length}"
        )

    def export(self) -> bytes:
        """Return the 8 byte USB setup packet of the request.

        :return: Setup packet as bytes.
        """
        return pack(
            self.FORMAT, self.request_type, self.code.tag, self.w_value, self.w_index, self.length
        )
