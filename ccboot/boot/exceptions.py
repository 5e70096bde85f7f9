#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""Boot protocol exception classes.

Every exception carries the :class:`ErrorKind` it stands for, so callers can
dispatch on ``error.kind`` as well as on the class.
"""

from typing import Optional

from ccboot.boot.error_codes import ErrorKind
from ccboot.exceptions import CCBootConnectionError, CCBootError, CCBootIOError, CCBootValueError


########################################################################################################################
# CC1800 Boot Exceptions
########################################################################################################################
class BootError(CCBootError):
    """Base exception class for boot protocol operations.

    :cvar fmt: Format string template for boot error messages.
    :cvar kind: Error kind of the exception.
    """

    fmt = "BOOT: {description}"
    kind: Optional[ErrorKind] = None


class BootConnectionError(CCBootConnectionError, BootError):
    """Communication with the device failed."""

    fmt = "BOOT: Connection issue -> {description}"
    kind = ErrorKind.TRANSPORT_ERROR


class BootDeviceNotFoundError(BootError):
    """No device with the requested USB identifier is attached."""

    kind = ErrorKind.DEVICE_NOT_FOUND


class BootDeviceOpenError(BootConnectionError):
    """The device was found but could not be opened."""

    kind = ErrorKind.DEVICE_OPEN_FAILED


class BootConfigurationError(BootConnectionError):
    """Selecting the configuration or claiming the interface failed."""

    kind = ErrorKind.CONFIGURATION_FAILED


class BootProbeError(BootConnectionError):
    """The liveness probe (GET_CPU_INFO) failed."""

    fmt = "BOOT: Device does not respond -> {description}"
    kind = ErrorKind.PROBE_FAILED


class BootTimeoutError(BootConnectionError, TimeoutError):
    """A transfer did not complete within the timeout."""

    kind = ErrorKind.TRANSPORT_TIMEOUT


class BootShortTransferError(BootConnectionError):
    """Fewer bytes were moved than requested."""

    fmt = "BOOT: {operation} transferred {actual} of {expected} bytes"
    kind = ErrorKind.SHORT_TRANSFER

    def __init__(self, operation: str, expected: int, actual: int) -> None:
        """Initialize the short transfer exception.

        :param operation: Name of the operation, e.g. 'Upload'.
        :param expected: Number of bytes requested.
        :param actual: Number of bytes actually transferred.
        """
        super().__init__()
        self.operation = operation
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return self.fmt.format(operation=self.operation, expected=self.expected, actual=self.actual)


class BootVerificationError(BootError):
    """Data read back from the device differ from the data written."""

    fmt = "BOOT: Data mismatch at address 0x{address:08X} (offset {offset} of {length} bytes)"
    kind = ErrorKind.VERIFICATION_MISMATCH

    def __init__(self, address: int, length: int, offset: int) -> None:
        """Initialize the verification exception.

        :param address: Start address of the verified block.
        :param length: Length of the verified block.
        :param offset: Offset of the first differing byte.
        """
        super().__init__()
        self.address = address
        self.length = length
        self.offset = offset

    def __str__(self) -> str:
        return self.fmt.format(
            address=self.address + self.offset, offset=self.offset, length=self.length
        )


class BootFileAccessError(CCBootIOError, BootError):
    """Loading the payload or storing the downloaded data failed."""

    fmt = "BOOT: {description}"
    kind = ErrorKind.FILE_ACCESS_ERROR


class BootUnknownCommandError(BootError):
    """The command list contains an unknown command name."""

    fmt = "BOOT: unknown command '{description}'"
    kind = ErrorKind.UNKNOWN_COMMAND


class BootInvalidArgumentError(CCBootValueError, BootError):
    """A command argument is missing, malformed or out of range."""

    fmt = "BOOT: {description}"
    kind = ErrorKind.INVALID_ARGUMENT
