#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot exception classes.

This module defines the base exception of the package and its typed variants
used for consistent error handling and reporting.
"""

from typing import Optional

#######################################################################
# # ccboot Exceptions
#######################################################################


class CCBootError(Exception):
    """ccboot Base Exception.

    Base exception class for all ccboot related errors. Every exception raised
    on purpose by the package derives from this class so the command line tools
    can report it in a uniform way.

    :cvar fmt: Default error message format template.
    """

    fmt = "CCBOOT: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base ccboot Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class CCBootValueError(CCBootError, ValueError):
    """ccboot standard value error."""


class CCBootIOError(CCBootError, IOError):
    """ccboot standard IO error.

    Raised on file access failures while loading payloads or storing
    downloaded data.
    """


class CCBootAttributeError(CCBootError, AttributeError):
    """ccboot standard attribute error."""


class CCBootConnectionError(CCBootError, ConnectionError):
    """ccboot Connection Error.

    Raised when communication with the device fails, for example when the
    device disappears or refuses a transfer.
    """
