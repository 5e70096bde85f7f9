#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot - host tool for the CC1800 USB boot mode.

The ChinaChip CC1800 ROM bootloader enumerates as a vendor specific USB device
when no bootable media is found. It accepts a handful of control requests to
set a target address and transfer length, moves data over bulk endpoint 1 and
can start execution at the last configured address.

This package provides the protocol client, a command interpreter and the
``ccboot`` command line tool built on top of them.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_ccboot_version() -> Version:
    """Get ccboot version information.

    Retrieves the version either from the generated __version__ module or dynamically
    using setuptools_scm if the version file is not available.

    :return: Parsed version object.
    """
    try:
        from .__version__ import __version__ as ccboot_version
    except ImportError:
        from setuptools_scm import get_version

        ccboot_version = get_version(
            root=os.path.join(os.path.dirname(os.path.abspath(__file__)), ".."),
            fallback_version="1.0.0",
        )
    return parse(ccboot_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_ccboot_version()

__author__ = "ccboot contributors"
__license__ = "BSD-3-Clause"
__version__ = str(version)
__release__ = "beta"


# The ccboot behavior settings
CCBOOT_VERSION_BASE = version.base_version
CCBOOT_PLATFORM_DIRS = PlatformDirs(
    appauthor="ccboot",
    appname="ccboot",
    version=CCBOOT_VERSION_BASE,
    ensure_exists=True,
)

CCBOOT_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("CCBOOT_DEBUG_LOGGING_DISABLED"))
CCBOOT_DEBUG_LOG_FILE = os.environ.get(
    "CCBOOT_DEBUG_LOG_FILE", os.path.join(CCBOOT_PLATFORM_DIRS.user_log_dir, "debug.log")
)

# user level configuration (e.g. logging.yaml) lives here
CCBOOT_USER_CONFIG_DIR = os.path.expanduser("~/.ccboot")
