#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI helper for Click."""

import logging
from typing import Any, Callable, TypeVar, Union

import click

from ccboot import __version__ as ccboot_version
from ccboot.apps.utils.utils import INT
from ccboot.boot.interfaces.usb import DEFAULT_USB_ID

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])
logger = logging.getLogger(__name__)


def ccboot_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(ccboot_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def timeout_option(timeout: int = 5000) -> Callable[[FC], FC]:
    """Get the timeout option.

    Provides: `timeout: int` timeout of each USB request in milliseconds.

    :param timeout: Default timeout in milliseconds
    :return: click decorator
    """
    return click.option(
        "-t",
        "--timeout",
        metavar="<ms>",
        type=INT(),
        help=f"Sets timeout of each USB request. The default is {timeout} milliseconds.",
        default=timeout,
    )


def usb_option() -> Callable[[FC], FC]:
    """Click decorator handling USB device selection.

    Provides: `usb: str` a usb identifier.

    :return: Click decorator.
    """
    return click.option(
        "-u",
        "--usb",
        metavar="VID:PID",
        help=f"""USB device identifier, the default is {DEFAULT_USB_ID}.

        \b
        <vid:pid>: hex or dec numbers; e.g. 0x2009:0x1218, 8201:4632.
        """,
    )
