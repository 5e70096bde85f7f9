#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot application utilities.

This module provides the application error, the integer click parameter type
and the decorator translating exceptions into process exit codes.
"""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from ccboot import CCBOOT_DEBUG_LOG_FILE, CCBOOT_DEBUG_LOGGING_DISABLED
from ccboot.exceptions import CCBootError
from ccboot.utils.misc import value_to_int

logger = logging.getLogger(__name__)


class CCBootAppError(CCBootError):
    """ccboot application error exception for CLI tools.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"


class INT(click.ParamType):
    """Click parameter type for integers in hexadecimal (0x prefix) or decimal format.

    :cvar name: Parameter type name used by Click framework.
    """

    name = "integer"

    # pylint: disable=inconsistent-return-statements
    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter] = None,
        ctx: Optional[click.Context] = None,
    ) -> int:
        """Perform the conversion str -> int.

        :param value: value to convert
        :param param: Click parameter, defaults to None
        :param ctx: Click context, defaults to None
        :return: value as integer
        """
        try:
            return value_to_int(value)
        except CCBootError:
            self.fail(f"{value!r} is not a valid integer", param, ctx)


def catch_ccboot_error(function: Callable) -> Callable:
    """Catch and handle CCBootError and other exceptions.

    Exit codes:
    1 - CCBootAppError,
    2 - CCBootError or AssertionError,
    3 - any other exception including KeyboardInterrupt.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except CCBootAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            sys.exit(1)
        except (AssertionError, CCBootError) as ccboot_exc:
            click.echo(f"{ccboot_exc.__class__.__name__}: {ccboot_exc}", err=True)
            logger.debug(str(ccboot_exc), exc_info=True)
            if not CCBOOT_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {CCBOOT_DEBUG_LOG_FILE} for more info", fg="yellow"
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not CCBOOT_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {CCBOOT_DEBUG_LOG_FILE} for more info.", fg="yellow"
                )
            sys.exit(3)

    return wrapper
