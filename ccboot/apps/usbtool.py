#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""Console script for the CC1800 USB boot mode aka ccboot."""

import sys
from typing import Optional

import click

from ccboot.apps.utils import ccboot_logger
from ccboot.apps.utils.common_cli_options import (
    ccboot_apps_common_options,
    timeout_option,
    usb_option,
)
from ccboot.apps.utils.utils import CCBootAppError, catch_ccboot_error
from ccboot.boot.interfaces.usb import BootUSBInterface
from ccboot.boot.interpreter import CommandInterpreter, parse_commands, parse_script
from ccboot.boot.usbboot import UsbBoot
from ccboot.utils.misc import load_text


@click.command(name="ccboot")
@click.argument("commands", nargs=-1, metavar="COMMANDS...")
@click.option(
    "-s",
    "--script",
    type=click.Path(exists=True, dir_okay=False),
    help="Text file with the commands to run instead of the command line; '#' starts a comment.",
)
@usb_option()
@timeout_option()
@ccboot_apps_common_options
@click.pass_context
def main(
    ctx: click.Context,
    commands: tuple[str, ...],
    script: Optional[str],
    usb: Optional[str],
    timeout: int,
    log_level: int,
) -> None:
    """Utility for communication with ROM on CC1800 targets in USB boot mode.

    Commands are executed from left to right, the device is probed before each of them.

    \b
    write <address> <file>          upload the file and read it back for verification
    read <address> <length> <file>  download memory into the file
    exec                            execute code at the last address

    \b
    Numbers with 0x prefix are hexadecimal, others are decimal.
    Example: ccboot write 0x0 loader.bin exec
    """
    ccboot_logger.install(level=log_level)
    if script and commands:
        raise CCBootAppError("Commands can't be combined with the --script option")
    tokens = parse_script(load_text(script)) if script else list(commands)
    if not tokens:
        click.echo(ctx.get_help())
        ctx.exit(1)

    parsed = parse_commands(tokens)
    interface = BootUSBInterface.find(usb_id=usb, timeout=timeout)
    click.echo(f"Found device {interface.device}")
    with UsbBoot(interface) as boot:
        CommandInterpreter(boot, echo=click.echo).run(parsed)


@catch_ccboot_error
def safe_main() -> None:
    """Calls the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
