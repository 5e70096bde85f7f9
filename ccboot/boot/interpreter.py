#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""Command list interpreter for the CC1800 boot mode.

The command vocabulary is::

    write <address> <file>
    read <address> <length> <file>
    exec

Commands are chained and run left to right. Before each of them the device is
probed with GET_CPU_INFO and the sequence is aborted on the first failure. The
only non-fatal condition is a read back mismatch after ``write``.
"""

import logging
import shlex
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from ccboot.boot.commands import MAX_LENGTH
from ccboot.boot.exceptions import (
    BootError,
    BootFileAccessError,
    BootInvalidArgumentError,
    BootProbeError,
    BootUnknownCommandError,
    BootVerificationError,
)
from ccboot.boot.usbboot import UsbBoot
from ccboot.exceptions import CCBootError, CCBootValueError
from ccboot.utils.ccboot_enum import CCBootEnum
from ccboot.utils.misc import check_range, load_binary, value_to_int, write_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteCommand:
    """Upload a file and verify it."""

    address: int
    source: str

    def __str__(self) -> str:
        return f"write 0x{self.address:08X} {self.source}"


@dataclass(frozen=True)
class ReadCommand:
    """Download memory into a file."""

    address: int
    length: int
    destination: str

    def __str__(self) -> str:
        return f"read 0x{self.address:08X} {self.length} {self.destination}"


@dataclass(frozen=True)
class ExecCommand:
    """Execute at the address held by the device."""

    def __str__(self) -> str:
        return "exec"


Command = Union[WriteCommand, ReadCommand, ExecCommand]


class CommandStatus(CCBootEnum):
    """Outcome of an executed command."""

    COMPLETED = (0, "completed", "Command completed")
    WARNING = (1, "warning", "Command completed with a warning")


@dataclass
class CommandResult:
    """Result of one executed command."""

    command: Command
    status: CommandStatus
    message: Optional[str] = None


def parse_number(text: str, name: str, end: int = 0xFFFF_FFFF) -> int:
    """Parse numeric command argument.

    :param text: Number with 0x prefix (hexadecimal) or without (decimal).
    :param name: Name of the argument used in the error message.
    :param end: Maximal accepted value.
    :return: Parsed value.
    :raises BootInvalidArgumentError: Malformed or out of range number.
    """
    try:
        value = value_to_int(text)
    except CCBootValueError as exc:
        raise BootInvalidArgumentError(f"bad value '{text}' for {name}") from exc
    if not check_range(value, end=end):
        raise BootInvalidArgumentError(f"{name} '{text}' is out of range")
    return value


def parse_commands(tokens: Sequence[str]) -> list[Command]:
    """Parse command line tokens into commands.

    :param tokens: Command names followed by their arguments.
    :return: Commands in the order of appearance.
    :raises BootUnknownCommandError: Unknown command name.
    :raises BootInvalidArgumentError: Missing or malformed argument.
    """
    commands: list[Command] = []
    idx = 0
    while idx < len(tokens):
        name = tokens[idx]
        args = tokens[idx + 1 :]
        if name == "write":
            if len(args) < 2:
                raise BootInvalidArgumentError(
                    "write command requires two arguments (address and file name)"
                )
            commands.append(WriteCommand(parse_number(args[0], "address"), args[1]))
            idx += 3
        elif name == "read":
            if len(args) < 3:
                raise BootInvalidArgumentError(
                    "read command requires three arguments (address, length and file name)"
                )
            commands.append(
                ReadCommand(
                    address=parse_number(args[0], "address"),
                    length=parse_number(args[1], "length", end=MAX_LENGTH),
                    destination=args[2],
                )
            )
            idx += 4
        elif name == "exec":
            commands.append(ExecCommand())
            idx += 1
        else:
            raise BootUnknownCommandError(name)
    return commands


def parse_script(text: str) -> list[str]:
    """Split command script into tokens.

    Any number of commands may share a line, '#' starts a comment and quoted
    file names may contain spaces.

    :param text: Script content.
    :return: List of tokens for :func:`parse_commands`.
    """
    return shlex.split(text, comments=True)


def format_cpu_info(data: bytes) -> str:
    """Convert CPU identifier to text.

    :param data: Raw identifier, possibly zero terminated.
    :return: Printable identifier.
    """
    return data.split(b"\x00", 1)[0].decode("ascii", errors="replace")


class CommandInterpreter:
    """Runs parsed commands against the boot mode client.

    The interpreter does not own the device; the caller opens it before
    :meth:`run` and closes it afterwards.
    """

    def __init__(self, boot: UsbBoot, echo: Optional[Callable[[str], None]] = None) -> None:
        """Initialize the interpreter.

        :param boot: Opened boot mode client.
        :param echo: Callback for operator messages, defaults to logging at INFO level.
        """
        self.boot = boot
        self.echo = echo or logger.info
        self.cpu_info: Optional[str] = None

    def run(self, commands: Sequence[Command]) -> list[CommandResult]:
        """Execute the commands in order.

        :param commands: Parsed commands.
        :return: Result of each command.
        :raises BootError: A fatal error, remaining commands are not executed.
        """
        results: list[CommandResult] = []
        for command in commands:
            self.probe()
            logger.debug(f"Executing command: {command}")
            if isinstance(command, WriteCommand):
                results.append(self._write(command))
            elif isinstance(command, ReadCommand):
                results.append(self._read(command))
            elif isinstance(command, ExecCommand):
                results.append(self._exec(command))
            else:
                raise BootUnknownCommandError(str(command))
        return results

    def probe(self) -> None:
        """Check the device still responds.

        The identifier of the first successful probe is reported.

        :raises BootProbeError: The device does not respond.
        """
        try:
            info = self.boot.get_cpu_info()
        except BootError as exc:
            raise BootProbeError(f"cannot get CPU info ({exc.description or exc})") from exc
        if self.cpu_info is None:
            self.cpu_info = format_cpu_info(info)
            self.echo(f"CPU info: {self.cpu_info}")

    def _load(self, path: str) -> bytes:
        try:
            data = load_binary(path)
        except (CCBootError, OSError) as exc:
            raise BootFileAccessError(f"cannot read file '{path}': {exc}") from exc
        self.echo(f"Loaded file '{path}' ({len(data)} bytes)")
        return data

    def _write(self, command: WriteCommand) -> CommandResult:
        data = self._load(command.source)
        self.echo(f"Uploading data to address 0x{command.address:08X}")
        self.boot.upload(data, command.address)
        self.echo("Downloading data for verification")
        try:
            self.boot.verify(data, command.address)
        except BootVerificationError as exc:
            self.echo("WARNING: data mismatch")
            logger.warning(str(exc))
            return CommandResult(command, CommandStatus.WARNING, str(exc))
        return CommandResult(command, CommandStatus.COMPLETED)

    def _read(self, command: ReadCommand) -> CommandResult:
        self.echo(f"Downloading data from address 0x{command.address:08X}")
        data = self.boot.download(command.length, command.address)
        try:
            write_file(data, command.destination, mode="wb")
        except OSError as exc:
            raise BootFileAccessError(
                f"cannot write file '{command.destination}': {exc}"
            ) from exc
        self.echo(f"Saved file '{command.destination}' ({len(data)} bytes)")
        return CommandResult(command, CommandStatus.COMPLETED)

    def _exec(self, command: ExecCommand) -> CommandResult:
        self.echo("Executing at last address")
        self.boot.execute()
        return CommandResult(command, CommandStatus.COMPLETED)
