#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the command list parser and interpreter."""

import os

import pytest

from ccboot.boot.error_codes import ErrorKind
from ccboot.boot.exceptions import (
    BootFileAccessError,
    BootInvalidArgumentError,
    BootProbeError,
    BootShortTransferError,
    BootUnknownCommandError,
)
from ccboot.boot.interfaces.usb import BootUSBInterface
from ccboot.boot.interpreter import (
    CommandInterpreter,
    CommandStatus,
    ExecCommand,
    ReadCommand,
    WriteCommand,
    format_cpu_info,
    parse_commands,
    parse_number,
    parse_script,
)
from ccboot.boot.usbboot import UsbBoot
from tests.boot.virtual_device import VirtualCC1800

GET_CPU_INFO = 0x00
SET_ADDRESS = 0x01
SET_LENGTH = 0x02
EXECUTE = 0x04


class Echo:
    """Collects operator messages."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, message: str) -> None:
        self.lines.append(message)


@pytest.fixture
def echo() -> Echo:
    return Echo()


@pytest.fixture
def payload(tmpdir: str) -> str:
    path = os.path.join(tmpdir, "payload.bin")
    with open(path, "wb") as f:
        f.write(bytes(range(16)))
    return path


def run(device: VirtualCC1800, tokens: list[str], echo: Echo) -> list:
    commands = parse_commands(tokens)
    with UsbBoot(BootUSBInterface(device)) as boot:  # type: ignore[arg-type]
        return CommandInterpreter(boot, echo=echo).run(commands)


@pytest.mark.parametrize(
    "text, value",
    [("0x1000", 0x1000), ("0X1000", 0x1000), ("4096", 4096), ("010", 10), ("0xFFFFFFFF", 0xFFFF_FFFF)],
)
def test_parse_number(text: str, value: int) -> None:
    assert parse_number(text, "address") == value


@pytest.mark.parametrize("text", ["", "abc", "0x", "1k", "-1", "0x1_0000_0000", "0x100000000"])
def test_parse_number_invalid(text: str) -> None:
    with pytest.raises(BootInvalidArgumentError) as exc:
        parse_number(text, "address")
    assert exc.value.kind == ErrorKind.INVALID_ARGUMENT


def test_parse_commands() -> None:
    tokens = "write 0x1000 a.bin read 0x2000 64 out.bin exec".split()
    assert parse_commands(tokens) == [
        WriteCommand(0x1000, "a.bin"),
        ReadCommand(0x2000, 64, "out.bin"),
        ExecCommand(),
    ]


def test_parse_commands_empty() -> None:
    assert parse_commands([]) == []


def test_parse_commands_unknown() -> None:
    with pytest.raises(BootUnknownCommandError) as exc:
        parse_commands(["exec", "jump", "0x0"])
    assert exc.value.kind == ErrorKind.UNKNOWN_COMMAND
    assert "unknown command 'jump'" in str(exc.value)


@pytest.mark.parametrize(
    "tokens, message",
    [
        (["write", "0x0"], "write command requires two arguments"),
        (["read", "0x0", "4"], "read command requires three arguments"),
        (["read", "0x0", "0x80000000", "out.bin"], "out of range"),
        (["write", "zero", "a.bin"], "bad value 'zero'"),
    ],
)
def test_parse_commands_invalid_argument(tokens: list[str], message: str) -> None:
    with pytest.raises(BootInvalidArgumentError) as exc:
        parse_commands(tokens)
    assert message in str(exc.value)


def test_parse_script() -> None:
    script = """
    # load the loader
    write 0x0 loader.bin   # first stage
    read 0x2000 64 "dump file.bin" exec
    """
    assert parse_script(script) == [
        "write",
        "0x0",
        "loader.bin",
        "read",
        "0x2000",
        "64",
        "dump file.bin",
        "exec",
    ]


def test_format_cpu_info() -> None:
    assert format_cpu_info(b"CC1800\x00\x00") == "CC1800"
    assert format_cpu_info(b"ABCDEFGH") == "ABCDEFGH"


def test_write_command(device: VirtualCC1800, payload: str, echo: Echo) -> None:
    results = run(device, ["write", "0x1000", payload], echo)
    assert device.control_requests == [
        (GET_CPU_INFO, 0, 0),
        (SET_ADDRESS, 0x0000, 0x1000),
        (SET_LENGTH, 0x8000, 0x0010),
        (SET_ADDRESS, 0x0000, 0x1000),
        (SET_LENGTH, 0x0000, 0x0010),
    ]
    assert [t[0] for t in device.transfers if t[0] != "ctrl"] == ["out", "in"]
    assert device.read_memory(0x1000, 16) == bytes(range(16))
    assert results[0].status == CommandStatus.COMPLETED
    assert echo.lines == [
        "CPU info: CC1800",
        f"Loaded file '{payload}' (16 bytes)",
        "Uploading data to address 0x00001000",
        "Downloading data for verification",
    ]


def test_read_command(device: VirtualCC1800, tmpdir: str, echo: Echo) -> None:
    device.write_memory(0x2000, b"\x55" * 64)
    out_file = os.path.join(tmpdir, "out.bin")
    results = run(device, ["read", "0x2000", "64", out_file], echo)
    assert device.control_requests == [
        (GET_CPU_INFO, 0, 0),
        (SET_ADDRESS, 0x0000, 0x2000),
        (SET_LENGTH, 0x0000, 0x0040),
    ]
    assert device.transfers[-1] == ("in", 0x81, 64)
    with open(out_file, "rb") as f:
        assert f.read() == b"\x55" * 64
    assert results[0].status == CommandStatus.COMPLETED
    assert "Downloading data from address 0x00002000" in echo.lines


@pytest.mark.skipif(os.sep != "/", reason="backslash is a path separator")
def test_read_keeps_destination_name(device: VirtualCC1800, tmpdir: str, echo: Echo) -> None:
    device.write_memory(0x0, b"\x01\x02\x03\x04")
    out_file = os.path.join(tmpdir, "dump\\1.bin")
    run(device, ["read", "0", "4", out_file], echo)
    assert os.listdir(tmpdir) == ["dump\\1.bin"]
    with open(out_file, "rb") as f:
        assert f.read() == b"\x01\x02\x03\x04"


def test_empty_write_and_read(device: VirtualCC1800, tmpdir: str, echo: Echo) -> None:
    empty = os.path.join(tmpdir, "empty.bin")
    out_file = os.path.join(tmpdir, "out.bin")
    with open(empty, "wb"):
        pass
    results = run(device, ["write", "0x10", empty, "read", "0x10", "0", out_file, "exec"], echo)
    assert [r.status for r in results] == [CommandStatus.COMPLETED] * 3
    assert (SET_LENGTH, 0x8000, 0x0000) in device.control_requests
    assert os.path.getsize(out_file) == 0
    assert device.executed == [0x10]


def test_write_then_exec(device: VirtualCC1800, tmpdir: str, echo: Echo) -> None:
    path = os.path.join(tmpdir, "a.bin")
    with open(path, "wb") as f:
        f.write(b"\xde\xad\xbe\xef")
    results = run(device, ["write", "0x0", path, "exec"], echo)
    assert device.executed == [0x0]
    assert device.control_requests[-2:] == [(GET_CPU_INFO, 0, 0), (EXECUTE, 0, 0)]
    assert [r.command for r in results] == [WriteCommand(0, path), ExecCommand()]
    assert echo.lines[-1] == "Executing at last address"


def test_probe_before_every_command(device: VirtualCC1800, payload: str, echo: Echo) -> None:
    run(device, ["exec", "write", "0x0", payload, "exec"], echo)
    assert device.probes == 3
    assert echo.lines.count("CPU info: CC1800") == 1


def test_probe_failure_aborts(device: VirtualCC1800, echo: Echo) -> None:
    device.fail_probe_at = 2
    with pytest.raises(BootProbeError) as exc:
        run(device, ["exec", "exec", "exec"], echo)
    assert exc.value.kind == ErrorKind.PROBE_FAILED
    assert device.executed == [0x0]
    assert device.close_count == 1


def test_write_mismatch_is_warning(device: VirtualCC1800, payload: str, echo: Echo) -> None:
    device.corrupt_readback = True
    results = run(device, ["write", "0x1000", payload, "exec"], echo)
    assert results[0].status == CommandStatus.WARNING
    assert "0x00001000" in results[0].message
    assert "WARNING: data mismatch" in echo.lines
    # the sequence continues
    assert results[1].status == CommandStatus.COMPLETED
    assert device.executed == [0x1000]


def test_write_missing_file(device: VirtualCC1800, tmpdir: str, echo: Echo) -> None:
    with pytest.raises(BootFileAccessError) as exc:
        run(device, ["write", "0x0", os.path.join(tmpdir, "missing.bin"), "exec"], echo)
    assert exc.value.kind == ErrorKind.FILE_ACCESS_ERROR
    assert device.executed == []


def test_read_short_transfer_aborts(device: VirtualCC1800, tmpdir: str, echo: Echo) -> None:
    device.short_read = 10
    out_file = os.path.join(tmpdir, "out.bin")
    with pytest.raises(BootShortTransferError):
        run(device, ["read", "0x0", "64", out_file, "exec"], echo)
    assert not os.path.exists(out_file)
    assert device.executed == []


def test_default_echo_logs(device: VirtualCC1800, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO", logger="ccboot")
    with UsbBoot(BootUSBInterface(device)) as boot:  # type: ignore[arg-type]
        CommandInterpreter(boot).run([ExecCommand()])
    assert "CPU info: CC1800" in caplog.text
