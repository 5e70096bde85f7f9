#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot CLI application tests.

The USB scan is patched to return the virtual device.
"""

import os
import sys
from typing import Any
from unittest.mock import patch

import pytest

import ccboot
from ccboot.apps import usbtool
from ccboot.boot.exceptions import (
    BootDeviceNotFoundError,
    BootInvalidArgumentError,
    BootProbeError,
    BootUnknownCommandError,
)
from ccboot.utils.interfaces.device.usb_device import UsbDevice
from tests.boot.virtual_device import VirtualCC1800
from tests.cli_runner import CliRunner


def scan_returns(*devices: VirtualCC1800) -> Any:
    return patch.object(UsbDevice, "scan", return_value=list(devices))


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(usbtool.main, ["--version"])
    assert ccboot.__version__ in result.output


def test_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(usbtool.main, ["--help"])
    assert "CC1800 targets in USB boot mode" in result.output
    assert "read <address> <length> <file>" in result.output


def test_no_commands_prints_help(cli_runner: CliRunner, caplog: Any) -> None:
    caplog.set_level(100_000)
    device = VirtualCC1800()
    with scan_returns(device) as scan:
        result = cli_runner.invoke(usbtool.main, [], expected_code=1)
    assert "Usage:" in result.output
    scan.assert_not_called()


def test_write_read_exec(cli_runner: CliRunner, tmpdir: Any, caplog: Any) -> None:
    caplog.set_level(100_000)
    payload = os.path.join(tmpdir, "payload.bin")
    out_file = os.path.join(tmpdir, "out.bin")
    with open(payload, "wb") as f:
        f.write(bytes(range(16)))
    device = VirtualCC1800()
    cmd = ["write", "0x1000", payload, "read", "0x1000", "16", out_file, "exec"]
    with scan_returns(device):
        result = cli_runner.invoke(usbtool.main, cmd)
    assert "Found device VirtualCC1800" in result.output
    assert "CPU info: CC1800" in result.output
    assert "Uploading data to address 0x00001000" in result.output
    assert "WARNING" not in result.output
    with open(out_file, "rb") as f:
        assert f.read() == bytes(range(16))
    assert device.executed == [0x1000]
    assert device.open_count == device.close_count == 1


def test_write_mismatch_warning(cli_runner: CliRunner, tmpdir: Any, caplog: Any) -> None:
    caplog.set_level(100_000)
    payload = os.path.join(tmpdir, "payload.bin")
    with open(payload, "wb") as f:
        f.write(b"\x01\x02")
    device = VirtualCC1800(corrupt_readback=True)
    with scan_returns(device):
        result = cli_runner.invoke(usbtool.main, ["write", "0", payload, "exec"])
    assert "WARNING: data mismatch" in result.output
    assert device.executed == [0]


def test_script(cli_runner: CliRunner, tmpdir: Any, caplog: Any) -> None:
    caplog.set_level(100_000)
    out_file = os.path.join(tmpdir, "dump.bin")
    script = os.path.join(tmpdir, "commands.txt")
    with open(script, "w") as f:
        f.write(f"# dump the vectors\nread 0x0 8 {out_file}\nexec\n")
    device = VirtualCC1800()
    device.write_memory(0x0, b"VECTORS!")
    with scan_returns(device):
        cli_runner.invoke(usbtool.main, ["--script", script])
    with open(out_file, "rb") as f:
        assert f.read() == b"VECTORS!"
    assert device.executed == [0x0]


def test_script_and_commands(cli_runner: CliRunner, tmpdir: Any, caplog: Any) -> None:
    caplog.set_level(100_000)
    script = os.path.join(tmpdir, "commands.txt")
    with open(script, "w") as f:
        f.write("exec\n")
    with scan_returns(VirtualCC1800()) as scan:
        cli_runner.invoke(usbtool.main, ["-s", script, "exec"], expected_code=1)
    scan.assert_not_called()


def test_usb_id_option(cli_runner: CliRunner, caplog: Any) -> None:
    caplog.set_level(100_000)
    with scan_returns(VirtualCC1800()) as scan:
        cli_runner.invoke(usbtool.main, ["-u", "0x1234:0x5678", "-t", "0x100", "exec"])
    scan.assert_called_once_with(vid=0x1234, pid=0x5678, timeout=0x100)


def test_device_not_found(cli_runner: CliRunner, caplog: Any) -> None:
    caplog.set_level(100_000)
    with scan_returns():
        result = cli_runner.invoke(usbtool.main, ["exec"], expected_code=-1)
    assert isinstance(result.exception, BootDeviceNotFoundError)
    assert "Found device" not in result.output


def test_unknown_command_before_device(cli_runner: CliRunner, caplog: Any) -> None:
    caplog.set_level(100_000)
    with scan_returns(VirtualCC1800()) as scan:
        result = cli_runner.invoke(usbtool.main, ["exec", "jump"], expected_code=-1)
    assert isinstance(result.exception, BootUnknownCommandError)
    scan.assert_not_called()


def test_invalid_argument(cli_runner: CliRunner, caplog: Any) -> None:
    caplog.set_level(100_000)
    with scan_returns(VirtualCC1800()):
        result = cli_runner.invoke(usbtool.main, ["read", "0x0", "ten", "x.bin"], expected_code=-1)
    assert isinstance(result.exception, BootInvalidArgumentError)


def test_probe_failure(cli_runner: CliRunner, caplog: Any) -> None:
    caplog.set_level(100_000)
    device = VirtualCC1800(fail_probe_at=2)
    with scan_returns(device):
        result = cli_runner.invoke(usbtool.main, ["exec", "exec"], expected_code=-1)
    assert isinstance(result.exception, BootProbeError)
    assert device.executed == [0]
    assert device.close_count == 1


@pytest.mark.parametrize(
    "argv, devices, exit_code, message",
    [
        (["exec"], [], 2, "BootDeviceNotFoundError"),
        (["exec", "jump"], [VirtualCC1800()], 2, "unknown command 'jump'"),
        (["exec"], [VirtualCC1800(fail_probe_at=1)], 2, "BootProbeError"),
        ([], [VirtualCC1800()], 1, ""),
        (["exec"], [VirtualCC1800()], 0, ""),
    ],
)
def test_safe_main_exit_codes(
    capsys: Any, caplog: Any, argv: list, devices: list, exit_code: int, message: str
) -> None:
    caplog.set_level(100_000)
    with patch.object(sys, "argv", ["ccboot", *argv]), scan_returns(*devices):
        with pytest.raises(SystemExit) as exc:
            usbtool.safe_main()
    assert exc.value.code == exit_code
    assert message in capsys.readouterr().err


def test_script_and_commands_exit_code(capsys: Any, caplog: Any, tmpdir: Any) -> None:
    caplog.set_level(100_000)
    script = os.path.join(tmpdir, "commands.txt")
    with open(script, "w") as f:
        f.write("exec\n")
    argv = ["ccboot", "-s", script, "exec"]
    with patch.object(sys, "argv", argv), scan_returns(VirtualCC1800()):
        with pytest.raises(SystemExit) as exc:
            usbtool.safe_main()
    assert exc.value.code == 1
    assert "CCBootAppError: Commands can't be combined" in capsys.readouterr().err
