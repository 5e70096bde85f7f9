#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot pytest configuration and shared test fixtures."""

import logging
import os
from typing import Any

import pytest

from tests.cli_runner import CliRunner

os.environ["CCBOOT_DEBUG_LOGGING_DISABLED"] = "True"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture(scope="module")
def data_dir(request: Any) -> str:
    """Get test data directory path for the current test module.

    :param request: Pytest request fixture containing test execution context.
    :return: Absolute path to the test data directory.
    """
    logging.debug(f"data_dir for module: {request.fspath}")
    data_path = os.path.join(os.path.dirname(request.fspath), "data")
    logging.debug(f"data_dir: {data_path}")
    return data_path


@pytest.fixture
def tests_root_dir() -> str:
    """Get the root directory of tests.

    :return: Absolute path to the tests root directory.
    """
    return os.path.dirname(os.path.abspath(__file__))
