#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the package metadata."""

import ccboot


def test_author() -> None:
    assert ccboot.__author__ == "ccboot contributors"
    assert ccboot.CCBOOT_PLATFORM_DIRS.appauthor == "ccboot"
    assert ccboot.CCBOOT_PLATFORM_DIRS.appname == "ccboot"
