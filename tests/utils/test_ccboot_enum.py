#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""CCBootEnum utility tests."""

import pytest

from ccboot.boot.commands import RequestCode
from ccboot.boot.error_codes import ErrorKind
from ccboot.exceptions import CCBootValueError


def test_tags() -> None:
    assert RequestCode.tags() == [0x00, 0x01, 0x02, 0x03, 0x04]
    assert ErrorKind.tags() == list(range(1, 12))


def test_equals() -> None:
    assert RequestCode.EXECUTE == 0x04
    assert RequestCode.EXECUTE == "Execute"
    assert RequestCode.EXECUTE != 0x03
    assert RequestCode.EXECUTE != RequestCode.GET_STATUS
    assert len({ErrorKind.PROBE_FAILED, ErrorKind.SHORT_TRANSFER, ErrorKind.PROBE_FAILED}) == 2


def test_from_tag() -> None:
    assert RequestCode.from_tag(0x02) is RequestCode.SET_LENGTH
    assert ErrorKind.from_tag(7) is ErrorKind.VERIFICATION_MISMATCH


def test_from_tag_missing() -> None:
    with pytest.raises(CCBootValueError):
        RequestCode.from_tag(0x05)
