#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot generic command interface definitions.

This module provides the abstract base class of the command packets sent by the
protocol interfaces.
"""

from abc import ABC, abstractmethod


class CmdPacketBase(ABC):
    """Abstract base class for command protocol packets.

    A packet knows how to present itself for logging and how to export its
    wire representation.
    """

    @abstractmethod
    def export(self) -> bytes:
        """Export the packet into bytes.

        :return: Exported object into bytes.
        """

    @abstractmethod
    def __str__(self) -> str:
        """Get string representation of the packet."""
