#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot applications package.

This package contains the command-line application delivered with ccboot.
"""
