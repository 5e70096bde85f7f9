#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot low-level device interface abstractions."""
