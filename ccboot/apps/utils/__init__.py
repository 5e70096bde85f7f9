#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot application utilities: logging, CLI options and error handling."""
