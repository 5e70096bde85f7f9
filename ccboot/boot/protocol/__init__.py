#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""CC1800 boot protocol layer.

Maps control request packets and bulk payloads onto the device transfers.
"""
