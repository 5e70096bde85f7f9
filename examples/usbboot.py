#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""This example demonstrates how to load and start a binary on the CC1800 in USB boot mode."""

import sys
from typing import Optional

from ccboot.boot import BootUSBInterface, UsbBoot
from ccboot.utils.misc import load_binary

# Uncomment for printing debug messages
# import logging
# logging.basicConfig(level=logging.DEBUG)


def load_and_run(path: str, address: int = 0, usb_id: Optional[str] = None) -> bytes:
    """Upload the binary, verify it and jump to it.

    If usb_id is not specified, the first device with 0x2009:0x1218 is used.

    :param path: Path to the binary to load
    :param address: Load and execution address in target memory
    :param usb_id: VID:PID of the boot mode device
    :return: CPU info reported by the ROM
    """
    data = load_binary(path)
    with UsbBoot(BootUSBInterface.find(usb_id)) as boot:
        cpu_info = boot.get_cpu_info()
        boot.upload_verify_execute(data, address)
    return cpu_info


if __name__ == "__main__":
    print(load_and_run(sys.argv[1]))
