#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

from setuptools import find_packages, setup  # type: ignore

with open("requirements.txt") as req_file:
    requirements = req_file.read().splitlines()

with open("requirements-develop.txt") as req_file:
    develop_requirements = [
        line for line in req_file.read().splitlines() if line and not line.startswith("-r")
    ]

with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="ccboot",
    use_scm_version={"write_to": "ccboot/__version__.py", "fallback_version": "1.0.0"},
    description="Host tool for the USB boot mode of the ChinaChip CC1800",
    author="ccboot contributors",
    license="BSD-3-Clause",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms="Windows, Linux, Mac OSX",
    python_requires=">=3.9",
    setup_requires=["setuptools_scm", "setuptools>=61", "wheel"],
    install_requires=requirements,
    extras_require={"test": develop_requirements},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS :: MacOS X",
        "License :: OSI Approved :: BSD License",
        "Topic :: Software Development :: Embedded Systems",
        "Topic :: System :: Hardware",
        "Topic :: Utilities",
    ],
    packages=find_packages(exclude=["tests.*", "tests", "examples.*", "examples"]),
    entry_points={
        "console_scripts": [
            "ccboot=ccboot.apps.usbtool:safe_main",
        ],
    },
)
