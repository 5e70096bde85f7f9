#!/usr/bin/env python
# -*- coding: UTF-8 -*-
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""ccboot miscellaneous utilities.

File loading/storing helpers, configuration loading and small numeric helpers
shared by the library and the command line tool.
"""

import json
import logging
import os
import re
from typing import Callable, Optional, Union

import yaml

from ccboot.exceptions import CCBootError, CCBootValueError

logger = logging.getLogger(__name__)


def load_binary(path: str, search_paths: Optional[list[str]] = None) -> bytes:
    """Load binary file into bytes.

    :param path: Path to the binary file to load.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: Content of the binary file as bytes.
    """
    data = load_file(path, mode="rb", search_paths=search_paths)
    assert isinstance(data, bytes)
    return data


def load_text(path: str, search_paths: Optional[list[str]] = None) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :param search_paths: List of directories to search for the file, defaults to None.
    :return: Content of the text file as string.
    """
    text = load_file(path, mode="r", search_paths=search_paths)
    assert isinstance(text, str)
    return text


def load_file(
    path: str, mode: str = "r", search_paths: Optional[list[str]] = None
) -> Union[str, bytes]:
    """Load file content from specified path.

    :param path: Path to the file to be loaded.
    :param mode: File reading mode, 'r' for text or 'rb' for binary.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: File content as string (text mode) or bytes (binary mode).
    """
    path = find_file(path, search_paths=search_paths)
    logger.debug(f"Loading {'binary' if 'b' in mode else 'text'} file from {path}")
    encoding = None if "b" in mode else "utf-8"
    with open(path, mode, encoding=encoding) as f:
        return f.read()


def write_file(
    data: Union[str, bytes],
    path: str,
    mode: str = "w",
    encoding: str = "utf-8",
) -> int:
    """Write data to a file, creating parent directories when needed.

    :param data: Data to write to the file.
    :param path: Path to the target file.
    :param mode: File writing mode ('w' for text, 'wb' for binary), defaults to 'w'.
    :param encoding: Text encoding, defaults to 'utf-8'.
    :return: Number of characters or bytes written to the file.
    """
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)

    logger.debug(f"Storing {'binary' if 'b' in mode else 'text'} file at {path}")
    with open(path, mode, encoding=None if "b" in mode else encoding) as f:
        return f.write(data)


def get_abs_path(file_path: str, base_dir: Optional[str] = None) -> str:
    """Convert relative or absolute file path to absolute path.

    :param file_path: File path to be converted to absolute path.
    :param base_dir: Base directory to create absolute path, if not specified the system CWD is used.
    :return: Absolute file path, the name itself is kept as given.
    """
    if os.path.isabs(file_path):
        return file_path

    return os.path.abspath(os.path.join(base_dir or os.getcwd(), file_path))


def _find_path(
    path: str,
    check_func: Callable[[str], bool],
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find and return the full path to a file or directory.

    Search paths take precedence over current working directory when both are specified.

    :param path: File name, part of file path or full path to search for.
    :param check_func: Function to validate if the found path exists and meets criteria.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :return: Full absolute path to the found file or empty string if not found and raise_exc is False.
    :raises CCBootError: File not found in any of the searched locations.
    """
    if os.path.isabs(path):
        if not check_func(path):
            if raise_exc:
                raise CCBootError(f"Path '{path}' not found")
            return ""
        return path
    if search_paths:
        for dir_candidate in search_paths:
            if not dir_candidate:
                continue
            path_candidate = get_abs_path(path, base_dir=dir_candidate)
            if check_func(path_candidate):
                return path_candidate
    if use_cwd and check_func(path):
        return get_abs_path(path)
    # list all directories in error message
    searched_in: list[str] = []
    if use_cwd:
        searched_in.append(os.path.abspath(os.curdir))
    if search_paths:
        searched_in.extend(filter(None, search_paths))
    err_str = f"Path '{path}' not found, Searched in: {', '.join(searched_in)}"
    if not raise_exc:
        logger.debug(err_str)
        return ""
    raise CCBootError(err_str)


def find_file(
    file_path: str,
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find file in filesystem.

    :param file_path: File name, part of file path or full path to search for.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :return: Full absolute path to the found file.
    :raises CCBootError: File not found in any of the search locations.
    """
    return _find_path(
        path=file_path,
        check_func=os.path.isfile,
        use_cwd=use_cwd,
        search_paths=search_paths,
        raise_exc=raise_exc,
    )


def load_configuration(path: str, search_paths: Optional[list[str]] = None) -> dict:
    """Load configuration from YAML or JSON file.

    The file content is parsed as JSON first, YAML is used as a fallback.

    :param path: Path to configuration file (relative or absolute).
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises CCBootError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path, search_paths=search_paths)
    except Exception as exc:
        raise CCBootError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[dict] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except (yaml.YAMLError, UnicodeDecodeError):
            pass

    if not config_data:
        raise CCBootError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise CCBootError(f"Invalid configuration file: {path}")

    return config_data


def check_range(x: int, start: int = 0, end: int = (1 << 32) - 1) -> bool:
    """Check if the number is in range.

    :param x: Number to check.
    :param start: Lower border of range, default is 0.
    :param end: Upper border of range, default is unsigned 32-bit range.
    :return: True if fits, False otherwise.
    """
    return start <= x <= end


def value_to_int(value: Union[int, str]) -> int:
    """Convert number given as int or string to integer.

    Strings with the ``0x``/``0X`` prefix are hexadecimal, any other string is
    decimal. Leading zeros don't switch to octal.

    :param value: Input value to convert.
    :return: Converted integer value.
    :raises CCBootValueError: Invalid number.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if isinstance(value, str):
        match = re.match(r"(?:(?P<hex>0x[0-9a-f]+)|(?P<dec>[0-9]+))$", value.strip().lower())
        if match:
            if match.group("hex"):
                return int(match.group("hex"), base=16)
            return int(match.group("dec"), base=10)

    raise CCBootValueError(f"Invalid number '{value}'")
