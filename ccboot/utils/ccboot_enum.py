#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 ccboot contributors
#
# SPDX-License-Identifier: BSD-3-Clause

"""Enumeration with numeric tag, label and description.

Used for the wire protocol request codes and for the error kinds, where each
member needs a numeric value, a short name and a human readable text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from typing_extensions import Self

from ccboot.exceptions import CCBootValueError


@dataclass(frozen=True)
class CCBootEnumMember:
    """ccboot Enum member representation.

    Holds the numeric tag, the label and an optional description of a member.
    """

    tag: int
    label: str
    description: Optional[str] = None


class CCBootEnum(CCBootEnumMember, Enum):
    """Enumeration with tag lookup.

    Members compare equal to both their tag and their label, so
    ``RequestCode.SET_ADDRESS == 0x01`` holds.
    """

    def __eq__(self, __value: object) -> bool:
        """Check equality of enum value with another object.

        :param __value: Object to compare with this enum value.
        :return: True if the object equals tag or label, False otherwise.
        """
        return self.tag == __value or self.label == __value

    def __hash__(self) -> int:
        """Calculate hash value for the enum instance.

        :return: Hash value as integer.
        """
        return hash((self.tag, self.label, self.description))

    @classmethod
    def tags(cls) -> list[int]:
        """Get list of tags of all enum members.

        :return: List of all tags.
        """
        return [value.tag for value in cls.__members__.values()]

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Get enum member with given tag.

        :param tag: Tag to be used for searching
        :raises CCBootValueError: If enum with given tag is not found
        :return: Found enum member
        """
        for item in cls.__members__.values():
            if item.tag == tag:
                return item
        raise CCBootValueError(f"There is no {cls.__name__} item with tag {tag} defined")
