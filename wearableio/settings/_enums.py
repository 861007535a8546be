#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Closed sets of values a device setting can take.

"""
from enum import Enum

from wearableio._util.exceptions import UnknownMemberError


class SettingEnum(Enum):
    """Base for setting values.

    Members are declared by the byte code the device uses for them. Their
    bit in the support mask is the same number unless a second value is
    given, e.g. ``FOO = 7, 3`` for code 7 at bit position 3.
    """
    def __new__(cls, code, position=None):
        member = object.__new__(cls)
        member._value_ = code
        member.code = code
        member.position = code if position is None else position
        return member

    @classmethod
    def from_code(cls, code):
        try:
            return cls(code)
        except ValueError:
            raise UnknownMemberError(code, cls.__name__) from None

    @classmethod
    def table(cls):
        """``(member, position, code)`` triples in declaration order."""
        return tuple((member, member.position, member.code) for member in cls)


class Language(SettingEnum):
    ENGLISH = 0
    CHINESE = 1
    JAPANESE = 2
    KOREAN = 3
    GERMAN = 4
    FRENCH = 5
    SPANISH = 6
    ARABIC = 7
    RUSSIAN = 8
    TRADITIONAL_CHINESE = 9
    UKRAINIAN = 10
    ITALIAN = 11
    PORTUGUESE = 12
    DUTCH = 13
    POLISH = 14
    SWEDISH = 15
    FINNISH = 16
    DANISH = 17
    NORWEGIAN = 18
    HUNGARIAN = 19
    CZECH = 20
    BULGARIAN = 21
    ROMANIAN = 22
    SLOVAK = 23
    LITHUANIAN = 24
    TURKISH = 25
    GREEK = 26
