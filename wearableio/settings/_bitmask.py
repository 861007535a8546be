#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Settings that come as the current value plus a mask of supported values.

Blob layout (5 bytes)
---------------------

=====  ==============  ================================================
Byte   Description     Value
=====  ==============  ================================================
  0    Current value   Byte code of the selected member
 1-4   Support mask    Big endian u32; bit n set <=> member at position
                       n is supported
=====  ==============  ================================================

"""
from collections import namedtuple
from inspect import isclass

from wearableio._util.cursor import BinaryCursor
from wearableio._util.exceptions import InvalidLengthError, UnknownMemberError
from wearableio.settings._enums import SettingEnum


BLOB_LENGTH = 5


EnumCapability = namedtuple('EnumCapability', ('current', 'supported'))


def _member_table(members):
    if isclass(members) and issubclass(members, SettingEnum):
        return members.table()
    return tuple(members)


def _lookup(code, table):
    for member, _, member_code in table:
        if member_code == code:
            return member
    enum_name = type(table[0][0]).__name__ if table else None
    raise UnknownMemberError(code, enum_name)


def decode_with_support(blob, members):
    """Decode the current value and the supported values of a setting.

    Parameters
    ----------
    blob : bytes
        The 5 byte setting payload.
    members : SettingEnum subclass or sequence
        Either an enum of `SettingEnum` members, or ``(member, position,
        code)`` triples in declaration order.

    Returns
    -------
    EnumCapability
        ``supported`` keeps the declaration order of `members`.

    Raises
    ------
    InvalidLengthError
        If `blob` isn't exactly 5 bytes.
    UnknownMemberError
        If the current value byte matches no member.
    """
    if len(blob) != BLOB_LENGTH:
        raise InvalidLengthError(BLOB_LENGTH, len(blob))

    table = _member_table(members)

    cursor = BinaryCursor(blob, endian='>')
    current_code = cursor.read_u8()
    mask = cursor.read_u32()

    current = _lookup(current_code, table)

    # Least significant bit first. Positions past the highest set bit are
    # simply not supported.
    bits = format(mask, 'b')[::-1]
    supported = tuple(member for member, position, _ in table
                      if position < len(bits) and bits[position] == '1')

    return EnumCapability(current, supported)


def decode_current(blob, members):
    return decode_with_support(blob, members).current


def decode_supported(blob, members):
    return decode_with_support(blob, members).supported


def encode_current(member):
    """The single byte that selects `member` on the device."""
    return bytes((member.code,))
