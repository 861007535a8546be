#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import struct

import pytest

from wearableio._util import cursor, exceptions


data = struct.pack('<BbHhIif', 0xFE, -2, 0xBEEF, -300, 0xDEADBEEF, -70000, 1.5)


def test_typed_reads():
    c = cursor.BinaryCursor(data)

    assert c.read_u8() == 0xFE
    assert c.read_s8() == -2
    assert c.read_u16() == 0xBEEF
    assert c.read_s16() == -300
    assert c.read_u32() == 0xDEADBEEF
    assert c.read_s32() == -70000
    assert c.read_f32() == 1.5
    assert c.position == len(data) and c.bytes_left == 0


def test_big_endian():
    c = cursor.BinaryCursor(b'\x00\x00\x01\x02', endian='>')
    assert c.read_u32() == 0x0102


def test_reading_past_the_end():
    c = cursor.BinaryCursor(b'\x01\x02\x03')
    c.read_u16()

    with pytest.raises(exceptions.TruncatedError) as info:
        c.read_u16()
    assert (info.value.offset, info.value.width) == (2, 2)
    assert info.value.available == 3
    assert c.position == 2      # nothing consumed

    with pytest.raises(exceptions.TruncatedError):
        c.skip(2)


def test_seek():
    c = cursor.BinaryCursor(data)
    c.seek(2)
    assert c.read_u16() == 0xBEEF

    c.seek(len(data))
    assert c.bytes_left == 0

    with pytest.raises(exceptions.TruncatedError):
        c.seek(len(data) + 1)


def test_read_fields():
    table = (
        ('a', 'B'),
        ('reserved', cursor.RESERVED_U8),
        ('b', 'H'),
        ('reserved', cursor.RESERVED_U32),
        ('c', 'i'),
    )
    raw = struct.pack('<BxH4xi', 7, 513, -9)
    c = cursor.BinaryCursor(raw)

    assert c.read_fields(table) == {'a': 7, 'b': 513, 'c': -9}
    assert c.bytes_left == 0


def test_read_fields_is_all_or_nothing():
    c = cursor.BinaryCursor(b'\x01\x02\x03')

    with pytest.raises(exceptions.TruncatedError) as info:
        c.read_fields((('a', 'B'), ('b', 'I')))
    assert (info.value.offset, info.value.width) == (0, 5)
    assert c.position == 0
