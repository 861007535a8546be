#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import pytest

from wearableio import settings
from wearableio.settings import Language, SettingEnum
from wearableio._util import exceptions


class Units(SettingEnum):
    """Codes and mask positions that don't line up."""
    METRIC = 0x10, 2
    IMPERIAL = 0x20, 0


def test_current_and_supported():
    blob = bytes([0x02, 0x00, 0x00, 0x00, 0x05])   # mask 0b101
    current, supported = settings.decode_with_support(blob, Language)

    assert current is Language.JAPANESE
    assert supported == (Language.ENGLISH, Language.JAPANESE)
    assert Language.CHINESE not in supported


def test_member_table_of_triples():
    table = [('en', 0, 0x02), ('zh', 1, 0x05), ('ja', 2, 0x07)]
    capability = settings.decode_with_support(b'\x07\x00\x00\x00\x06', table)

    assert capability.current == 'ja'
    assert capability.supported == ('zh', 'ja')


def test_declaration_order_is_kept():
    # Bit 0 (IMPERIAL) and bit 2 (METRIC) both set.
    capability = settings.decode_with_support(b'\x20\x00\x00\x00\x05', Units)

    assert capability.current is Units.IMPERIAL
    assert capability.supported == (Units.METRIC, Units.IMPERIAL)


def test_positions_past_the_mask_are_unsupported():
    # 0b1 has a single digit, so only position 0 can be supported.
    supported = settings.decode_supported(b'\x00\x00\x00\x00\x01', Language)
    assert supported == (Language.ENGLISH,)

    assert settings.decode_supported(b'\x00\x00\x00\x00\x00', Language) == ()


def test_full_mask():
    supported = settings.decode_supported(b'\x00\xff\xff\xff\xff', Language)
    assert supported == tuple(Language)


def test_mask_is_big_endian():
    # Bit 24 set: '1' followed by 24 zeros, reversed.
    supported = settings.decode_supported(b'\x00\x01\x00\x00\x00', Language)
    assert supported == (Language.LITHUANIAN,)


@pytest.mark.parametrize('blob', [b'', b'\x00\x00\x00\x05',
                                  b'\x00\x00\x00\x00\x05\x00'])
def test_invalid_length(blob):
    with pytest.raises(exceptions.InvalidLengthError) as info:
        settings.decode_with_support(blob, Language)
    assert info.value.expected == 5
    assert info.value.got == len(blob)


def test_unknown_current_value():
    with pytest.raises(exceptions.UnknownMemberError) as info:
        settings.decode_current(b'\x63\x00\x00\x00\x01', Language)
    assert info.value.code == 0x63
    assert info.value.enum_name == 'Language'


def test_setting_enum():
    assert Language.from_code(4) is Language.GERMAN
    assert Units.METRIC.code == 0x10 and Units.METRIC.position == 2
    assert Language.FRENCH.position == Language.FRENCH.code == 5

    with pytest.raises(exceptions.UnknownMemberError):
        Units.from_code(0x30)


def test_encode_current():
    assert settings.encode_current(Language.SPANISH) == b'\x06'
    blob = settings.encode_current(Units.IMPERIAL) + b'\x00\x00\x00\x01'
    assert settings.decode_current(blob, Units) is Units.IMPERIAL
