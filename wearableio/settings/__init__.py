"""
Decode device settings sent as a selected value plus a support bitmask.

Some bands (Da Fit and friends) answer a settings query with one byte for
the value currently selected followed by a 32 bit mask of the values the
firmware supports. The mask is indexed by a position declared for each
member of the setting's enumeration.

"""
from wearableio.settings._bitmask import (
    EnumCapability, decode_with_support, decode_current, decode_supported,
    encode_current)
from wearableio.settings._enums import SettingEnum, Language
