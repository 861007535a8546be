#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Byte layouts of the summary record, one table per block of fields.

Every table is a sequence of ``(name, struct format)`` pairs, read in order
by `BinaryCursor.read_fields`. Reserved slots are bytes whose meaning is
unknown; they still have to be consumed for the fields after them to line
up, so they are listed where they occur.

Just assuming, the Bip has version 259 which looks like 256 + x, and the
Bip S has 518 so 512 + x. Everything below 512 is read with the legacy
layout, everything from 512 up with the extended one.

"""
from wearableio._types import ActivityKind, summary
from wearableio._util.cursor import RESERVED_U8, RESERVED_U16, RESERVED_U32
from wearableio._util.misc import round_half_up


EXTENDED_VERSION = 512

# The extended variants that need their prologue patched up.
VERSION_519 = 519
VERSION_516 = 516

KNOWN_VERSIONS = frozenset((259, VERSION_516, 518, VERSION_519))

# Where the common extended fields resume in a version 519 summary.
VERSION_519_RESUME_OFFSET = 0x8C

# Kinds that carry ascent/descent/flat breakdowns in the extended layout.
TERRAIN_KINDS = frozenset((ActivityKind.CYCLING, ActivityKind.RUNNING,
                           ActivityKind.HIKING, ActivityKind.CLIMBING))

TERRAIN_SECONDS = (
    (summary.ASCENT_SECONDS, 'ascent_seconds'),
    (summary.DESCENT_SECONDS, 'descent_seconds'),
    (summary.FLAT_SECONDS, 'flat_seconds'),
)


HEADER = (
    ('version', 'H'),
    ('activity_code', 'H'),
    ('timestamp_start', 'I'),   # epoch seconds
    ('timestamp_end', 'I'),
    ('base_longitude', 'i'),
    ('base_latitude', 'i'),
    ('base_altitude', 'i'),
)

BOUNDS = (
    ('max_latitude', 'i'),
    ('min_latitude', 'i'),
    ('max_longitude', 'i'),
    ('min_longitude', 'i'),
)

EXTENDED = (
    ('steps', 'I'),
    ('active_seconds', 'I'),
) + BOUNDS + (
    ('calories', 'f'),
    ('distance', 'f'),
    ('ascent_meters', 'f'),
    ('descent_meters', 'f'),
    ('max_altitude', 'f'),
    ('min_altitude', 'f'),
    ('average_altitude', 'f'),
    ('max_speed', 'f'),                 # metres/second
    ('min_speed', 'f'),
    ('average_speed', 'f'),
    ('min_pace', 'f'),                  # seconds/metre
    ('max_pace', 'f'),
    ('average_pace', 'f'),
    ('max_cadence', 'f'),               # revolutions/second
    ('min_cadence', 'f'),
    ('average_cadence', 'f'),
    ('max_stride', 'f'),                # metres
    ('min_stride', 'f'),
    ('average_stride_precise', 'f'),
    # 87-97% of `distance`; probably the length of the GPS track
    ('track_distance', 'f'),
    ('reserved', RESERVED_U32),
    ('average_hr', 'H'),
    ('average_km_pace_seconds', 'H'),
    ('average_stride', 'H'),            # cm
    ('max_hr', 'H'),
)

# Nonsense for treadmill runs on a Bip S, sensible for cycling.
EXTENDED_TERRAIN = (
    ('reserved', RESERVED_U32),
    ('ascent_distance', 'f'),
    ('ascent_ms', 'I'),
    ('descent_distance', 'f'),
    ('descent_ms', 'I'),
    ('flat_distance', 'f'),
    ('flat_ms', 'I'),
)

EXTENDED_SWIM = (
    ('average_stroke_distance', 'f'),
    ('reserved', RESERVED_U32 * 5),
    ('average_strokes_per_second', 'f'),
    ('average_lap_pace', 'f'),
    ('reserved', RESERVED_U32),
    ('strokes', 'H'),
    ('swolf_index', 'H'),
    ('swim_style', 'B'),
    ('laps', 'B'),
    ('reserved', RESERVED_U32 * 2),
)

LEGACY = (
    ('distance', 'f'),
    ('ascent_meters', 'f'),
    ('descent_meters', 'f'),
    ('min_altitude', 'f'),
    ('max_altitude', 'f'),
) + BOUNDS + (
    ('steps', 'I'),
    ('active_seconds', 'I'),
    ('calories', 'f'),
    ('max_speed', 'f'),
    ('max_pace', 'f'),
    ('min_pace', 'f'),
    ('total_stride', 'f'),
    ('reserved', RESERVED_U32),
)

LEGACY_SWIM = (
    ('average_stroke_distance', 'f'),
    ('average_strokes_per_second', 'f'),
    ('average_lap_pace', 'f'),
    ('strokes', 'H'),
    ('swolf_index', 'H'),
    ('swim_style', 'B'),
    ('laps', 'B'),
    ('reserved', RESERVED_U32 * 2),
    ('reserved', RESERVED_U16),
)

# The reserved slot before each time looks like a distance, but nobody has
# confirmed it.
LEGACY_TERRAIN = (
    ('reserved', RESERVED_U32),
    ('reserved', RESERVED_U32),
    ('ascent_ms', 'I'),
    ('reserved', RESERVED_U32),
    ('descent_ms', 'I'),
    ('reserved', RESERVED_U32),
    ('flat_ms', 'I'),
)

LEGACY_TRAILER = (
    ('average_hr', 'H'),
    ('average_km_pace_seconds', 'H'),
    ('average_stride', 'H'),
)

VERSION_519_PROLOGUE = (
    ('reserved', RESERVED_U8),
    ('min_hr', 'H'),
)

VERSION_516_PROLOGUE = (
    ('reserved', RESERVED_U32),
)


# Layout functions
# ----------------
# Each takes the cursor (positioned just after the header), the kind and the
# summary builder, and returns the raw values it read as a dict.

def _ms_to_seconds(raw):
    for key in ('ascent', 'descent', 'flat'):
        ms = raw.pop(key + '_ms', None)
        if ms is not None:
            raw[key + '_seconds'] = ms // 1000


def read_prologue_519(cursor):
    raw = cursor.read_fields(VERSION_519_PROLOGUE)
    cursor.seek(VERSION_519_RESUME_OFFSET)
    return raw


def read_prologue_516(cursor):
    cursor.read_fields(VERSION_516_PROLOGUE)
    return {}


PROLOGUES = {
    VERSION_519: read_prologue_519,
    VERSION_516: read_prologue_516,
}


def read_extended(cursor, version, kind, builder):
    prologue = PROLOGUES.get(version)
    raw = prologue(cursor) if prologue is not None else {}

    raw.update(cursor.read_fields(EXTENDED))
    for key in ('max_cadence', 'min_cadence', 'average_cadence'):
        raw[key] = round_half_up(raw[key], 60)     # --> steps/minute
    for key in ('max_stride', 'min_stride', 'average_stride_precise'):
        raw[key] = round_half_up(raw[key], 100)    # metres --> cm

    if kind in TERRAIN_KINDS:
        raw.update(cursor.read_fields(EXTENDED_TERRAIN))
    elif kind.is_swimming:
        raw.update(cursor.read_fields(EXTENDED_SWIM))

    _ms_to_seconds(raw)
    return raw


def read_legacy(cursor, kind, builder):
    raw = cursor.read_fields(LEGACY)

    # Only pool swims; open water summaries use the terrain block here.
    if kind is ActivityKind.SWIMMING:
        raw.update(cursor.read_fields(LEGACY_SWIM))
    else:
        raw.update(cursor.read_fields(LEGACY_TERRAIN))
        _ms_to_seconds(raw)
        for key, name in TERRAIN_SECONDS:
            builder.add(key, raw[name], summary.UNIT_SECONDS)

    raw.update(cursor.read_fields(LEGACY_TRAILER))
    return raw
