#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Decode a summary record and translate it to this package's API.

"""
from datetime import timedelta
import logging

from wearableio._types import ActivityKind, SummaryBuilder, SummaryData
from wearableio._types import summary as s
from wearableio._util import exceptions
from wearableio._util.cursor import BinaryCursor
from wearableio._util.misc import localize
from wearableio.huami import _layout


log = logging.getLogger(__name__)

# Pace is reported for these, but it doesn't mean anything.
PACELESS_KINDS = frozenset((
    ActivityKind.ELLIPTICAL_TRAINER, ActivityKind.JUMP_ROPING,
    ActivityKind.EXERCISE, ActivityKind.YOGA, ActivityKind.INDOOR_CYCLING))

SWIM_STYLES = {
    1: 'breaststroke',
    2: 'freestyle',
    3: 'backstroke',
    4: 'medley',
}
UNKNOWN_SWIM_STYLE = 'unknown'


def swim_style_name(code):
    return SWIM_STYLES.get(code, UNKNOWN_SWIM_STYLE)


def decode(buffer, start_time, *, strict=False):
    """Decode one binary activity summary.

    Parameters
    ----------
    buffer : bytes
        The raw summary, as fetched from the band.
    start_time : datetime.datetime
        When the activity started. The timestamps in the summary itself go
        wrong around daylight saving changes, so only the duration is taken
        from them.
    strict : bool, optional
        Refuse layout versions that haven't been seen before, rather than
        reading them with the layout of their family.

    Returns
    -------
    DecodedRecord

    Raises
    ------
    MissingStartTimeError
        If `start_time` is None.
    TruncatedError
        If the buffer ends before the layout does.
    UnsupportedVersionError
        Only in `strict` mode.
    """
    if start_time is None:
        raise exceptions.MissingStartTimeError

    cursor = BinaryCursor(buffer)
    builder = SummaryBuilder()

    header = cursor.read_fields(_layout.HEADER)
    version = header['version']
    log.debug('got sport summary version %d, total bytes=%d',
              version, len(cursor))

    recognised = version in _layout.KNOWN_VERSIONS
    if not recognised:
        if strict:
            raise exceptions.UnsupportedVersionError(version)
        log.warning('unknown summary version %d; assuming the %s layout',
                    version, 'extended'
                    if version >= _layout.EXTENDED_VERSION else 'legacy')

    kind = _activity_kind(header['activity_code'], builder)

    duration_ms = (header['timestamp_end'] - header['timestamp_start']) * 1000
    end_time = start_time + timedelta(milliseconds=duration_ms)

    if version >= _layout.EXTENDED_VERSION:
        raw = _layout.read_extended(cursor, version, kind, builder)
    else:
        raw = _layout.read_legacy(cursor, kind, builder)

    _emit(raw, kind, builder)

    return builder.build(
        activity_kind=kind,
        start_time=start_time,
        end_time=end_time,
        base_longitude=header['base_longitude'],
        base_latitude=header['base_latitude'],
        base_altitude=header['base_altitude'],
        version=version,
        version_recognised=recognised)


def _activity_kind(code, builder):
    try:
        return ActivityKind.from_code(code)
    except exceptions.UnknownActivityCodeError as e:
        log.error('error mapping activity kind: %s', e)
        builder.add(s.RAW_ACTIVITY_KIND, code, s.UNIT_NONE)
        return ActivityKind.UNKNOWN


def _emit(raw, kind, builder):
    """Push everything that was read through the builder, in display order."""
    get = raw.get

    for key, name in _layout.TERRAIN_SECONDS:
        builder.add(key, get(name, 0), s.UNIT_SECONDS)
    builder.add(s.ASCENT_DISTANCE, get('ascent_distance', 0), s.UNIT_METERS)
    builder.add(s.DESCENT_DISTANCE, get('descent_distance', 0), s.UNIT_METERS)
    builder.add(s.FLAT_DISTANCE, get('flat_distance', 0), s.UNIT_METERS)

    builder.add(s.DISTANCE_METERS, get('distance', 0), s.UNIT_METERS)
    builder.add(s.ASCENT_METERS, get('ascent_meters', 0), s.UNIT_METERS)
    builder.add(s.DESCENT_METERS, get('descent_meters', 0), s.UNIT_METERS)

    min_altitude = get('min_altitude', 0)
    builder.add_altitude(s.ALTITUDE_MAX, get('max_altitude', 0))
    builder.add_altitude(s.ALTITUDE_MIN, min_altitude)
    if min_altitude not in s.ALTITUDE_SENTINELS:
        builder.add_altitude(s.ALTITUDE_AVG, get('average_altitude', 0))

    builder.add(s.STEPS, get('steps', 0), s.UNIT_STEPS)
    builder.add(s.ACTIVE_SECONDS, get('active_seconds', 0), s.UNIT_SECONDS)
    builder.add(s.CALORIES_BURNT, get('calories', 0), s.UNIT_KCAL)
    builder.add(s.SPEED_MAX, get('max_speed', 0), s.UNIT_METERS_PER_SECOND)
    builder.add(s.SPEED_MIN, get('min_speed', 0), s.UNIT_METERS_PER_SECOND)
    builder.add(s.SPEED_AVG, get('average_speed', 0), s.UNIT_METERS_PER_SECOND)
    builder.add(s.CADENCE_MAX, get('max_cadence', 0), s.UNIT_SPM)
    builder.add(s.CADENCE_MIN, get('min_cadence', 0), s.UNIT_SPM)
    builder.add(s.CADENCE_AVG, get('average_cadence', 0), s.UNIT_SPM)

    if kind not in PACELESS_KINDS:
        builder.add(s.PACE_MIN, get('min_pace', 0), s.UNIT_SECONDS_PER_M)
        builder.add(s.PACE_MAX, get('max_pace', 0), s.UNIT_SECONDS_PER_M)

    builder.add(s.STRIDE_TOTAL, get('total_stride', 0), s.UNIT_METERS)
    builder.add(s.HR_AVG, get('average_hr', 0), s.UNIT_BPM)
    builder.add(s.HR_MAX, get('max_hr', 0), s.UNIT_BPM)
    builder.add(s.HR_MIN, get('min_hr', 0), s.UNIT_BPM)
    builder.add(s.PACE_AVG_SECONDS_KM, get('average_km_pace_seconds', 0),
                s.UNIT_SECONDS_PER_KM)
    builder.add(s.STRIDE_AVG, get('average_stride', 0), s.UNIT_CM)
    builder.add(s.STRIDE_MAX, get('max_stride', 0), s.UNIT_CM)
    builder.add(s.STRIDE_MIN, get('min_stride', 0), s.UNIT_CM)

    if kind.is_swimming:
        builder.add(s.STROKE_DISTANCE_AVG, get('average_stroke_distance', 0),
                    s.UNIT_METERS)
        builder.add(s.STROKE_AVG_PER_SECOND,
                    get('average_strokes_per_second', 0),
                    s.UNIT_STROKES_PER_SECOND)
        builder.add(s.LAP_PACE_AVERAGE, get('average_lap_pace', 0),
                    s.UNIT_LAP_PACE)
        builder.add(s.STROKES, get('strokes', 0), s.UNIT_STROKES)
        builder.add(s.SWOLF_INDEX, get('swolf_index', 0), s.UNIT_SWOLF_INDEX)
        builder.add_string(s.SWIM_STYLE, swim_style_name(get('swim_style')))
        builder.add(s.LAPS, get('laps', 0), s.UNIT_LAPS)


# Tabular API
# -----------
def _gen_decoded(payloads, strict):
    for buffer, start_time in payloads:
        yield decode(buffer, start_time, strict=strict)


def _as_row(record):
    row = {
        'start': record.start_time,
        'end': record.end_time,
        'activity_kind': record.activity_kind.value,
        'version': record.version,
        'base_longitude': record.base_longitude,
        'base_latitude': record.base_latitude,
        'base_altitude': record.base_altitude,
    }
    row.update((key, field.value) for key, field in record.fields.items())
    return row


def gen_records(payloads, *, strict=False):
    """Decode summaries one after the other.

    `payloads` is an iterable of ``(buffer, start_time)`` pairs. Each
    "record" is a flat dictionary, i.e. a row in a tabular representation,
    so this can be passed to ``pandas.DataFrame.from_records``.
    """
    return map(_as_row, _gen_decoded(payloads, strict))


def read_and_format(payloads, *, tz_str=None, strict=False):
    """Decode many summaries into a `SummaryData` frame.

    Naive start times are taken to be in `tz_str` (UTC by default).
    """
    payloads = ((buffer, start_time if start_time is None
                 else localize(start_time, tz_str))
                for buffer, start_time in payloads)

    rows, units = [], {}
    for record in _gen_decoded(payloads, strict):
        rows.append(_as_row(record))
        units.update(record.units())

    data = SummaryData.from_records(rows)
    data._finish_up(units=units)
    return data
