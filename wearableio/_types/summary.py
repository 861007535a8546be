#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Sparse, unit tagged summary fields and the record that carries them.

The keys and units below are the storage vocabulary: whatever persists or
renders a summary looks fields up by these strings, so they must not change.

"""
from collections import namedtuple
from types import MappingProxyType

from pandas import Series


# Units
# -----
UNIT_NONE = 'none'
UNIT_STRING = 'string'
UNIT_BPM = 'bpm'
UNIT_CM = 'cm'
UNIT_KCAL = 'calories_unit'
UNIT_METERS = 'meters'
UNIT_METERS_PER_SECOND = 'meters_second'
UNIT_SECONDS = 'seconds'
UNIT_SECONDS_PER_KM = 'seconds_km'
UNIT_SECONDS_PER_M = 'seconds_m'
UNIT_SPM = 'spm'
UNIT_STEPS = 'steps_unit'
UNIT_STROKES_PER_SECOND = 'strokes_second'
UNIT_LAP_PACE = 'second'
UNIT_STROKES = 'strokes'
UNIT_SWOLF_INDEX = 'swolf_index'
UNIT_LAPS = 'laps'

# Keys
# ----
RAW_ACTIVITY_KIND = 'Raw Activity Kind'

ACTIVE_SECONDS = 'activeSeconds'
ASCENT_SECONDS = 'ascentSeconds'
DESCENT_SECONDS = 'descentSeconds'
FLAT_SECONDS = 'flatSeconds'
ASCENT_DISTANCE = 'ascentDistance'
DESCENT_DISTANCE = 'descentDistance'
FLAT_DISTANCE = 'flatDistance'
DISTANCE_METERS = 'distanceMeters'
ASCENT_METERS = 'ascentMeters'
DESCENT_METERS = 'descentMeters'
ALTITUDE_MAX = 'maxAltitude'
ALTITUDE_MIN = 'minAltitude'
ALTITUDE_AVG = 'averageAltitude'
STEPS = 'steps'
CALORIES_BURNT = 'caloriesBurnt'
SPEED_MAX = 'maxSpeed'
SPEED_MIN = 'minSpeed'
SPEED_AVG = 'averageSpeed'
CADENCE_MAX = 'maxCadence'
CADENCE_MIN = 'minCadence'
CADENCE_AVG = 'averageCadence'
PACE_MIN = 'minPace'
PACE_MAX = 'maxPace'
PACE_AVG_SECONDS_KM = 'averageKMPaceSeconds'
STRIDE_TOTAL = 'totalStride'
STRIDE_AVG = 'averageStride'
STRIDE_MAX = 'maxStride'
STRIDE_MIN = 'minStride'
HR_AVG = 'averageHR'
HR_MAX = 'maxHR'
HR_MIN = 'minHR'
STROKE_DISTANCE_AVG = 'averageStrokeDistance'
STROKE_AVG_PER_SECOND = 'averageStrokesPerSecond'
LAP_PACE_AVERAGE = 'averageLapPace'
STROKES = 'strokes'
SWOLF_INDEX = 'swolfIndex'
SWIM_STYLE = 'swimStyle'
LAPS = 'laps'

ALTITUDE_KEYS = (ALTITUDE_MAX, ALTITUDE_MIN, ALTITUDE_AVG)

# Altitudes the band writes when it had no altitude data at all.
ALTITUDE_SENTINELS = (-100000, 100000)


SummaryField = namedtuple('SummaryField', ('value', 'unit'))


class SummaryBuilder:
    """Collects fields as a summary is decoded, dropping absent ones.

    One builder belongs to one decode call. Nothing is visible to the
    caller until ``build`` hands over a `DecodedRecord`.
    """
    __slots__ = ('_fields',)

    def __init__(self):
        self._fields = {}

    def add(self, key, value, unit):
        """Add a numeric field, but only if it's strictly positive.

        Zero (or less) means "not measured", so it is left out entirely.
        """
        if value > 0:
            self._fields[key] = SummaryField(value, unit)

    def add_altitude(self, key, value):
        if value in ALTITUDE_SENTINELS:
            return
        self.add(key, value, UNIT_METERS)

    def add_string(self, key, value):
        if key and value:
            self._fields[key] = SummaryField(value, UNIT_STRING)

    def build(self, **kwargs):
        return DecodedRecord(self._fields, **kwargs)


class DecodedRecord:
    """A decoded activity summary.

    Attributes
    ----------
    fields : mapping
        Read-only ``{key: SummaryField}``, in the order fields were decoded.
    activity_kind : ActivityKind
    start_time, end_time : datetime.datetime
        `start_time` is whatever the caller supplied; `end_time` adds the
        duration measured by the band.
    base_longitude, base_latitude, base_altitude : int
        Raw reference coordinates from the summary header.
    version : int
        Summary layout version.
    version_recognised : bool
        False when `version` isn't one we have seen and the layout was
        assumed from its family.
    """
    __slots__ = ('_fields', '_activity_kind', '_start_time', '_end_time',
                 '_base', '_version', '_version_recognised')

    def __init__(self, fields, *, activity_kind, start_time, end_time,
                 base_longitude=0, base_latitude=0, base_altitude=0,
                 version=0, version_recognised=True):
        self._fields = MappingProxyType(dict(fields))   # copy; then freeze
        self._activity_kind = activity_kind
        self._start_time = start_time
        self._end_time = end_time
        self._base = (base_longitude, base_latitude, base_altitude)
        self._version = version
        self._version_recognised = version_recognised

    def __repr__(self):
        return '<DecodedRecord %s v%d, %d field(s)>' % (
            self._activity_kind.value, self._version, len(self._fields))

    def __getitem__(self, key):
        return self._fields[key]

    def __contains__(self, key):
        return key in self._fields

    def __iter__(self):
        return iter(self._fields)

    def __len__(self):
        return len(self._fields)

    @property
    def fields(self):
        return self._fields

    @property
    def activity_kind(self):
        return self._activity_kind

    @property
    def start_time(self):
        return self._start_time

    @property
    def end_time(self):
        return self._end_time

    @property
    def duration(self):
        return self._end_time - self._start_time

    @property
    def base_longitude(self):
        return self._base[0]

    @property
    def base_latitude(self):
        return self._base[1]

    @property
    def base_altitude(self):
        return self._base[2]

    @property
    def version(self):
        return self._version

    @property
    def version_recognised(self):
        return self._version_recognised

    def value(self, key, default=None):
        field = self._fields.get(key)
        return default if field is None else field.value

    def units(self):
        return {key: field.unit for key, field in self._fields.items()}

    def as_dict(self):
        """``{key: {'value': ..., 'unit': ...}}``, ready for serialising."""
        return {key: field._asdict() for key, field in self._fields.items()}

    def to_series(self):
        """Field values as a `pandas.Series` indexed by key."""
        values = {key: field.value for key, field in self._fields.items()}
        return Series(values, name=self._start_time, dtype=object)
