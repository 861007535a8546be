#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The kinds of activity a summary can describe.

"""
from enum import Enum

from wearableio._util.exceptions import UnknownActivityCodeError


class ActivityKind(Enum):
    UNKNOWN = 'unknown'
    RUNNING = 'running'
    WALKING = 'walking'
    TREADMILL = 'treadmill'
    CYCLING = 'cycling'
    INDOOR_CYCLING = 'indoor_cycling'
    SWIMMING = 'swimming'
    SWIMMING_OPENWATER = 'swimming_openwater'
    ELLIPTICAL_TRAINER = 'elliptical_trainer'
    EXERCISE = 'exercise'
    SOCCER = 'soccer'
    JUMP_ROPING = 'jump_roping'
    CLIMBING = 'climbing'
    ROWING_MACHINE = 'rowing_machine'
    HIKING = 'hiking'
    YOGA = 'yoga'

    @classmethod
    def from_code(cls, code):
        """Map a raw sport code, as sent by the band, to a kind.

        Raises
        ------
        UnknownActivityCodeError
            If the code isn't in the table.
        """
        try:
            return SPORT_CODES[code]
        except KeyError:
            raise UnknownActivityCodeError(code) from None

    @property
    def is_swimming(self):
        return self in SWIMMING_KINDS


# Raw sport codes from the summary header.
SPORT_CODES = {
    1: ActivityKind.RUNNING,
    6: ActivityKind.WALKING,
    8: ActivityKind.TREADMILL,
    9: ActivityKind.CYCLING,
    10: ActivityKind.INDOOR_CYCLING,
    12: ActivityKind.ELLIPTICAL_TRAINER,
    14: ActivityKind.SWIMMING,             # pool
    15: ActivityKind.SWIMMING_OPENWATER,
    16: ActivityKind.EXERCISE,             # "freestyle" on the band
    18: ActivityKind.SOCCER,
    21: ActivityKind.JUMP_ROPING,
    22: ActivityKind.CLIMBING,
    23: ActivityKind.ROWING_MACHINE,
    24: ActivityKind.HIKING,
    60: ActivityKind.YOGA,
}

SWIMMING_KINDS = frozenset((ActivityKind.SWIMMING,
                            ActivityKind.SWIMMING_OPENWATER))
