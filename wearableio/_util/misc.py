#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
General utilities to be used internally.

"""
from datetime import datetime

import numpy as np
import pytz


TZ_UTC = pytz.timezone('UTC')

INT32_MIN, INT32_MAX = -2**31, 2**31 - 1


def round_half_up(value, factor=1):
    """Scale a single precision value and round it to the nearest integer.

    Devices do their sums in float32, so the product is taken in float32
    too. Halves round up (0.125 m * 100 --> 13 cm), not to even.
    """
    scaled = np.float32(value) * np.float32(factor)
    if np.isnan(scaled):
        return 0
    rounded = np.floor(np.float64(scaled) + 0.5)
    return int(np.clip(rounded, INT32_MIN, INT32_MAX))


def localize(timestamp, tz_str=None):
    """Attach a time zone to a naive datetime; aware ones pass through."""
    if timestamp.tzinfo is not None:
        return timestamp
    timezone = pytz.timezone(tz_str) if tz_str is not None else TZ_UTC
    return timezone.localize(timestamp)


def parse_start_time(text, tz_str=None):
    """Parse an ISO 8601 string (as typed on the command line).

    A trailing 'Z' is accepted for UTC.
    """
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    return localize(datetime.fromisoformat(text), tz_str)
