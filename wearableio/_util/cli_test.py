#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import struct

import pytest

from wearableio._util import cli, exceptions


def treadmill_summary():
    """Version 518 treadmill summary: 10 minutes, 1234 steps."""
    raw = struct.pack('<2H2I3i', 518, 8, 1000, 1600, 0, 0, 0)
    return raw + struct.pack('<2I4i20f4x4H',
                             1234, 600, *[0] * 24, 0, 0, 130, 0)


def test_language(capsys):
    assert cli.parse(['language', '0200000005']) == 0

    out = capsys.readouterr().out
    assert 'current: JAPANESE' in out
    assert 'supported: ENGLISH, JAPANESE' in out


def test_summary(tmp_path, capsys):
    path = tmp_path / 'summary.bin'
    path.write_bytes(treadmill_summary())

    cli.parse(['summary', str(path), '--start', '2020-03-01T10:00',
               '--tz', 'UTC'])

    out = capsys.readouterr().out
    assert '2020-03-01T10:10:00+00:00' in out
    assert 'steps,1234,steps_unit' in out
    assert 'averageStride,130,cm' in out


def test_summary_to_file(tmp_path):
    path = tmp_path / 'summary.bin'
    path.write_bytes(treadmill_summary())
    output = tmp_path / 'summary.csv'

    cli.parse(['summary', str(path), '--start', '2020-03-01T10:00Z',
               '--output', str(output)])

    lines = output.read_text(encoding='utf-8').splitlines()
    assert lines[0] == 'key,value,unit'
    assert 'activeSeconds,600,seconds' in lines


def test_summary_truncated(tmp_path):
    path = tmp_path / 'summary.bin'
    path.write_bytes(treadmill_summary()[:30])

    with pytest.raises(exceptions.TruncatedError):
        cli.parse(['summary', str(path), '--start', '2020-03-01T10:00'])
