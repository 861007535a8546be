#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
parse is installed as an executable console_script with this package.

"""
from argparse import ArgumentParser
import logging

from pandas import DataFrame

from wearableio import huami, settings
from wearableio._util.misc import parse_start_time


SETTING_ENUMS = {
    'language': settings.Language,
}


def summary_frame(record):
    """One row per field: key, value, unit."""
    return DataFrame([(key, field.value, field.unit)
                      for key, field in record.fields.items()],
                     columns=('key', 'value', 'unit'))


def run_summary(args):
    with open(args.input, 'rb') as f:
        buffer = f.read()

    start = parse_start_time(args.start, args.tz)
    record = huami.decode(buffer, start, strict=args.strict)

    print('# %s, %s --> %s' % (record.activity_kind.value,
                               record.start_time.isoformat(),
                               record.end_time.isoformat()))
    frame = summary_frame(record)
    if args.output is None:
        print(frame.to_csv(index=False))
    else:
        frame.to_csv(args.output, index=False, encoding='utf-8')


def run_setting(args):
    blob = bytes.fromhex(args.blob)
    current, supported = settings.decode_with_support(
        blob, SETTING_ENUMS[args.setting])

    print('current: %s' % current.name)
    print('supported: %s' % ', '.join(member.name for member in supported))


def parse(argv=None):

    # Argument handling
    parser = ArgumentParser(description='decode a wearable device payload')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='log what the decoders are doing')
    subparsers = parser.add_subparsers(dest='command')
    subparsers.required = True

    summary = subparsers.add_parser('summary',
                                    help='decode a raw activity summary')
    summary.add_argument('input',
                         type=str,
                         help='raw file to read')
    summary.add_argument('--start',
                         type=str,
                         required=True,
                         help='activity start time (ISO 8601)')
    summary.add_argument('--tz',
                         type=str,
                         default=None,
                         help='optional; time zone of a naive --start')
    summary.add_argument('--strict',
                         action='store_true',
                         help='refuse unknown summary versions')
    summary.add_argument('--output',
                         type=str,
                         metavar='filename',
                         default=None,
                         help='optional; file to write to')
    summary.set_defaults(func=run_summary)

    for name in SETTING_ENUMS:
        setting = subparsers.add_parser(name,
                                        help='decode a %s setting' % name)
        setting.add_argument('blob',
                             type=str,
                             help='the 5 byte payload, as hex')
        setting.set_defaults(func=run_setting, setting=name)

    args = parser.parse_args(argv)

    # Script begins
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level,
                        format='%(levelname)s %(name)s: %(message)s')
    args.func(args)

    return 0


if __name__ == '__main__':
    parse()
