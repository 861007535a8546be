#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions for this package.

"""


class WearableIOError(Exception):
    """Base exception."""
    _default_message = ''

    def __init__(self, message=None):
        super().__init__(message if message else self._default_message)


class MissingStartTimeError(WearableIOError):
    _default_message = ('a start time is needed before a summary can be '
                        'decoded; refusing to guess one')


class DecodeError(WearableIOError):
    """Base exception for payloads that can't be decoded."""
    _default_message = 'payload could not be decoded'


class TruncatedError(DecodeError):
    def __init__(self, offset, width, available):
        message = ('tried to read %d byte(s) at offset %d but the payload '
                   'is only %d byte(s) long' % (width, offset, available))
        super().__init__(message)
        self.offset, self.width, self.available = offset, width, available


class InvalidLengthError(DecodeError):
    def __init__(self, expected, got):
        message = 'wrong data length, should be %d, was %d' % (expected, got)
        super().__init__(message)
        self.expected, self.got = expected, got


class UnknownMemberError(DecodeError):
    def __init__(self, code, enum_name=None):
        message = 'no %s member for code %r' % (enum_name or 'enum', code)
        super().__init__(message)
        self.code, self.enum_name = code, enum_name


class UnknownActivityCodeError(UnknownMemberError):
    def __init__(self, code):
        super().__init__(code, 'ActivityKind')


class UnsupportedVersionError(DecodeError):
    def __init__(self, version):
        message = 'summary layout version %d is not a known layout' % version
        super().__init__(message)
        self.version = version
