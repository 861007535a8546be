#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A read position over an in-memory payload.

Device payloads are small and arrive whole, so this never touches the disk:
it wraps an immutable ``bytes`` object and walks through it with ``struct``
formats.

"""
from struct import Struct, calcsize

from wearableio._util.exceptions import TruncatedError


# Named widths for bytes we have to step over but can't interpret.
RESERVED_U8 = 'x'
RESERVED_U16 = '2x'
RESERVED_U32 = '4x'


class BinaryCursor:
    """Typed, bounds-checked reads over a byte buffer.

    Attributes
    ----------
    buffer : bytes
        The payload. Never modified.
    position : int
        Offset of the next byte to be read.
    endian : str
        ``struct`` byte order prefix; little endian unless told otherwise.
    """
    __slots__ = ('buffer', 'position', 'endian')

    def __init__(self, buffer, *, endian='<'):
        self.buffer = bytes(buffer)
        self.position = 0
        self.endian = endian

    def __len__(self):
        return len(self.buffer)

    @property
    def bytes_left(self):
        return len(self.buffer) - self.position

    def _claim(self, size):
        """Advance by `size` bytes, returning the offset we started at."""
        start = self.position
        if size > self.bytes_left:
            raise TruncatedError(start, size, len(self.buffer))
        self.position += size
        return start

    def unpack(self, fmt):
        """Unpack a ``struct`` format at the current position."""
        packer = Struct(self.endian + fmt)
        start = self._claim(packer.size)
        return packer.unpack_from(self.buffer, start)

    def skip(self, size):
        self._claim(size)

    def seek(self, offset):
        """Jump to an absolute offset."""
        if not 0 <= offset <= len(self.buffer):
            raise TruncatedError(offset, 0, len(self.buffer))
        self.position = offset

    def read_fields(self, table):
        """Read a layout table of ``(name, fmt)`` pairs into a dict.

        Pad formats (e.g. ``RESERVED_U32``) are consumed but produce no
        entry, so reserved bytes can sit in a table next to real fields.
        The whole table is bounds checked before anything is consumed.
        """
        fmt = ''.join(field_fmt for _, field_fmt in table)
        size = calcsize(self.endian + fmt)
        if size > self.bytes_left:
            raise TruncatedError(self.position, size, len(self.buffer))

        names = [name for name, field_fmt in table
                 if not field_fmt.endswith('x')]
        return dict(zip(names, self.unpack(fmt)))

    # Fixed width shortcuts
    # ---------------------
    def read_u8(self):
        return self.unpack('B')[0]

    def read_s8(self):
        return self.unpack('b')[0]

    def read_u16(self):
        return self.unpack('H')[0]

    def read_s16(self):
        return self.unpack('h')[0]

    def read_u32(self):
        return self.unpack('I')[0]

    def read_s32(self):
        return self.unpack('i')[0]

    def read_f32(self):
        return self.unpack('f')[0]
