# Copyright 2025, Scott Smith.  MIT License (see LICENSE).

# Field readers for the vital container.  Everything is little endian.
# Readers take an explicit position and return (value, next position);
# reading past the end of the given buffer raises struct.error.

from collections import namedtuple
import struct

import numpy as np

Format = namedtuple('Format', ['code', 'size', 'signed', 'is_float'])

# indexed by the format code stored in the track info packet
FORMATS = {
    1: Format('f', 4, True, True),   # float32
    2: Format('d', 8, True, True),   # float64
    3: Format('b', 1, True, False),  # int8
    4: Format('B', 1, False, False), # uint8
    5: Format('h', 2, True, False),  # int16
    6: Format('H', 2, False, False), # uint16
    7: Format('i', 4, True, False),  # int32
    8: Format('I', 4, False, False), # uint32
}

# 0 and >= 9 are reserved.  Zero width means "decode nothing".
UNKNOWN_FORMAT = Format('', 0, False, False)

_fixed = {
    'int8': struct.Struct('<b'),
    'uint8': struct.Struct('<B'),
    'int16': struct.Struct('<h'),
    'uint16': struct.Struct('<H'),
    'int32': struct.Struct('<i'),
    'uint32': struct.Struct('<I'),
    'float32': struct.Struct('<f'),
    'float64': struct.Struct('<d'),
}

_u32 = _fixed['uint32']

def format_info(fmt):
    return FORMATS.get(fmt, UNKNOWN_FORMAT)

def fixed_size(typ):
    return _fixed[typ].size

def read_fixed(buf, pos, typ):
    dec = _fixed[typ]
    return dec.unpack_from(buf, pos)[0], pos + dec.size

def read_string(buf, pos):
    n, = _u32.unpack_from(buf, pos)
    pos += 4
    if pos + n > len(buf):
        raise struct.error('string of %d bytes at %x runs past end of buffer' % (n, pos))
    # one byte per character, no multi-byte decoding
    return bytes(buf[pos:pos + n]).decode('latin-1'), pos + n

def read_samples(buf, pos, count, fmt):
    """Decode `count` samples of format `fmt` (a Format) starting at `pos`.

    Returns a numpy array in the file's native element type, or an empty
    float32 array when the format is unknown."""
    if not fmt.size:
        return np.zeros(0, dtype=np.float32)
    if pos + count * fmt.size > len(buf):
        raise struct.error('%d samples at %x run past end of buffer' % (count, pos))
    return np.frombuffer(buf, dtype=np.dtype('<' + fmt.code), count=count, offset=pos).copy()

def read_value(buf, pos, fmt):
    """Decode a single scalar; unknown formats yield None."""
    if not fmt.size:
        return None
    return struct.unpack_from('<' + fmt.code, buf, pos)[0]
