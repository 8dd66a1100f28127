"""Builds synthetic .vital buffers, one packet at a time."""

import struct

import numpy as np

from vital import binary


def text(s):
    raw = s.encode('latin-1')
    return struct.pack('<I', len(raw)) + raw


class VitalWriter:
    def __init__(self, header=b''):
        self.parts = [b'VITA', struct.pack('<I', 3), struct.pack('<H', len(header)), header]

    def packet(self, typ, body):
        self.parts.append(struct.pack('<bI', typ, len(body)) + body)
        return self

    def device(self, did, name, typ='', port=''):
        return self.packet(9, struct.pack('<I', did) + text(typ) + text(name) + text(port))

    def track(self, tid, name, typ=2, fmt=1, unit='', mindisp=0., maxdisp=100., col=0,
              srate=0., gain=1., offset=0., montype=0, did=0):
        return self.packet(0, struct.pack('<Hbb', tid, typ, fmt) + text(name) + text(unit)
                           + struct.pack('<ffIfddbI', mindisp, maxdisp, col, srate,
                                         gain, offset, montype, did))

    def record(self, dt, tid, payload=b''):
        return self.packet(1, struct.pack('<HdH', 0, dt, tid) + payload)

    def wave(self, dt, tid, samples, fmt=1):
        code = binary.FORMATS[fmt].code
        samples = np.asarray(samples, dtype='<' + code)
        return self.record(dt, tid, struct.pack('<I', len(samples)) + samples.tobytes())

    def numeric(self, dt, tid, value, fmt=1):
        return self.record(dt, tid, struct.pack('<' + binary.FORMATS[fmt].code, value))

    def string(self, dt, tid, value):
        return self.record(dt, tid, struct.pack('<I', 0) + text(value))

    def raw(self, data):
        self.parts.append(data)
        return self

    def getvalue(self):
        return b''.join(self.parts)
