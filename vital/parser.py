# Copyright 2025, Scott Smith.  MIT License (see LICENSE).

# Decoder for the vital container: a short file header followed by
# packets of {int8 type, uint32 body length, body}.  Packets must be
# seen in creation order (devices before the tracks that name them,
# tracks before their records); anything referencing an unknown id is
# dropped.

import logging
import struct

from . import base
from . import binary
from .montype import montype_name

logger = logging.getLogger(__name__)

MAGIC = b'VITA'

PKT_TRKINFO = 0
PKT_REC = 1
PKT_DEVINFO = 9

_packet_hdr = struct.Struct('<bI')
_trkinfo_hdr = struct.Struct('<Hbb')
# display fields after the unit, in file order, with the value used when a
# writer left them off the end of the packet
_trkinfo_tail = [
    ('mindisp', 'float32', 0.),
    ('maxdisp', 'float32', 0.),
    ('col', 'uint32', 0),
    ('srate', 'float32', 0.),
    ('gain', 'float64', 1.),
    ('offset', 'float64', 0.),
    ('montype', 'int8', 0),
    ('did', 'uint32', 0),
]
_rec_hdr = struct.Struct('<xxdH')

def _decode_devinfo(vf, s):
    did, pos = binary.read_fixed(s, 0, 'uint32')
    typ, pos = binary.read_string(s, pos)
    name, pos = binary.read_string(s, pos)
    port, pos = binary.read_string(s, pos)
    vf.devs[did] = base.Device(name=name, type=typ, port=port)

def _decode_trkinfo(vf, s):
    tid, typ, fmt = _trkinfo_hdr.unpack_from(s, 0)
    name, pos = binary.read_string(s, _trkinfo_hdr.size)
    unit, pos = binary.read_string(s, pos)
    fields = {key: default for key, _, default in _trkinfo_tail}
    for key, ftype, _ in _trkinfo_tail:
        if pos + binary.fixed_size(ftype) > len(s):
            break
        fields[key], pos = binary.read_fixed(s, pos, ftype)

    did = fields['did']
    dev = vf.devs.get(did) if did else None
    dtname = '%s/%s' % (dev.name, name) if dev and dev.name else name

    trk = base.Track(tid=tid, name=name, dtname=dtname, type=typ, fmt=fmt, unit=unit,
                     **fields)
    vf.trks[tid] = trk

    # duplicates: last one wins
    mname = montype_name(trk.montype)
    if mname:
        vf.montype_trks[mname] = trk
    if name == 'EVENT':
        vf.event_track = trk

def _decode_wave(vf, trk, s, pos, dt):
    nsamp, pos = binary.read_fixed(s, pos, 'uint32')
    samples = binary.read_samples(s, pos, nsamp, binary.format_info(trk.fmt))
    if trk.srate > 0:
        vf.dtend = max(vf.dtend, dt + nsamp / trk.srate)
    return samples

def _decode_numeric(vf, trk, s, pos, dt):
    return binary.read_value(s, pos, binary.format_info(trk.fmt))

def _decode_string(vf, trk, s, pos, dt):
    return binary.read_string(s, pos + 4)[0]

_rec_decoders = {
    base.TrackKind.WAVE: _decode_wave,
    base.TrackKind.NUMERIC: _decode_numeric,
    base.TrackKind.STRING: _decode_string,
}

def _decode_rec(vf, s):
    dt, tid = _rec_hdr.unpack_from(s, 0)

    if not vf.has_records:
        vf.has_records = True
        vf.dtstart = vf.dtend = dt
    elif dt > 0 and dt < vf.dtstart:
        vf.dtstart = dt
    if dt > vf.dtend:
        vf.dtend = dt

    trk = vf.trks.get(tid)
    if trk is None:
        vf.dropped_records += 1
        return
    decoder = _rec_decoders.get(trk.type)
    if decoder is None:
        return
    val = decoder(vf, trk, s, _rec_hdr.size, dt)
    if val is not None: # unknown scalar format
        trk.recs.append(base.Record(dt, val))

_packet_decoders = {
    PKT_TRKINFO: _decode_trkinfo,
    PKT_REC: _decode_rec,
    PKT_DEVINFO: _decode_devinfo,
}

def parse(buf, progress=None):
    """Decode a fully decompressed vital file.

    `progress`, if given, is called with an integer percentage each time
    it increases.  Raises base.FormatError if the signature is wrong;
    a truncated file yields whatever was decoded before the damage."""
    s = memoryview(buf)
    if len(s) < len(MAGIC) or bytes(s[:len(MAGIC)]) != MAGIC:
        raise base.FormatError('Invalid vital file: missing VITA signature')
    if len(s) < 10:
        raise base.FormatError('Invalid vital file: truncated header')

    # 4 byte version is ignored
    hdrlen, = struct.unpack_from('<H', s, 8)
    pos = 10 + hdrlen

    vf = base.VitalFile()
    total = len(s)
    last_progress = 0
    unknown_packets = 0
    while pos + _packet_hdr.size < total:
        typ, pktlen = _packet_hdr.unpack_from(s, pos)
        pos += _packet_hdr.size
        if pos + pktlen > total:
            logger.debug('packet type %d at %x claims %d bytes, only %d left',
                         typ, pos, pktlen, total - pos)
            break

        decoder = _packet_decoders.get(typ)
        if decoder:
            try:
                decoder(vf, s[pos:pos + pktlen])
            except (struct.error, ValueError) as err:
                vf.skipped_packets += 1
                logger.debug('skipping packet type %d at %x: %s', typ, pos, err)
        else:
            unknown_packets += 1
        # always resync on the declared length
        pos += pktlen

        if progress:
            pct = pos * 100 // total
            if pct > last_progress:
                last_progress = pct
                progress(pct)

    logger.debug('%d devices, %d tracks; %d unknown packets, %d skipped, %d orphan records',
                 len(vf.devs), len(vf.trks), unknown_packets, vf.skipped_packets,
                 vf.dropped_records)
    return vf
