# Copyright 2025, Scott Smith.  MIT License (see LICENSE).

import logging
import math

import numpy as np

from . import base

logger = logging.getLogger(__name__)

def _build_preview(trk, dtstart, filelen):
    if not (trk.srate > 0 and math.isfinite(filelen)):
        return np.zeros(0, dtype=np.uint8)
    tlen = max(math.ceil(trk.srate * filelen), 0)

    # display range, converted back into raw sample counts
    if trk.gain == 0:
        return None
    mincnt = (trk.mindisp - trk.offset) / trk.gain
    maxcnt = (trk.maxdisp - trk.offset) / trk.gain
    span = maxcnt - mincnt
    if not math.isfinite(span) or abs(span) < 1e-12:
        return None

    prev = np.zeros(tlen, dtype=np.uint8)
    for rec in trk.recs:
        vals = np.asarray(rec.val, dtype=np.float64)
        start = math.floor((rec.dt - dtstart) * trk.srate)
        lo = max(start, 0)
        hi = min(start + len(vals), tlen)
        if lo >= hi:
            continue
        vals = vals[lo - start:hi - start]
        # 0 is reserved for gaps, real values land in 1..255
        with np.errstate(invalid='ignore'):
            norm = np.clip((vals - mincnt) * 254 / span + 1, 1, 255)
        codes = np.where(np.isnan(norm), 0, np.floor(norm)).astype(np.uint8)
        codes[vals == 0] = 0
        prev[lo:hi] = codes
    return prev

def post_process(vf):
    """Sort every track's records by time and derive its display data.

    Wave tracks get `prev`, a uint8 array with one code per sample
    period since dtstart (0 = no data).  Other tracks get `data`, a list
    of (seconds since dtstart, value).  Safe to call more than once."""
    filelen = vf.dtend - vf.dtstart
    for trk in vf.trks.values():
        if not trk.recs:
            continue
        trk.recs.sort(key=lambda rec: rec.dt) # stable, ties keep file order

        if trk.type == base.TrackKind.WAVE:
            trk.prev = _build_preview(trk, vf.dtstart, filelen)
            if trk.prev is None:
                logger.debug('track %s: empty display range, no preview', trk.dtname)
        else:
            trk.data = [(rec.dt - vf.dtstart, rec.val) for rec in trk.recs]
