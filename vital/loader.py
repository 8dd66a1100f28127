# Copyright 2025, Scott Smith.  MIT License (see LICENSE).

import gzip
import logging
import time

from . import parser
from . import tracks

logger = logging.getLogger(__name__)

GZIP_MAGIC = b'\x1f\x8b'

def load_vital(fname, progress=None):
    """Read, decompress, parse and post-process a .vital file.

    `progress` receives 0..100; decoding packets covers the first 90."""
    with open(fname, 'rb') as f:
        data = f.read()
    t0 = time.perf_counter()
    # recordings are normally stored gzipped, accept raw ones too
    if data[:2] == GZIP_MAGIC:
        data = gzip.decompress(data)

    t1 = time.perf_counter()
    last = 0
    def parse_progress(pct):
        nonlocal last
        pct = pct * 9 // 10
        if pct > last:
            last = pct
            progress(pct)
    vf = parser.parse(data, parse_progress if progress else None)

    t2 = time.perf_counter()
    tracks.post_process(vf)
    if progress:
        progress(100)

    t3 = time.perf_counter()
    logger.debug('%s: decompress %.4f parse %.4f process %.4f',
                 fname, t1 - t0, t2 - t1, t3 - t2)
    return vf
