# Copyright 2025, Scott Smith.  MIT License (see LICENSE).

# Read-only lookups over post-processed tracks.  Times are seconds since
# the file's dtstart.

import bisect
import math

import numpy as np

def value_at_time(series, time, max_age=300):
    """Most recent value at or before `time`, or None if there is none or
    it is older than `max_age` seconds.  `series` is a track's sorted
    (offset, value) list.  No interpolation."""
    if not series:
        return None
    i = bisect.bisect_right(series, time, key=lambda entry: entry[0])
    if i == 0:
        return None
    dt, val = series[i - 1]
    # inclusive: a value exactly max_age old still counts as current
    if dt >= time - max_age:
        return val
    return None

def downsample_waveform(prev, srate, start_time, end_time, buckets):
    """Min/max envelope of a preview buffer for drawing.

    Returns [(bucket center time, min code, max code)], skipping buckets
    that contain nothing but gaps."""
    if prev is None or not len(prev) or buckets <= 0:
        return []
    start = math.floor(start_time * srate)
    end = math.floor(end_time * srate)
    total = end - start
    if total <= 0:
        return []

    per_bucket = max(1, total // buckets)
    ret = []
    for i in range(buckets):
        bstart = start + i * per_bucket
        bend = min(start + (i + 1) * per_bucket, end, len(prev))
        if bstart >= len(prev):
            break
        seg = prev[max(bstart, 0):max(bend, 0)]
        seg = seg[seg > 0]
        if len(seg):
            ret.append(((bstart + (bend - bstart) / 2) / srate,
                        int(np.min(seg)),
                        int(np.max(seg))))
    return ret

def waveform_segment(prev, srate, start_time, duration):
    """Preview codes covering [start_time, start_time + duration), clipped
    to the buffer.  Empty if start_time falls outside it."""
    if prev is None or not len(prev):
        return np.zeros(0, dtype=np.uint8)
    start = math.floor(start_time * srate)
    end = math.floor((start_time + duration) * srate)
    if start < 0 or start >= len(prev):
        return np.zeros(0, dtype=np.uint8)
    return prev[start:min(len(prev), end)].copy()
