# Copyright 2025, Scott Smith.  MIT License (see LICENSE).

import math
import time

def format_time(seconds):
    if not math.isfinite(seconds) or seconds < 0:
        return '00:00:00'
    seconds = int(seconds)
    return '%02d:%02d:%02d' % (seconds // 3600, seconds // 60 % 60, seconds % 60)

def format_time_short(seconds):
    if not math.isfinite(seconds) or seconds < 0:
        return '00:00'
    seconds = int(seconds)
    return '%02d:%02d' % (seconds // 60, seconds % 60)

def format_duration(seconds):
    if not math.isfinite(seconds) or seconds < 0:
        return '0s'
    if seconds < 60:
        return '%ds' % round(seconds)
    if seconds < 3600:
        return '%dm %ds' % (seconds // 60, round(seconds % 60))
    return '%dh %dm' % (seconds // 3600, seconds // 60 % 60)

# wall clock time of day, local timezone
def format_timestamp(timestamp):
    tm = time.localtime(timestamp)
    return '%02d:%02d:%02d' % (tm.tm_hour, tm.tm_min, tm.tm_sec)

def parse_time(text):
    """'HH:MM:SS', 'MM:SS' or 'SS' to seconds."""
    parts = [float(p) for p in text.split(':')]
    if len(parts) == 3:
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    if len(parts) == 2:
        return parts[0] * 60 + parts[1]
    return parts[0] or 0
