# Copyright 2025, Scott Smith.  MIT License (see LICENSE).

from .base import Device, FormatError, Record, Track, TrackKind, VitalFile
from .loader import load_vital
from .parser import parse
from .query import downsample_waveform, value_at_time, waveform_segment
from .tracks import post_process
