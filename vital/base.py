# Copyright 2025, Scott Smith.  MIT License (see LICENSE).

from collections import namedtuple
from dataclasses import dataclass, field
import typing

import numpy as np

class FormatError(ValueError):
    pass

# track type codes as stored in the file
class TrackKind:
    WAVE = 1
    NUMERIC = 2
    STRING = 5

    names = {WAVE: 'wave', NUMERIC: 'numeric', STRING: 'string'}

# val is a numpy array for wave tracks, a number for numeric tracks
# and a str for string tracks
Record = namedtuple('Record', ['dt', 'val'])

@dataclass(eq=False)
class Device:
    name: str = ''
    type: str = ''
    port: str = ''

@dataclass(eq=False)
class Track:
    tid: int
    name: str
    dtname: str
    type: int
    fmt: int
    unit: str
    mindisp: float
    maxdisp: float
    col: int
    srate: float
    gain: float
    offset: float
    montype: int
    did: int
    recs: typing.List[Record] = field(default_factory=list, repr=False)
    # filled in by tracks.post_process:
    prev: typing.Optional[np.ndarray] = field(default=None, repr=False) # wave tracks
    data: typing.Optional[list] = field(default=None, repr=False) # numeric/string tracks

    def color(self):
        return '#%06x' % (self.col & 0xffffff)

@dataclass(eq=False)
class VitalFile:
    devs: typing.Dict[int, Device] = field(default_factory=lambda: {0: Device()})
    trks: typing.Dict[int, Track] = field(default_factory=dict)
    montype_trks: typing.Dict[str, Track] = field(default_factory=dict)
    event_track: typing.Optional[Track] = None
    dtstart: float = 0.
    dtend: float = 0.
    has_records: bool = False
    dropped_records: int = 0 # records whose tid had no track
    skipped_packets: int = 0 # packets that failed to decode inside their frame

    def duration(self):
        if not self.has_records:
            return 0
        return self.dtend - self.dtstart

    def track_list(self):
        return [{'tid': trk.tid,
                 'name': trk.name,
                 'dtname': trk.dtname,
                 'type': trk.type,
                 'unit': trk.unit,
                 'montype': trk.montype,
                 'color': trk.color()}
                for trk in self.trks.values()]

    def find_track(self, name):
        if name in self.montype_trks:
            return self.montype_trks[name]
        for key in ('dtname', 'name'):
            for trk in self.trks.values():
                if getattr(trk, key) == name:
                    return trk
        return None
