#!/usr/bin/python3

# Copyright 2025, Scott Smith.  MIT License (see LICENSE).

import argparse
import configparser
import logging
import os
import sys
import zlib

from vital import base, loader, query, timefmt

default_config = os.path.join(os.path.expanduser('~'), '.config', 'vitalview', 'config.ini')

def load_config(fname):
    config = configparser.ConfigParser()
    config['main'] = {} # base structure initialization
    config.read(fname)
    return config

def print_summary(vf, out):
    print('Duration: %s (%s)' % (timefmt.format_time(vf.duration()),
                                 timefmt.format_duration(vf.duration())), file=out)
    if vf.has_records:
        print('Start: %s' % timefmt.format_timestamp(vf.dtstart), file=out)
    print('Devices:', file=out)
    for did, dev in sorted(vf.devs.items()):
        if did:
            print('  %3d %-20s %-12s %s' % (did, dev.name, dev.type, dev.port), file=out)
    print('Tracks:', file=out)
    for trk in sorted(vf.trks.values(), key=lambda t: t.tid):
        print('  %5d %-8s %-32s %-8s %7d %s' % (trk.tid,
                                               base.TrackKind.names.get(trk.type, '?'),
                                               trk.dtname,
                                               trk.unit,
                                               len(trk.recs),
                                               trk.color()), file=out)
    if vf.dropped_records or vf.skipped_packets:
        print('Dropped %d records with unknown tracks, skipped %d bad packets'
              % (vf.dropped_records, vf.skipped_packets), file=out)

def print_values(vf, at, max_age, buckets, out):
    print('Values at %s:' % timefmt.format_time(at), file=out)
    for trk in sorted(vf.trks.values(), key=lambda t: t.tid):
        if trk.data is not None:
            val = query.value_at_time(trk.data, at, max_age)
            print('  %-32s %s %s' % (trk.dtname, '-' if val is None else val, trk.unit), file=out)
        elif trk.prev is not None:
            env = query.downsample_waveform(trk.prev, trk.srate, at, at + 1, buckets)
            print('  %-32s %s' % (trk.dtname,
                                  ' '.join('%d-%d' % (lo, hi) for _, lo, hi in env) or '-'),
                  file=out)

def main(argv=None, out=None):
    out = out or sys.stdout
    ap = argparse.ArgumentParser(description='Summarize a VitalDB recording')
    ap.add_argument('file', help='.vital file (gzipped or raw)')
    ap.add_argument('--at', type=timefmt.parse_time,
                    help='show values at this offset (seconds or HH:MM:SS)')
    ap.add_argument('--max-age', type=float, help='staleness window in seconds')
    ap.add_argument('--buckets', type=int, help='waveform envelope buckets per second')
    ap.add_argument('--config', default=default_config, help='config file')
    ap.add_argument('-v', '--verbose', action='store_true')
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(name)s: %(message)s')
    config = load_config(args.config)
    max_age = (args.max_age if args.max_age is not None
               else config.getfloat('main', 'max_age', fallback=300.))
    buckets = (args.buckets if args.buckets is not None
               else config.getint('main', 'buckets', fallback=10))

    try:
        vf = loader.load_vital(args.file)
    except (base.FormatError, OSError, EOFError, zlib.error) as err:
        print('error: %s' % err, file=sys.stderr)
        return 1

    print_summary(vf, out)
    if args.at is not None:
        print_values(vf, args.at, max_age, buckets, out)
    return 0

if __name__ == '__main__':
    sys.exit(main())
