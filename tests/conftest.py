"""Shared fixtures: synthetic .vital buffers."""

import pytest

from vitalwriter import VitalWriter


@pytest.fixture
def writer():
    return VitalWriter()


@pytest.fixture
def bp_file():
    """A device, an arterial wave track, a numeric and a string track."""
    w = VitalWriter()
    w.device(1, 'Solar8000', 'Philips', 'COM1')
    w.track(1, 'ART', typ=1, fmt=1, unit='mmHg', mindisp=0., maxdisp=254., srate=2.,
            montype=4, did=1, col=0xffff0000)
    w.track(2, 'HR', typ=2, fmt=1, unit='/min', montype=2, did=1, col=0xff00ff00)
    w.track(3, 'EVENT', typ=5, fmt=1)
    w.wave(1000., 1, [0., 1., 254.])
    w.numeric(1010., 2, 72.)
    w.numeric(1000., 2, 70.)
    w.string(1001., 3, 'Surgery started')
    w.wave(1001., 1, [0.])
    return w.getvalue()
