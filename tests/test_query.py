import numpy as np

from vital import query

SERIES = [(0., 10), (10., 20), (20., 30)]


def test_value_at_time():
    assert query.value_at_time(SERIES, 12, max_age=5) == 20
    assert query.value_at_time(SERIES, 16, max_age=5) is None # 6 seconds old
    assert query.value_at_time(SERIES, 25, max_age=5) == 30
    assert query.value_at_time(SERIES, 100, max_age=5) is None


def test_value_at_time_edges():
    assert query.value_at_time([], 5) is None
    assert query.value_at_time(None, 5) is None
    assert query.value_at_time(SERIES, -1) is None
    assert query.value_at_time(SERIES, 0) == 10
    assert query.value_at_time(SERIES, 10) == 20
    # default window is five minutes
    assert query.value_at_time(SERIES, 320) == 30
    assert query.value_at_time(SERIES, 321) is None


def test_value_at_time_duplicates():
    series = [(0., 'a'), (5., 'b'), (5., 'c')]
    assert query.value_at_time(series, 5) == 'c'
    assert query.value_at_time(series, 4.9) == 'a'


PREV = np.array([10, 20, 30, 40, 50, 60, 70, 80], dtype=np.uint8)


def test_downsample_all_data():
    env = query.downsample_waveform(PREV, 1., 0., 8., 4)
    assert env == [(1., 10, 20), (3., 30, 40), (5., 50, 60), (7., 70, 80)]
    assert all(lo <= hi for _, lo, hi in env)


def test_downsample_skips_gaps():
    assert query.downsample_waveform(np.zeros(8, dtype=np.uint8), 1., 0., 8., 4) == []
    prev = np.array([0, 0, 5, 0, 0, 0, 9, 3], dtype=np.uint8)
    assert query.downsample_waveform(prev, 2., 0., 4., 4) == [(1.5, 5, 5), (3.5, 3, 9)]


def test_downsample_window():
    # samples 2..5 of an 8 sample buffer at 2 Hz
    env = query.downsample_waveform(PREV, 2., 1., 3., 2)
    assert env == [(1.5, 30, 40), (2.5, 50, 60)]


def test_downsample_clipped_and_empty():
    env = query.downsample_waveform(PREV, 1., 6., 20., 14)
    assert env == [(6.5, 70, 70), (7.5, 80, 80)]
    assert query.downsample_waveform(PREV, 1., 5., 5., 4) == []
    assert query.downsample_waveform(PREV, 1., 0., 8., 0) == []
    assert query.downsample_waveform(None, 1., 0., 8., 4) == []
    assert query.downsample_waveform(np.zeros(0, dtype=np.uint8), 1., 0., 8., 4) == []


def test_waveform_segment():
    prev = np.arange(10, dtype=np.uint8)
    assert query.waveform_segment(prev, 2., 1., 2.).tolist() == [2, 3, 4, 5]
    assert query.waveform_segment(prev, 2., 4., 10.).tolist() == [8, 9]
    assert len(query.waveform_segment(prev, 2., 5., 1.)) == 0
    assert len(query.waveform_segment(prev, 2., -1., 3.)) == 0
    assert len(query.waveform_segment(None, 2., 0., 1.)) == 0


def test_waveform_segment_is_a_copy():
    prev = np.arange(10, dtype=np.uint8)
    seg = query.waveform_segment(prev, 1., 0., 3.)
    seg[0] = 99
    assert prev[0] == 0
