import math

from vital import timefmt


def test_format_time():
    assert timefmt.format_time(0) == '00:00:00'
    assert timefmt.format_time(3725.9) == '01:02:05'
    assert timefmt.format_time(-1) == '00:00:00'
    assert timefmt.format_time(math.inf) == '00:00:00'
    assert timefmt.format_time_short(125) == '02:05'
    assert timefmt.format_time_short(math.nan) == '00:00'


def test_format_duration():
    assert timefmt.format_duration(42) == '42s'
    assert timefmt.format_duration(125) == '2m 5s'
    assert timefmt.format_duration(7260) == '2h 1m'
    assert timefmt.format_duration(-3) == '0s'


def test_parse_time():
    assert timefmt.parse_time('01:02:05') == 3725
    assert timefmt.parse_time('2:05') == 125
    assert timefmt.parse_time('42.5') == 42.5
