import pytest

from algclab.clocktime import TimeOfDay
from algclab.date import Date
from algclab.moment import Moment, is_valid_moment


def test_is_valid_moment():
    assert is_valid_moment(2019, 12, 25, 15, 55, 30)
    assert not is_valid_moment(2019, 2, 29, 15, 55, 30)
    assert not is_valid_moment(2019, 12, 25, 24, 0, 0)


def test_create_and_format():
    m = Moment.create(2019, 12, 25, 15, 55, 30)
    assert m.format() == "2019-12-25 15:55:30"
    assert m.date == Date(2019, 12, 25)
    assert m.time == TimeOfDay.from_hms(15, 55, 30)


def test_create_invalid_raises():
    with pytest.raises(ValueError):
        Moment.create(2019, 11, 31, 0, 0, 0)


def test_parse_source_example():
    assert Moment.parse("1111-2-3 13:05:55") == Moment.create(1111, 2, 3, 13, 5, 55)


def test_parse_round_trip():
    m = Moment.create(2020, 5, 1, 11, 10, 9)
    assert Moment.parse(m.format()) == m


def test_parse_without_time_is_midnight():
    assert Moment.parse("2020-5-1") == Moment.create(2020, 5, 1, 0, 0, 0)


def test_parse_bad_time_is_midnight():
    assert Moment.parse("2020-5-1 99:99") == Moment.create(2020, 5, 1, 0, 0, 0)


def test_parse_bad_date_raises():
    with pytest.raises(ValueError):
        Moment.parse("2020-2-30 10:00:00")


def test_compare():
    dt1 = Moment.create(2019, 12, 25, 15, 55, 30)
    dt2 = Moment.create(2020, 5, 1, 11, 10, 9)
    assert dt1.compare(dt1) == 0
    assert dt1.compare(dt2) < 0
    assert dt2.compare(dt1) > 0
    assert dt2.compare(dt2) == 0


def test_compare_same_day_uses_time():
    a = Moment.create(2019, 12, 30, 14, 0, 0)
    b = Moment.create(2019, 12, 30, 23, 0, 0)
    assert a.compare(b) < 0
    assert b.compare(a) > 0
    assert a < b