import pytest

from algclab.interval import TimeInterval
from algclab.moment import Moment


@pytest.fixture
def dt():
    return [
        Moment.create(2019, 12, 30, 14, 0, 0),
        Moment.create(2019, 12, 30, 23, 0, 0),
        Moment.create(2019, 12, 31, 9, 0, 0),
        Moment.create(2019, 12, 31, 12, 0, 0),
        Moment.create(2020, 1, 1, 11, 0, 0),
        Moment.create(2020, 1, 1, 18, 0, 0),
        Moment.create(2020, 2, 28, 20, 0, 0),
        Moment.create(2020, 2, 29, 8, 0, 0),
        Moment.create(2020, 2, 29, 20, 0, 0),
        Moment.create(2020, 3, 1, 8, 0, 0),
    ]


@pytest.fixture
def ti(dt):
    return [
        TimeInterval(dt[0], dt[1], "0-Passeio Serra"),
        TimeInterval(dt[2], dt[3], "1-Compras fim-de-ano"),
        TimeInterval(dt[3], dt[4], "2-Rave fim-de-ano"),
        TimeInterval(dt[2], dt[5], "3-Férias fim-de-ano"),
        TimeInterval(dt[4], dt[7], "4-Estudar AlgC"),
        TimeInterval(dt[8], dt[8], "5-Telefonar primo"),
        TimeInterval(dt[6], dt[9], "6-Maratona TV"),
    ]


def test_reversed_interval_raises(dt):
    with pytest.raises(ValueError):
        TimeInterval(dt[1], dt[0], "backwards")


def test_format(ti):
    assert ti[0].format() == "[2019-12-30 14:00:00, 2019-12-30 23:00:00[(0-Passeio Serra)"


def test_format_truncates_long_label(dt):
    text = TimeInterval(dt[0], dt[1], "x" * 400).format()
    assert len(text) <= 255
    assert text.endswith("x)")


def test_disjoint_intervals_are_ordered(ti):
    assert ti[0].compare(ti[1]) == -1
    assert ti[1].compare(ti[0]) == 1
    assert not ti[0].overlaps(ti[1])


def test_touching_intervals_do_not_overlap(ti):
    # ti[1] ends exactly where ti[2] starts
    assert ti[1].compare(ti[2]) == -1
    assert not ti[1].overlaps(ti[2])


def test_overlapping_intervals(ti):
    assert ti[1].overlaps(ti[3])
    assert ti[3].overlaps(ti[2])
    assert ti[4].overlaps(ti[6])


def test_identical_intervals_overlap(ti):
    assert ti[5].compare(ti[5]) == 0
    assert ti[0].overlaps(ti[0])


def test_contains(ti):
    assert ti[3].contains(ti[1])
    assert ti[3].contains(ti[2])
    assert not ti[1].contains(ti[3])
    assert ti[6].contains(ti[5])


def test_overlap_is_symmetric(ti):
    for a in ti:
        for b in ti:
            assert a.overlaps(b) == b.overlaps(a)


def test_contains_implies_overlap_for_nonempty(ti):
    for a in ti:
        for b in ti:
            if a.contains(b) and b.start.compare(b.end) < 0:
                assert a.overlaps(b)