import pytest

from algclab.sortedlist import SortedList


def cmp(a, b):
    return (a > b) - (a < b)


def build():
    sl = SortedList(cmp)
    for value in range(1, 12, 2):
        assert sl.insert(value) is True
        sl.check_invariants()
    assert sl.insert(11) is False
    for value in range(0, 13, 2):
        assert sl.insert(value) is True
        sl.check_invariants()
    return sl


def test_insert_keeps_order():
    sl = build()
    assert len(sl) == 13
    assert list(sl) == list(range(13))


@pytest.mark.parametrize(
    "target, found, position",
    [(-6, False, 5), (0, True, 0), (6, True, 6), (12, True, 12), (18, False, 5)],
)
def test_search(target, found, position):
    sl = build()
    sl.move(5)
    assert sl.search(target) is found
    assert sl.current_position == position


def test_remove_head_until_empty():
    sl = build()
    out = []
    while len(sl):
        out.append(sl.remove_head())
        sl.check_invariants()
    assert out == list(range(13))
    with pytest.raises(IndexError):
        sl.remove_head()


def test_insert_before_cursor_shifts_position():
    sl = SortedList(cmp)
    for v in (10, 20, 30):
        sl.insert(v)
    sl.move(2)
    sl.insert(5)
    assert sl.current_position == 3
    assert sl.current_item == 30
    sl.check_invariants()


def test_remove_tail_moves_cursor_outside():
    sl = SortedList(cmp)
    for v in (1, 2, 3):
        sl.insert(v)
    sl.move_to_tail()
    assert sl.remove_tail() == 3
    assert sl.current_position == -1
    sl.check_invariants()


def test_remove_head_keeps_cursor_on_same_item():
    sl = SortedList(cmp)
    for v in (1, 2, 3):
        sl.insert(v)
    sl.move(2)
    assert sl.remove_head() == 1
    assert sl.current_item == 3
    sl.check_invariants()


def test_move_wraps():
    sl = SortedList(cmp)
    for v in (1, 2, 3):
        sl.insert(v)
    sl.move(3)
    assert sl.current_position == -1
    sl.move_to_next()
    assert sl.current_item == 1
    sl.move_to_previous()
    assert sl.current_position == -1
    sl.move_to_previous()
    assert sl.current_item == 3


def test_move_out_of_range():
    sl = SortedList(cmp)
    sl.insert(1)
    with pytest.raises(IndexError):
        sl.move(2)
    with pytest.raises(IndexError):
        sl.move(-2)


def test_current_item_outside_raises():
    sl = SortedList(cmp)
    sl.insert(1)
    with pytest.raises(IndexError):
        _ = sl.current_item
    with pytest.raises(IndexError):
        sl.replace_current(2)


def test_replace_and_clear():
    sl = SortedList(cmp)
    for v in (1, 2, 3):
        sl.insert(v)
    sl.move(1)
    sl.replace_current(99)
    assert list(sl) == [1, 99, 3]
    with pytest.raises(AssertionError):
        sl.check_invariants()
    sl.clear()
    assert len(sl) == 0
    assert sl.current_position == -1