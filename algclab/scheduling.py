"""Sequences of non-overlapping time intervals, on three storage schemes."""

from __future__ import annotations

from algclab.bstree import BSTree
from algclab.interval import TimeInterval
from algclab.sortedlist import SortedList


def _compare_intervals(a: TimeInterval, b: TimeInterval) -> int:
    return a.compare(b)


def _render_interval(interval: TimeInterval) -> str:
    return interval.format()


def _check_index(index: int, size: int) -> None:
    if not 0 <= index < size:
        raise IndexError(f"index out of range: {index}")


class ArraySchedule:
    """A bounded schedule that keeps intervals in the order they were added."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self.capacity = capacity
        self._intervals: list[TimeInterval] = []

    def __len__(self) -> int:
        return len(self._intervals)

    def is_empty(self) -> bool:
        return not self._intervals

    def is_full(self) -> bool:
        return len(self._intervals) == self.capacity

    def add(self, interval: TimeInterval) -> bool:
        """Append ``interval``; return False if it overlaps a stored one."""
        if self.is_full():
            raise ValueError("schedule is full")
        if any(interval.overlaps(existing) for existing in self._intervals):
            return False
        self._intervals.append(interval)
        return True

    def get(self, index: int) -> TimeInterval:
        """The interval at position ``index``."""
        _check_index(index, len(self._intervals))
        return self._intervals[index]

    def pop(self, index: int) -> TimeInterval:
        """Remove and return the interval at position ``index``."""
        _check_index(index, len(self._intervals))
        return self._intervals.pop(index)


class ListSchedule:
    """An unbounded schedule kept in chronological order in a sorted list."""

    def __init__(self) -> None:
        self._intervals: SortedList[TimeInterval] = SortedList(_compare_intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def is_empty(self) -> bool:
        return len(self._intervals) == 0

    def is_full(self) -> bool:
        return False

    def add(self, interval: TimeInterval) -> bool:
        """Insert ``interval``; return False if it overlaps or is already stored."""
        for existing in self._intervals:
            if existing.overlaps(interval) or existing is interval:
                return False
        return self._intervals.insert(interval)

    def get(self, index: int) -> TimeInterval:
        """The interval at chronological position ``index``."""
        _check_index(index, len(self._intervals))
        self._intervals.move(index)
        return self._intervals.current_item

    def pop(self, index: int) -> TimeInterval:
        """Remove and return the interval at chronological position ``index``."""
        _check_index(index, len(self._intervals))
        self._intervals.move(index)
        return self._intervals.remove_current()


class TreeSchedule:
    """An unbounded schedule kept in chronological order in a search tree."""

    def __init__(self) -> None:
        self._intervals: BSTree[TimeInterval] = BSTree(
            _compare_intervals, _render_interval
        )

    def __len__(self) -> int:
        return len(self._intervals)

    def is_empty(self) -> bool:
        return self._intervals.is_empty()

    def is_full(self) -> bool:
        return False

    def add(self, interval: TimeInterval) -> bool:
        """Insert ``interval``; return False if it overlaps or is already stored."""
        for existing in self._intervals:
            if interval.overlaps(existing) or interval is existing:
                return False
        return self._intervals.add(interval)

    def get(self, index: int) -> TimeInterval:
        """The interval at chronological position ``index``."""
        _check_index(index, len(self._intervals))
        return self._intervals.kth_item(index)

    def pop(self, index: int) -> TimeInterval:
        """Remove and return the interval at chronological position ``index``."""
        _check_index(index, len(self._intervals))
        return self._intervals.remove_kth_item(index)