"""A sorted sequence with a movable cursor."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


class SortedList(Generic[T]):
    """Items kept in strictly increasing order under ``compare``.

    The cursor (current position) is either on an item (0 <= position < len)
    or outside the list (position -1).
    """

    def __init__(self, compare: Comparator) -> None:
        self._compare = compare
        self._items: list[T] = []
        self._pos = -1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def clear(self) -> None:
        """Remove every item and move the cursor outside."""
        self._items.clear()
        self._pos = -1

    @property
    def current_is_inside(self) -> bool:
        """True when the cursor is on an item."""
        return self._pos != -1

    @property
    def current_position(self) -> int:
        """The cursor position, or -1 when outside."""
        return self._pos

    @property
    def current_item(self) -> T:
        """The item under the cursor."""
        if not self.current_is_inside:
            raise IndexError("cursor is outside the list")
        return self._items[self._pos]

    def replace_current(self, item: T) -> None:
        """Put ``item`` in place of the item under the cursor."""
        if not self.current_is_inside:
            raise IndexError("cursor is outside the list")
        self._items[self._pos] = item

    def move(self, position: int) -> None:
        """Move the cursor; -1 or ``len(self)`` moves it outside."""
        size = len(self._items)
        if not -1 <= position <= size:
            raise IndexError(f"position out of range: {position}")
        self._pos = -1 if position == size else position

    def move_to_next(self) -> None:
        """Step forward; from the tail go outside, from outside go to the head."""
        self.move(self._pos + 1 if self._pos < len(self._items) - 1 else -1)

    def move_to_previous(self) -> None:
        """Step back; from the head go outside, from outside go to the tail."""
        self.move(self._pos - 1 if self._pos >= 0 else len(self._items) - 1)

    def move_to_head(self) -> None:
        self.move(0)

    def move_to_tail(self) -> None:
        self.move(len(self._items) - 1)

    def search(self, item: Any) -> bool:
        """Move the cursor to the first item comparing equal to ``item``.

        Return False and leave the cursor alone if there is none.
        """
        for index, existing in enumerate(self._items):
            if self._compare(existing, item) == 0:
                self._pos = index
                return True
        return False

    def insert(self, item: T) -> bool:
        """Insert ``item`` in order; return False if an equal item exists.

        The cursor keeps pointing at the same item.
        """
        index = len(self._items)
        for i, existing in enumerate(self._items):
            result = self._compare(item, existing)
            if result > 0:
                continue
            if result == 0:
                return False
            index = i
            break
        self._items.insert(index, item)
        if self._pos >= index:
            self._pos += 1
        return True

    def remove_head(self) -> T:
        """Remove and return the first item.

        A cursor on the head moves to the new head.
        """
        if not self._items:
            raise IndexError("remove from an empty list")
        item = self._items.pop(0)
        if self._pos == 0:
            if not self._items:
                self._pos = -1
        elif self._pos > 0:
            self._pos -= 1
        return item

    def remove_tail(self) -> T:
        """Remove and return the last item. A cursor on the tail moves outside."""
        if not self._items:
            raise IndexError("remove from an empty list")
        if self._pos == len(self._items) - 1:
            self._pos = -1
        return self._items.pop()

    def remove_current(self) -> T:
        """Remove and return the item under the cursor; the cursor moves to the next item."""
        if not self.current_is_inside:
            raise IndexError("cursor is outside the list")
        if self._pos == 0:
            return self.remove_head()
        if self._pos == len(self._items) - 1:
            return self.remove_tail()
        return self._items.pop(self._pos)

    def check_invariants(self) -> None:
        """Raise AssertionError if the list or its cursor is inconsistent."""
        size = len(self._items)
        if not -1 <= self._pos < size:
            raise AssertionError(f"cursor position {self._pos} invalid for size {size}")
        for before, after in zip(self._items, self._items[1:]):
            if self._compare(before, after) >= 0:
                raise AssertionError("items are not in strictly increasing order")