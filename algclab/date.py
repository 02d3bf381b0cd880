"""Calendar dates in the range 0000-01-01 .. 9999-12-31."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import IntEnum

_MONTH_LENGTHS = (
    (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)

_MIN_YEAR = 0
_MAX_YEAR = 9999


class DateFormat(IntEnum):
    """Text layouts understood by :meth:`Date.format` and :meth:`Date.parse`."""

    YMD = 0
    DMY = 1
    MDY = 2


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    return _MONTH_LENGTHS[is_leap_year(year)][month - 1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Return True if the triple forms a date within the supported range."""
    return (
        _MIN_YEAR <= year <= _MAX_YEAR
        and 1 <= month <= 12
        and 1 <= day <= days_in_month(year, month)
    )


def _field(width: int) -> str:
    # A scanf-style integer field: leading blanks, optional sign, at most
    # ``width`` characters counting the sign.
    return rf"\s*([+-][0-9]{{1,{width - 1}}}|[0-9]{{1,{width}}})"


# Each entry: compiled pattern and, for each group, which of (year, month, day) it fills.
_PATTERNS = {
    DateFormat.YMD: (re.compile(_field(4) + "-" + _field(2) + "-" + _field(2)), (0, 1, 2)),
    DateFormat.DMY: (re.compile(_field(2) + "/" + _field(2) + "/" + _field(4)), (2, 1, 0)),
    DateFormat.MDY: (re.compile(_field(2) + "/" + _field(2) + "/" + _field(4)), (1, 2, 0)),
}


@dataclass(frozen=True, order=True)
class Date:
    """A valid calendar date."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not is_valid_date(self.year, self.month, self.day):
            raise ValueError(f"invalid date: {self.year}-{self.month}-{self.day}")

    def compare(self, other: Date) -> int:
        """Return >0 if self is later, 0 if equal, <0 if earlier."""
        return (
            (self.year - other.year)
            or (self.month - other.month)
            or (self.day - other.day)
        )

    def increment(self) -> Date:
        """Return the following day. The date must precede DATE_MAX."""
        if self >= DATE_MAX:
            raise ValueError("cannot increment the maximum date")
        if self.day < days_in_month(self.year, self.month):
            return replace(self, day=self.day + 1)
        if self.month < 12:
            return Date(self.year, self.month + 1, 1)
        return Date(self.year + 1, 1, 1)

    def decrement(self) -> Date:
        """Return the previous day. The date must follow DATE_MIN."""
        if self <= DATE_MIN:
            raise ValueError("cannot decrement the minimum date")
        if self.day > 1:
            return replace(self, day=self.day - 1)
        year, month = (self.year, self.month - 1) if self.month > 1 else (self.year - 1, 12)
        return Date(year, month, days_in_month(year, month))

    def format(self, fmt: DateFormat | int = DateFormat.YMD) -> str:
        """Render the date in the given layout."""
        fmt = DateFormat(fmt)
        if fmt is DateFormat.YMD:
            return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        if fmt is DateFormat.DMY:
            return f"{self.day:02d}/{self.month:02d}/{self.year:04d}"
        return f"{self.month:02d}/{self.day:02d}/{self.year:04d}"

    @classmethod
    def parse(cls, text: str, fmt: DateFormat | int = DateFormat.YMD) -> Date:
        """Read a date laid out as ``fmt``; raise ValueError if it is not valid."""
        pattern, slots = _PATTERNS[DateFormat(fmt)]
        match = pattern.match(text)
        if match is None:
            raise ValueError(f"cannot parse date: {text!r}")
        parts = [0, 0, 0]
        for slot, group in zip(slots, match.groups()):
            parts[slot] = int(group)
        return cls(*parts)

    def __str__(self) -> str:
        return self.format(DateFormat.YMD)


DATE_MIN = Date(_MIN_YEAR, 1, 1)
DATE_MAX = Date(_MAX_YEAR, 12, 31)