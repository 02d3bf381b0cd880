"""A date together with a time of day."""

from __future__ import annotations

from dataclasses import dataclass

from algclab.clocktime import TimeOfDay, is_valid_time
from algclab.date import Date, DateFormat, is_valid_date


def is_valid_moment(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> bool:
    """Return True if both the date part and the time part are valid."""
    return is_valid_date(year, month, day) and is_valid_time(hour, minute, second)


@dataclass(frozen=True, order=True)
class Moment:
    """A calendar date plus a time of day."""

    date: Date
    time: TimeOfDay

    @classmethod
    def create(
        cls, year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> Moment:
        """Build a moment from its six components."""
        if not is_valid_moment(year, month, day, hour, minute, second):
            raise ValueError(
                f"invalid moment: {year}-{month}-{day} {hour}:{minute}:{second}"
            )
        return cls(Date(year, month, day), TimeOfDay.from_hms(hour, minute, second))

    def compare(self, other: Moment) -> int:
        """Return >0 if self is later, 0 if equal, <0 if earlier."""
        return self.date.compare(other.date) or self.time.compare(other.time)

    def format(self) -> str:
        """Render as ``YYYY-MM-DD hh:mm:ss``."""
        return f"{self.date.format(DateFormat.YMD)} {self.time.format()}"

    @classmethod
    def parse(cls, text: str) -> Moment:
        """Read a date with an optional time after the first space.

        An absent or unreadable time part yields midnight.
        """
        date = Date.parse(text, DateFormat.YMD)
        time = TimeOfDay(0)
        _, sep, rest = text.partition(" ")
        if sep:
            try:
                time = TimeOfDay.parse(rest)
            except ValueError:
                pass
        return cls(date, time)

    def __str__(self) -> str:
        return self.format()