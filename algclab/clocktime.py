"""Times of day on a 24-hour clock, stored as seconds since midnight."""

from __future__ import annotations

import re
from dataclasses import dataclass

FULL_DAY = 24 * 60 * 60


def is_valid_time(hours: int, minutes: int, seconds: int) -> bool:
    """Return True if the triple forms a valid time of day."""
    return 0 <= hours < 24 and 0 <= minutes < 60 and 0 <= seconds < 60


_FIELD = r"\s*([+-][0-9]|[0-9]{1,2})"
_PATTERN = re.compile(_FIELD + ":" + _FIELD + "(?::" + _FIELD + ")?")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """A time of day, held as the number of seconds since midnight."""

    seconds: int

    def __post_init__(self) -> None:
        if not 0 <= self.seconds < FULL_DAY:
            raise ValueError(f"time out of range: {self.seconds}")

    @classmethod
    def from_hms(cls, hours: int, minutes: int, seconds: int) -> TimeOfDay:
        """Build a time from hours, minutes and seconds."""
        if not is_valid_time(hours, minutes, seconds):
            raise ValueError(f"invalid time: {hours}:{minutes}:{seconds}")
        return cls((hours * 60 + minutes) * 60 + seconds)

    @property
    def hour(self) -> int:
        return self.seconds // 3600

    @property
    def minute(self) -> int:
        return self.seconds // 60 % 60

    @property
    def second(self) -> int:
        return self.seconds % 60

    def format(self) -> str:
        """Render as ``hh:mm:ss``."""
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    @classmethod
    def parse(cls, text: str) -> TimeOfDay:
        """Read ``hh:mm:ss`` or ``hh:mm``; raise ValueError if invalid."""
        match = _PATTERN.match(text)
        if match is None:
            raise ValueError(f"cannot parse time: {text!r}")
        hh, mm, ss = match.groups()
        return cls.from_hms(int(hh), int(mm), int(ss) if ss is not None else 0)

    def compare(self, other: TimeOfDay) -> int:
        """Return >0 if self is later, 0 if equal, <0 if earlier."""
        return self.seconds - other.seconds

    def __add__(self, other: TimeOfDay) -> TimeOfDay:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return TimeOfDay((self.seconds + other.seconds) % FULL_DAY)

    def __sub__(self, other: TimeOfDay) -> TimeOfDay:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return TimeOfDay((self.seconds - other.seconds) % FULL_DAY)

    def __str__(self) -> str:
        return self.format()


TIME_MIN = TimeOfDay(0)
TIME_MAX = TimeOfDay(FULL_DAY - 1)