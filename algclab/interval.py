"""Half-open time intervals ``[start, end[`` with a label."""

from __future__ import annotations

from dataclasses import dataclass

from algclab.moment import Moment

# Formatted intervals are limited to this many characters.
_FORMAT_LIMIT = 255


@dataclass(frozen=True)
class TimeInterval:
    """A labelled interval that contains its start but not its end."""

    start: Moment
    end: Moment
    label: str

    def __post_init__(self) -> None:
        if self.start.compare(self.end) > 0:
            raise ValueError("interval start must not follow its end")

    def compare(self, other: TimeInterval) -> int:
        """Return -1 if self lies before other, 1 if after, 0 if they overlap."""
        if self.start.compare(other.start) == 0 and self.end.compare(other.end) == 0:
            return 0
        if self.end.compare(other.start) <= 0:
            return -1
        if self.start.compare(other.end) >= 0:
            return 1
        return 0

    def overlaps(self, other: TimeInterval) -> bool:
        """Return True if the two intervals overlap."""
        return self.compare(other) == 0

    def contains(self, other: TimeInterval) -> bool:
        """Return True if ``other`` lies wholly inside this interval."""
        return self.start.compare(other.start) <= 0 and self.end.compare(other.end) >= 0

    def format(self) -> str:
        """Render as ``[start, end[(label)``, shortening a long label."""
        head = f"[{self.start.format()}, {self.end.format()}[("
        room = max(_FORMAT_LIMIT - len(head) - 1, 0)
        return f"{head}{self.label[:room]})"

    def __str__(self) -> str:
        return self.format()