"""Plain value types exchanged with :class:`TimezoneConverter`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class YearMonthDay:
    """A calendar date with no timezone attached."""

    year: int
    month: int
    day: int


@dataclass(frozen=True)
class LocalDateTime:
    """A wall-clock reading whose fields may lie outside their usual ranges."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0


@dataclass(frozen=True)
class ZonedParts:
    """Wall-clock components observed in a named timezone.

    ``weekday_index`` counts from Sunday (0) to Saturday (6).
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday_index: int

    @property
    def minutes_of_day(self) -> int:
        """Minutes elapsed since local midnight."""
        return self.hour * 60 + self.minute

    @property
    def date(self) -> YearMonthDay:
        """The local calendar date."""
        return YearMonthDay(self.year, self.month, self.day)

    def hhmm(self) -> str:
        """Return the local clock as ``HH:MM``."""
        return f"{self.hour:02d}:{self.minute:02d}"

    def to_json(self) -> Dict[str, Any]:
        """Object to JSON."""
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
            "weekday_index": self.weekday_index,
        }
