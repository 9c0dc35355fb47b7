"""Typed, validated representation of a local time-of-day window.

Both ends are ``HH:MM`` strings within the same local day and the window must
be non-empty: ``open`` strictly before ``close``.
"""

from __future__ import annotations

import re
from typing import Any, Tuple

from src.utils.config.configuration_error import ConfigurationError


class Hours:
    """Container for a ``[open, close)`` local window.

    * open: opening time in "HH:MM" format.
    * close: closing time in "HH:MM" format.
    """

    __slots__ = ("_open", "_close")

    def __init__(self, open_time: str, close_time: str) -> None:
        """Initialize a window from two ``HH:MM`` strings."""
        validated_open = self._validate_time(open_time, "open")
        validated_close = self._validate_time(close_time, "close")
        if self.to_minutes(validated_open) >= self.to_minutes(validated_close):
            raise ConfigurationError("`open` must be strictly before `close`")
        self._open = validated_open
        self._close = validated_close

    @property
    def open(self) -> str:
        """Return the opening time."""
        return self._open

    @property
    def close(self) -> str:
        """Return the closing time."""
        return self._close

    @property
    def open_minute(self) -> int:
        """Minutes after local midnight at which the window opens."""
        return self.to_minutes(self._open)

    @property
    def close_minute(self) -> int:
        """Minutes after local midnight at which the window closes."""
        return self.to_minutes(self._close)

    def contains(self, minutes_of_day: int) -> bool:
        """Return ``True`` when *minutes_of_day* lies in ``[open, close)``."""
        return self.open_minute <= minutes_of_day < self.close_minute

    @staticmethod
    def split(value: str) -> Tuple[int, int]:
        """Return ``(hour, minute)`` of an already validated ``HH:MM`` string."""
        hours, minutes = map(int, value.split(":"))
        return hours, minutes

    @staticmethod
    def to_minutes(value: str) -> int:
        """Convert a validated ``HH:MM`` string into minutes after midnight."""
        hours, minutes = Hours.split(value)
        return hours * 60 + minutes

    @staticmethod
    def _validate_time(value: Any, field: str) -> str:
        if not isinstance(value, str):
            raise ConfigurationError(f"`{field}` must be a string")
        value = value.strip()
        if not re.fullmatch(r"\d{2}:\d{2}", value):
            raise ConfigurationError(f"`{field}` must be in 'HH:MM' format")
        hours, minutes = Hours.split(value)
        if not (0 <= hours <= 23 and 0 <= minutes <= 59):
            raise ConfigurationError(
                f"`{field}` must be a valid time between 00:00 and 23:59"
            )
        return value

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Hours)
            and other.open == self._open
            and other.close == self._close
        )

    def __hash__(self) -> int:
        return hash((self._open, self._close))

    def __repr__(self) -> str:
        return f"Hours({self._open!r}, {self._close!r})"

    def to_json(self) -> Any:
        """Object to JSON."""
        return {"open": self.open, "close": self.close}
