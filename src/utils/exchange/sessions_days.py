"""Typed, validated representation of a market's weekly trading days.

Weekdays are indexed from Sunday (0) to Saturday (6), the same indexing used by
:class:`src.utils.datetime.zoned_parts.ZonedParts`.
"""

from __future__ import annotations

from typing import Any, FrozenSet, Iterable, List

from src.utils.config.configuration_error import ConfigurationError

WEEKDAY_NAMES: List[str] = [
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
]


class SessionsDays:
    """Immutable, non-empty set of weekday indexes on which a session can occur."""

    __slots__ = ("_days",)

    def __init__(self, days: Iterable[Any]) -> None:
        """Create a :class:`SessionsDays` from weekday indexes or weekday names."""
        if days is None or isinstance(days, (str, bytes)):
            raise ConfigurationError("`days` must be a collection of weekdays")
        try:
            items = list(days)
        except TypeError as exc:
            raise ConfigurationError("`days` must be a collection of weekdays") from exc
        if len(items) == 0:
            raise ConfigurationError("`days` must contain at least one weekday")
        self._days: FrozenSet[int] = frozenset(self._to_index(d) for d in items)

    @staticmethod
    def _to_index(value: Any) -> int:
        if isinstance(value, bool):
            raise ConfigurationError(f"Invalid weekday: {value!r}")
        if isinstance(value, int):
            if not 0 <= value <= 6:
                raise ConfigurationError(f"Weekday index out of range 0..6: {value}")
            return value
        if isinstance(value, str) and value.strip().lower() in WEEKDAY_NAMES:
            return WEEKDAY_NAMES.index(value.strip().lower())
        raise ConfigurationError(f"Invalid weekday: {value!r}")

    @property
    def days(self) -> FrozenSet[int]:
        """Return the enabled weekday indexes."""
        return self._days

    def is_trading_day(self, weekday_index: int) -> bool:
        """Return ``True`` if *weekday_index* (Sunday = 0) is enabled."""
        return weekday_index in self._days

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SessionsDays) and other.days == self._days

    def __hash__(self) -> int:
        return hash(self._days)

    def to_json(self) -> List[int]:
        """Return the enabled weekday indexes as a sorted list."""
        return sorted(self._days)
