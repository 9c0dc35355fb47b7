"""Market status enumeration."""

from enum import Enum


class StatusKind(str, Enum):
    """Status of a market at one instant, recomputed on every evaluation."""

    CLOSED = "closed"
    CLOSED_HOLIDAY = "closed_holiday"
    SOON = "soon"
    SOON_EXTENDED = "soon_extended"
    LIMITED_LIQUIDITY = "limited_liquidity"
    OPEN = "open"
    OPEN_HIGH_SPREAD = "open_high_spread"

    def __str__(self) -> str:
        return self.value

    @property
    def is_open(self) -> bool:
        """``True`` for the states shown ahead of every other market."""
        return self in (StatusKind.OPEN, StatusKind.OPEN_HIGH_SPREAD)
