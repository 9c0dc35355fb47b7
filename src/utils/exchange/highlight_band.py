"""Cosmetic intraday interval tagged for display emphasis."""

from __future__ import annotations

from typing import Any, Dict, Optional

from src.utils.config.configuration_error import ConfigurationError
from src.utils.exchange.hours import Hours


class HighlightBand:
    """A ``[start, end)`` local window carrying a display tag.

    Bands never influence a market's status; they only decorate it.
    """

    __slots__ = ("_hours", "_tag", "_label_key")

    def __init__(self, hours: Hours, tag: str, label_key: Optional[str] = None):
        if not isinstance(hours, Hours):
            raise ConfigurationError("`hours` must be an instance of `Hours`")
        if not isinstance(tag, str) or len(tag.strip()) == 0:
            raise ConfigurationError("`tag` must be a non-empty string")
        if label_key is not None and (
            not isinstance(label_key, str) or len(label_key.strip()) == 0
        ):
            raise ConfigurationError("`label_key` must be a non-empty string or None")
        self._hours = hours
        self._tag = tag.strip()
        self._label_key = label_key.strip() if label_key else None

    @property
    def hours(self) -> Hours:
        """Return the band window."""
        return self._hours

    @property
    def tag(self) -> str:
        """Return the display tag."""
        return self._tag

    @property
    def label_key(self) -> Optional[str]:
        """Return the catalog key describing the band, if any."""
        return self._label_key

    def contains(self, minutes_of_day: int) -> bool:
        """Return ``True`` when *minutes_of_day* falls inside the band."""
        return self._hours.contains(minutes_of_day)

    @staticmethod
    def from_parameter(record: Any) -> HighlightBand:
        """Build a band from ``{"open", "close", "tag", "label_key"}``."""
        if not isinstance(record, dict):
            raise ConfigurationError(f"Highlight band is invalid: {record!r}")
        return HighlightBand(
            Hours(record.get("open"), record.get("close")),
            record.get("tag"),
            record.get("label_key"),
        )

    def to_json(self) -> Dict[str, Any]:
        """Object to JSON."""
        return {**self._hours.to_json(), "tag": self.tag, "label_key": self.label_key}
