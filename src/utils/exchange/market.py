"""Typed and validated representation of a tradable market and its session layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from src.utils.config.configuration_error import ConfigurationError
from src.utils.exchange.highlight_band import HighlightBand
from src.utils.exchange.hours import Hours
from src.utils.exchange.sessions_days import SessionsDays
from src.utils.exchange.sessions_hours import SessionsHours


class MarketCategory(str, Enum):
    """Kind of market; holiday effects are declared per category."""

    STOCK = "stock"
    FOREX = "forex"

    @staticmethod
    def parse(value: Any) -> MarketCategory:
        """Return the category named by *value* (case-insensitive)."""
        if isinstance(value, MarketCategory):
            return value
        if isinstance(value, str):
            try:
                return MarketCategory(value.strip().lower())
            except ValueError:
                pass
        raise ConfigurationError(f"Invalid market category: {value!r}")


@dataclass
class MarketConfig:
    """Typed configuration container for initializing a Market instance."""

    market_id: str
    display_name: str
    category: MarketCategory
    sessions_days: SessionsDays
    sessions_hours: SessionsHours
    icon: Optional[str] = None
    highlight_bands: Tuple[HighlightBand, ...] = field(default_factory=tuple)


class Market:
    """Container for a market's identity, weekly calendar and daily sessions.

    * market_id: unique lowercase identifier (e.g. ``"nasdaq"``).
    * display_name: human readable name.
    * category: :class:`MarketCategory`.
    * sessions_days: weekdays on which a session can happen.
    * sessions_hours: regular session, optional windows and timezone.
    * highlight_bands: cosmetic intraday intervals.
    """

    __slots__ = (
        "_market_id",
        "_display_name",
        "_category",
        "_sessions_days",
        "_sessions_hours",
        "_icon",
        "_highlight_bands",
    )

    def __init__(self, config: MarketConfig) -> None:
        self._market_id = self._validate_str(config.market_id, "market_id").lower()
        self._display_name = self._validate_str(config.display_name, "display_name")
        self._category = MarketCategory.parse(config.category)
        if not isinstance(config.sessions_days, SessionsDays):
            raise ConfigurationError("`sessions_days` must be an instance of SessionsDays")
        self._sessions_days = config.sessions_days
        if not isinstance(config.sessions_hours, SessionsHours):
            raise ConfigurationError(
                "`sessions_hours` must be an instance of SessionsHours"
            )
        self._sessions_hours = config.sessions_hours
        self._icon = config.icon
        bands = tuple(config.highlight_bands or ())
        if any(not isinstance(b, HighlightBand) for b in bands):
            raise ConfigurationError("`highlight_bands` must contain HighlightBand items")
        self._highlight_bands = bands

    @staticmethod
    def _validate_str(value: Any, field_name: str) -> str:
        if not isinstance(value, str) or len(value.strip()) == 0:
            raise ConfigurationError(f"`{field_name}` must be a non-empty string")
        return value.strip()

    @property
    def market_id(self) -> str:
        """Return the market identifier."""
        return self._market_id

    @property
    def display_name(self) -> str:
        """Return the market display name."""
        return self._display_name

    @property
    def category(self) -> MarketCategory:
        """Return the market category."""
        return self._category

    @property
    def timezone(self) -> str:
        """Return the market's IANA timezone."""
        return self._sessions_hours.timezone

    @property
    def icon(self) -> Optional[str]:
        """Return the opaque icon reference."""
        return self._icon

    @property
    def sessions_days(self) -> SessionsDays:
        """Return the trading days for this market."""
        return self._sessions_days

    @property
    def sessions_hours(self) -> SessionsHours:
        """Return the session layout for this market."""
        return self._sessions_hours

    @property
    def highlight_bands(self) -> Tuple[HighlightBand, ...]:
        """Return the cosmetic highlight bands."""
        return self._highlight_bands

    def highlight_for(self, minutes_of_day: int) -> Optional[HighlightBand]:
        """Return the first band containing *minutes_of_day*, if any."""
        for band in self._highlight_bands:
            if band.contains(minutes_of_day):
                return band
        return None

    def __repr__(self) -> str:
        return f"Market({self._market_id!r}, {self._category.value})"

    def to_json(self) -> Any:
        """Object to JSON."""
        return {
            "id": self.market_id,
            "name": self.display_name,
            "category": self.category.value,
            "icon": self.icon,
            "trading_weekdays": self.sessions_days.to_json(),
            "sessions_hours": self.sessions_hours.to_json(),
            "highlight_bands": [b.to_json() for b in self.highlight_bands],
        }

    @staticmethod
    def _extract_hours(sessions: Dict[str, Any], market_id: str) -> Hours:
        regular = sessions.get("regular")
        if not isinstance(regular, dict):
            raise ConfigurationError(
                f"The regular session of '{market_id}' is not defined"
            )
        return Hours(regular.get("open"), regular.get("close"))

    @staticmethod
    def from_parameter(record: Any) -> Market:
        """Build and validate a :class:`Market` from a plain configuration record."""
        if not isinstance(record, dict):
            raise ConfigurationError(f"Market record is invalid: {record!r}")
        market_id = record.get("id")
        if not isinstance(market_id, str) or len(market_id.strip()) == 0:
            raise ConfigurationError(f"Market id is not defined: {record!r}")
        timezone = record.get("timezone")
        if timezone is None:
            raise ConfigurationError(f"Timezone of '{market_id}' is not defined")
        sessions = record.get("sessions_hours")
        if not isinstance(sessions, dict):
            raise ConfigurationError(
                f"The sessions hours of '{market_id}' are invalid: {sessions!r}"
            )
        bands = record.get("highlight_bands") or []
        if not isinstance(bands, list):
            raise ConfigurationError(
                f"Highlight bands of '{market_id}' are invalid: {bands!r}"
            )
        try:
            return Market(
                MarketConfig(
                    market_id=market_id,
                    display_name=record.get("name") or market_id,
                    category=MarketCategory.parse(record.get("category")),
                    sessions_days=SessionsDays(record.get("trading_weekdays")),
                    sessions_hours=SessionsHours(
                        Market._extract_hours(sessions, market_id),
                        timezone,
                        pre_open_hour=sessions.get("pre_open_hour"),
                        after_close_hour=sessions.get("after_close_hour"),
                    ),
                    icon=record.get("icon"),
                    highlight_bands=tuple(
                        HighlightBand.from_parameter(b) for b in bands
                    ),
                )
            )
        except ConfigurationError as exc:
            raise ConfigurationError(f"Market '{market_id}': {exc}") from exc
