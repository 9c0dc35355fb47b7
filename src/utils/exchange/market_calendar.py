"""Read-only registry of markets and recurring holidays.

The registry is built once from plain configuration records and validated up
front: every malformed entry raises :class:`ConfigurationError` while loading,
never while a status is being evaluated.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from src.utils.config.configuration_error import ConfigurationError
from src.utils.exchange.holiday import Holiday, RestrictedIds
from src.utils.exchange.market import Market, MarketCategory


class MarketCalendar:
    """Lookup operations over the configured markets and holidays."""

    __slots__ = ("_markets", "_by_id", "_holidays")

    def __init__(self, markets: Iterable[Market], holidays: Iterable[Holiday]):
        self._markets: Tuple[Market, ...] = tuple(markets)
        self._holidays: Tuple[Holiday, ...] = tuple(holidays)
        by_id: Dict[str, Market] = {}
        for market in self._markets:
            if not isinstance(market, Market):
                raise ConfigurationError(f"Invalid market entry: {market!r}")
            if market.market_id in by_id:
                raise ConfigurationError(
                    f"Duplicated market id: '{market.market_id}'"
                )
            by_id[market.market_id] = market
        self._by_id = by_id
        for holiday in self._holidays:
            if not isinstance(holiday, Holiday):
                raise ConfigurationError(f"Invalid holiday entry: {holiday!r}")
            if isinstance(holiday.stock_effect, RestrictedIds):
                for market_id in sorted(holiday.stock_effect.market_ids):
                    if not self.is_category(market_id, MarketCategory.STOCK):
                        raise ConfigurationError(
                            f"Holiday '{holiday.name}' restricts '{market_id}', "
                            "which is not a stock market"
                        )

    @property
    def markets(self) -> Tuple[Market, ...]:
        """Return every market in declaration order."""
        return self._markets

    @property
    def holidays(self) -> Tuple[Holiday, ...]:
        """Return every holiday in declaration order."""
        return self._holidays

    def market(self, market_id: str) -> Market:
        """Return the market registered under *market_id*."""
        return self._by_id[market_id.strip().lower()]

    def markets_by_category(self, category: MarketCategory) -> List[Market]:
        """Return the markets of *category* in declaration order."""
        return [m for m in self._markets if m.category is category]

    def holiday_for_date(self, month: int, day: int) -> Optional[Holiday]:
        """Return the first declared holiday on ``(month, day)``, or ``None``.

        When several holidays share a date only the first one is ever seen.
        """
        for holiday in self._holidays:
            if holiday.key == (month, day):
                return holiday
        return None

    def is_category(self, market_id: str, category: MarketCategory) -> bool:
        """Return ``True`` when *market_id* is registered with *category*."""
        market = self._by_id.get(market_id.strip().lower())
        return market is not None and market.category is category

    @staticmethod
    def _validated_list(value: Any, name: str) -> List[Any]:
        if value is None:
            raise ConfigurationError(f"Parameter '{name}' is not defined")
        if not isinstance(value, list):
            raise ConfigurationError(f"Parameter '{name}' is invalid: {value!r}")
        return value

    @staticmethod
    def from_parameter(markets: Any, holidays: Any) -> MarketCalendar:
        """Build a calendar from lists of market and holiday records."""
        market_records = MarketCalendar._validated_list(markets, "markets")
        if len(market_records) == 0:
            raise ConfigurationError("Parameter 'markets' is empty")
        holiday_records = MarketCalendar._validated_list(holidays, "holidays")
        return MarketCalendar(
            [Market.from_parameter(r) for r in market_records],
            [Holiday.from_parameter(r) for r in holiday_records],
        )
