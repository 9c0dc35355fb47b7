"""Unit tests for the MarketCalendar registry."""

import pytest  # type: ignore

from src.utils.config.configuration_error import ConfigurationError
from src.utils.exchange.market import MarketCategory
from src.utils.exchange.market_calendar import MarketCalendar

MARKETS = [
    {
        "id": "london",
        "name": "London",
        "category": "forex",
        "timezone": "Europe/London",
        "trading_weekdays": [0, 1, 2, 3, 4, 5],
        "sessions_hours": {"regular": {"open": "08:00", "close": "17:00"}},
    },
    {
        "id": "nasdaq",
        "name": "NASDAQ",
        "category": "stock",
        "timezone": "America/New_York",
        "trading_weekdays": [1, 2, 3, 4, 5],
        "sessions_hours": {"regular": {"open": "09:30", "close": "16:00"}},
    },
]


def _calendar(holidays):
    return MarketCalendar.from_parameter(MARKETS, holidays)


def test_holiday_for_date_first_match_wins():
    """Two holidays on the same date: only the first declared is observed."""
    calendar = _calendar(
        [
            {"month": 12, "day": 25, "name": "First", "stocks_full_close": True},
            {"month": 12, "day": 25, "name": "Second", "forex_full_close": True},
        ]
    )
    holiday = calendar.holiday_for_date(12, 25)
    if holiday is None or holiday.name != "First":
        raise AssertionError("Expected the first declared holiday")


def test_holiday_for_date_miss_returns_none():
    """A date without holiday is a normal None outcome."""
    if _calendar([]).holiday_for_date(3, 3) is not None:
        raise AssertionError("Expected None")


def test_lookups():
    """Category membership and market access."""
    calendar = _calendar([])
    if not calendar.is_category("london", MarketCategory.FOREX):
        raise AssertionError("london is forex")
    if calendar.is_category("london", MarketCategory.STOCK):
        raise AssertionError("london is not a stock market")
    if calendar.is_category("unknown", MarketCategory.FOREX):
        raise AssertionError("Unknown ids belong to no category")
    if calendar.market(" NASDAQ ").display_name != "NASDAQ":
        raise AssertionError("Lookup should normalize ids")
    with pytest.raises(KeyError):
        calendar.market("tokyo")
    stocks = calendar.markets_by_category(MarketCategory.STOCK)
    if [m.market_id for m in stocks] != ["nasdaq"]:
        raise AssertionError("Unexpected stock markets")


def test_restricted_ids_must_be_stock_markets():
    """Restricting a forex or unknown market fails at load time."""
    for market_id in ("london", "tokyo"):
        with pytest.raises(ConfigurationError, match="not a stock market"):
            _calendar(
                [{"month": 7, "day": 4, "name": "x", "restricted_stock_ids": [market_id]}]
            )


def test_duplicated_market_ids():
    """Two markets with the same id are rejected."""
    with pytest.raises(ConfigurationError, match="Duplicated market id"):
        MarketCalendar.from_parameter([MARKETS[0], dict(MARKETS[0])], [])


@pytest.mark.parametrize(
    "markets, holidays, message",
    [
        (None, [], "'markets' is not defined"),
        ({}, [], "'markets' is invalid"),
        ([], [], "'markets' is empty"),
        (MARKETS, None, "'holidays' is not defined"),
    ],
)
def test_invalid_parameters(markets, holidays, message):
    """Missing or malformed top-level lists are rejected."""
    with pytest.raises(ConfigurationError, match=message):
        MarketCalendar.from_parameter(markets, holidays)
