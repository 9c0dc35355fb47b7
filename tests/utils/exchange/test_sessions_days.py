"""Unit tests for the SessionsDays class, the weekly trading-day set.

Weekday indexes run from Sunday (0) to Saturday (6).
"""

import pytest  # type: ignore

from src.utils.config.configuration_error import ConfigurationError
from src.utils.exchange.sessions_days import SessionsDays


def test_valid_indexes():
    """Indexes are stored as a set and serialized in calendar order."""
    days = SessionsDays([5, 1, 3, 1])
    if days.days != frozenset({1, 3, 5}):
        raise AssertionError(f"Unexpected days: {days.days}")
    if days.to_json() != [1, 3, 5]:
        raise AssertionError("Unexpected json")


def test_names_are_accepted():
    """Weekday names map to the Sunday-based indexes."""
    days = SessionsDays(["Sunday", "monday", " FRIDAY "])
    if days.days != frozenset({0, 1, 5}):
        raise AssertionError(f"Unexpected indexes: {days.days}")


def test_is_trading_day():
    """Sunday-to-Friday forex week excludes Saturday only."""
    days = SessionsDays([0, 1, 2, 3, 4, 5])
    if not days.is_trading_day(0):
        raise AssertionError("Sunday should be a trading day")
    if days.is_trading_day(6):
        raise AssertionError("Saturday should not be a trading day")


def test_equality():
    """Two sets with the same days are equal."""
    if SessionsDays([1, 2]) != SessionsDays(["tuesday", "monday"]):
        raise AssertionError("Expected equal sets")


@pytest.mark.parametrize(
    "value, message",
    [
        ([], "at least one weekday"),
        (None, "collection of weekdays"),
        ("monday", "collection of weekdays"),
        (5, "collection of weekdays"),
        ([7], "out of range"),
        ([-1], "out of range"),
        ([True], "Invalid weekday"),
        (["funday"], "Invalid weekday"),
        ([1.0], "Invalid weekday"),
    ],
)
def test_invalid_days(value, message):
    """Empty, out-of-range or unknown weekdays raise ConfigurationError."""
    with pytest.raises(ConfigurationError, match=message):
        SessionsDays(value)
