"""Unit tests for TimezoneConverter."""

from datetime import datetime, timedelta, timezone

import pytest  # type: ignore

from src.utils.config.configuration_error import ConfigurationError
from src.utils.datetime.timezone_converter import TimezoneConverter
from src.utils.datetime.zoned_parts import LocalDateTime, YearMonthDay

NEW_YORK = "America/New_York"


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def test_zoned_parts_independence_day():
    """15:00Z on 2024-07-04 is 11:00 on a Thursday in New York."""
    parts = TimezoneConverter.zoned_parts(_utc(2024, 7, 4, 15, 0), NEW_YORK)
    if (parts.year, parts.month, parts.day) != (2024, 7, 4):
        raise AssertionError(f"Unexpected date: {parts}")
    if (parts.hour, parts.minute) != (11, 0):
        raise AssertionError(f"Unexpected clock: {parts.hhmm()}")
    if parts.weekday_index != 4:
        raise AssertionError("Thursday should be weekday 4")
    if parts.minutes_of_day != 660:
        raise AssertionError("Unexpected minutes of day")


def test_zoned_parts_sunday_is_zero():
    """Weekdays are counted from Sunday."""
    parts = TimezoneConverter.zoned_parts(_utc(2024, 7, 7, 12, 0), "Europe/London")
    if parts.weekday_index != 0:
        raise AssertionError("Sunday should be weekday 0")


def test_zoned_parts_naive_is_utc():
    """Naive instants are read as UTC."""
    naive = TimezoneConverter.zoned_parts(datetime(2024, 1, 15, 9, 30), "UTC")
    if naive.hhmm() != "09:30":
        raise AssertionError("Naive instant should be read as UTC")


def test_zoned_parts_crosses_local_date():
    """Tokyo is already on the next day late in the UTC evening."""
    parts = TimezoneConverter.zoned_parts(_utc(2024, 12, 23, 15, 30), "Asia/Tokyo")
    if (parts.month, parts.day, parts.hour) != (12, 24, 0):
        raise AssertionError(f"Unexpected Tokyo reading: {parts}")


@pytest.mark.parametrize(
    "instant, zone",
    [
        (_utc(2024, 7, 10, 15, 0), NEW_YORK),
        (_utc(2024, 1, 10, 3, 45, 12), "Australia/Sydney"),
        (_utc(2024, 6, 1, 23, 59), "Asia/Tokyo"),
        (_utc(2024, 2, 29, 12, 0), "Europe/London"),
    ],
)
def test_round_trip_away_from_transitions(instant, zone):
    """local_to_utc inverts zoned_parts away from DST transitions."""
    back = TimezoneConverter.local_to_utc(
        TimezoneConverter.zoned_parts(instant, zone), zone
    )
    if back != instant:
        raise AssertionError(f"Round trip failed: {back} != {instant}")


def test_local_to_utc_returns_aware_utc():
    """The result is an aware datetime."""
    result = TimezoneConverter.local_to_utc(LocalDateTime(2024, 7, 10, 9, 30), NEW_YORK)
    if result.utcoffset() != timedelta(0):
        raise AssertionError("Expected a UTC instant")
    if result != _utc(2024, 7, 10, 13, 30):
        raise AssertionError(f"Unexpected instant: {result}")


def test_spring_forward_gap_moves_forward():
    """02:30 does not exist on 2024-03-10 in New York; the reading moves past the gap."""
    result = TimezoneConverter.local_to_utc(LocalDateTime(2024, 3, 10, 2, 30), NEW_YORK)
    if result != _utc(2024, 3, 10, 7, 30):
        raise AssertionError(f"Unexpected gap resolution: {result}")
    if TimezoneConverter.zoned_parts(result, NEW_YORK).hhmm() != "03:30":
        raise AssertionError("Gap reading should land at 03:30 local")


def test_fall_back_overlap_converges():
    """01:30 happens twice on 2024-11-03 in New York; either instant is valid."""
    result = TimezoneConverter.local_to_utc(LocalDateTime(2024, 11, 3, 1, 30), NEW_YORK)
    if result not in (_utc(2024, 11, 3, 5, 30), _utc(2024, 11, 3, 6, 30)):
        raise AssertionError(f"Did not converge to a valid instant: {result}")
    if TimezoneConverter.zoned_parts(result, NEW_YORK).hhmm() != "01:30":
        raise AssertionError("Overlap reading should project back to 01:30")


def test_out_of_range_fields_are_normalized():
    """Month 13, day 32, hour 25 and negative minutes roll over."""
    result = TimezoneConverter.local_to_utc(LocalDateTime(2024, 13, 32, 25, -5), "UTC")
    if result != _utc(2025, 2, 2, 0, 55):
        raise AssertionError(f"Unexpected normalization: {result}")


@pytest.mark.parametrize(
    "start, delta, expected",
    [
        (YearMonthDay(2024, 2, 28), 1, YearMonthDay(2024, 2, 29)),
        (YearMonthDay(2024, 3, 1), -1, YearMonthDay(2024, 2, 29)),
        (YearMonthDay(2024, 12, 31), 1, YearMonthDay(2025, 1, 1)),
        (YearMonthDay(2024, 3, 9), 2, YearMonthDay(2024, 3, 11)),
    ],
)
def test_add_days(start, delta, expected):
    """Day arithmetic handles leap years and year boundaries."""
    result = TimezoneConverter.add_days(start, delta)
    if result != expected:
        raise AssertionError(f"{start} + {delta} -> {result}, expected {expected}")


@pytest.mark.parametrize("zone", ["", "   ", None, "Mars/Base", "Not A Zone"])
def test_invalid_zone(zone):
    """Unknown identifiers raise ConfigurationError."""
    with pytest.raises(ConfigurationError):
        TimezoneConverter.zone(zone)


@pytest.mark.parametrize(
    "fields, zone, expected",
    [
        (LocalDateTime(0, 1, 1), "UTC", TimezoneConverter.MIN_INSTANT),
        (LocalDateTime(2024, 1, -(10**9)), "UTC", TimezoneConverter.MIN_INSTANT),
        (LocalDateTime(2024, 1, 10**9), "UTC", TimezoneConverter.MAX_INSTANT),
        (LocalDateTime(2024, 1, 1, 10**12), "UTC", TimezoneConverter.MAX_INSTANT),
        (
            LocalDateTime(9999, 12, 31, 23),
            "Pacific/Kiritimati",
            TimezoneConverter.MAX_INSTANT,
        ),
    ],
)
def test_local_to_utc_clamps_edge_integers(fields, zone, expected):
    """Readings outside the datetime range are clamped instead of raising."""
    result = TimezoneConverter.local_to_utc(fields, zone)
    if result != expected:
        raise AssertionError(f"{fields} in {zone} -> {result}, expected {expected}")


def test_zoned_parts_clamps_extreme_instants():
    """Projecting the largest instant into a +14:00 zone does not overflow."""
    parts = TimezoneConverter.zoned_parts(
        datetime.max.replace(tzinfo=timezone.utc), "Pacific/Kiritimati"
    )
    if (parts.year, parts.month, parts.day, parts.hour) != (9999, 12, 29, 14):
        raise AssertionError(f"Unexpected clamped reading: {parts}")


@pytest.mark.parametrize(
    "delta, expected",
    [
        (10**7, YearMonthDay(9999, 12, 29)),
        (-(10**7), YearMonthDay(1, 1, 3)),
        (10**10, YearMonthDay(9999, 12, 29)),
    ],
)
def test_add_days_clamps_edge_integers(delta, expected):
    """Huge day shifts land on the supported bounds."""
    result = TimezoneConverter.add_days(YearMonthDay(2024, 1, 1), delta)
    if result != expected:
        raise AssertionError(f"2024-01-01 + {delta} -> {result}, expected {expected}")
