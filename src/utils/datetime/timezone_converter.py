"""Conversions between UTC instants and wall-clock readings in IANA timezones.

Every offset and DST rule comes from the IANA database through :mod:`zoneinfo`;
no fixed offsets are assumed anywhere. All methods are stateless and
thread-safe.

Supported range: instants between ``MIN_INSTANT`` (0001-01-03 UTC) and
``MAX_INSTANT`` (9999-12-29 UTC). Readings or instants outside it are clamped
to the nearest bound instead of raising, which leaves room for any UTC offset
when projecting a bound into a timezone.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Final, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.utils.config.configuration_error import ConfigurationError
from src.utils.datetime.zoned_parts import LocalDateTime, YearMonthDay, ZonedParts

LocalFields = Union[LocalDateTime, ZonedParts]


class TimezoneConverter:
    """Static helpers projecting instants into local clocks and back."""

    MAX_ITERATIONS: Final[int] = 4
    MIN_INSTANT: Final[datetime] = datetime(1, 1, 3, tzinfo=timezone.utc)
    MAX_INSTANT: Final[datetime] = datetime(9999, 12, 29, tzinfo=timezone.utc)

    @staticmethod
    def zone(timezone_id: str) -> ZoneInfo:
        """Resolve *timezone_id* or raise :class:`ConfigurationError`."""
        if not isinstance(timezone_id, str) or len(timezone_id.strip()) == 0:
            raise ConfigurationError("Timezone identifier is empty")
        try:
            return ZoneInfo(timezone_id.strip())
        except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
            raise ConfigurationError(f"Invalid timezone: '{timezone_id}'") from exc

    @staticmethod
    def zoned_parts(instant: datetime, timezone_id: str) -> ZonedParts:
        """Return the wall-clock components of *instant* in *timezone_id*.

        Naive instants are read as UTC; instants outside the supported range are
        clamped first.
        """
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        instant = TimezoneConverter._clamp(instant)
        local = instant.astimezone(TimezoneConverter.zone(timezone_id))
        return ZonedParts(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            weekday_index=local.isoweekday() % 7,
        )

    @staticmethod
    def _clamp(instant: datetime) -> datetime:
        return min(
            max(instant, TimezoneConverter.MIN_INSTANT), TimezoneConverter.MAX_INSTANT
        )

    @staticmethod
    def _as_naive_utc(fields: LocalFields) -> datetime:
        """Read local fields as if they were UTC, normalizing out-of-range values.

        Results beyond the supported range are clamped to its bounds.
        """
        carry, month_index = divmod(int(fields.month) - 1, 12)
        year = int(fields.year) + carry
        try:
            base = datetime(year, month_index + 1, 1, tzinfo=timezone.utc)
            reading = base + timedelta(
                days=int(fields.day) - 1,
                hours=int(fields.hour),
                minutes=int(fields.minute),
                seconds=int(fields.second),
            )
        except (OverflowError, ValueError):
            # Rough position in seconds, only used to pick the side to clamp to.
            seconds = (
                ((year * 12 + month_index) * 31 + int(fields.day)) * 86400
                + int(fields.hour) * 3600
                + int(fields.minute) * 60
                + int(fields.second)
            )
            if seconds < 5000 * 12 * 31 * 86400:
                return TimezoneConverter.MIN_INSTANT
            return TimezoneConverter.MAX_INSTANT
        return TimezoneConverter._clamp(reading)

    @staticmethod
    def local_to_utc(fields: LocalFields, timezone_id: str) -> datetime:
        """Resolve a wall-clock reading in *timezone_id* to the UTC instant it denotes.

        Fixed-point iteration: the reading is first taken as UTC, projected back
        through :meth:`zoned_parts`, and corrected by the difference between the
        observed and the intended reading, at most ``MAX_ITERATIONS`` times.

        * Readings inside a spring-forward gap do not exist. The result is the
          earliest visited instant whose local reading lies after the intended
          one, i.e. the reading pushed forward across the gap.
        * Readings inside a fall-back overlap converge to one of the two valid
          instants. Which one depends on the iteration path; callers that need
          a specific side must disambiguate themselves.
        """
        intended = TimezoneConverter._as_naive_utc(fields)
        guess = intended
        forward: Optional[datetime] = None
        for step in range(TimezoneConverter.MAX_ITERATIONS + 1):
            observed = TimezoneConverter._as_naive_utc(
                TimezoneConverter.zoned_parts(guess, timezone_id)
            )
            delta = observed - intended
            if delta == timedelta(0):
                return TimezoneConverter._clamp(guess)
            if delta > timedelta(0) and (forward is None or guess < forward):
                forward = guess
            if step < TimezoneConverter.MAX_ITERATIONS:
                guess = guess - delta
        return TimezoneConverter._clamp(forward if forward is not None else guess)

    @staticmethod
    def add_days(ymd: YearMonthDay, delta_days: int) -> YearMonthDay:
        """Shift a calendar date by *delta_days*, independent of any DST rule.

        Dates beyond the supported range are clamped to its bounds.
        """
        shifted = TimezoneConverter._as_naive_utc(
            LocalDateTime(ymd.year, ymd.month, int(ymd.day) + int(delta_days))
        )
        return YearMonthDay(shifted.year, shifted.month, shifted.day)
