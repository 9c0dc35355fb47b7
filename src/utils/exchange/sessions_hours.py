"""Typed, validated representation of a market's daily session layout.

The regular session is mandatory. A market may additionally declare the hour
at which its pre-open window starts and the hour at which its after-close
window ends; both are interpreted in the market's IANA timezone.
"""

from __future__ import annotations

from typing import Any, Optional

from src.utils.config.configuration_error import ConfigurationError
from src.utils.datetime.timezone_converter import TimezoneConverter
from src.utils.exchange.hours import Hours


class SessionsHours:
    """Container holding the session segmentation for a market.

    * regular: mandatory regular session :class:`Hours`.
    * pre_open_hour: optional local hour at which the pre-open window starts.
    * after_close_hour: optional local hour at which the after-close window ends.
    * timezone: IANA timezone string (e.g. ``"America/New_York"``).
    """

    __slots__ = ("_regular", "_pre_open_hour", "_after_close_hour", "_timezone")

    def __init__(
        self,
        regular: Hours,
        timezone: str,
        pre_open_hour: Optional[int] = None,
        after_close_hour: Optional[int] = None,
    ) -> None:
        if not isinstance(regular, Hours):
            raise ConfigurationError("`regular` must be an instance of `Hours`")
        TimezoneConverter.zone(timezone)
        self._regular = regular
        self._timezone = timezone.strip()
        self._pre_open_hour = self._validate_hour(pre_open_hour, "pre_open_hour")
        self._after_close_hour = self._validate_hour(
            after_close_hour, "after_close_hour", upper=24
        )
        if (
            self._pre_open_hour is not None
            and self._pre_open_hour * 60 >= regular.open_minute
        ):
            raise ConfigurationError("`pre_open_hour` must be before `regular.open`")
        if (
            self._after_close_hour is not None
            and self._after_close_hour * 60 <= regular.close_minute
        ):
            raise ConfigurationError(
                "`after_close_hour` must be after `regular.close`"
            )

    @staticmethod
    def _validate_hour(value: Any, field: str, upper: int = 23) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"`{field}` must be an integer hour or None")
        if not 0 <= value <= upper:
            raise ConfigurationError(f"`{field}` must be between 0 and {upper}")
        return value

    @property
    def regular(self) -> Hours:
        """Return the regular session."""
        return self._regular

    @property
    def pre_open_hour(self) -> Optional[int]:
        """Return the hour the pre-open window starts, or ``None``."""
        return self._pre_open_hour

    @property
    def after_close_hour(self) -> Optional[int]:
        """Return the hour the after-close window ends, or ``None``."""
        return self._after_close_hour

    @property
    def timezone(self) -> str:
        """Return the IANA timezone string associated with these sessions."""
        return self._timezone

    def to_json(self) -> Any:
        """Object to JSON."""
        return {
            "regular": self.regular.to_json(),
            "pre_open_hour": self.pre_open_hour,
            "after_close_hour": self.after_close_hour,
            "timezone": self.timezone,
        }
