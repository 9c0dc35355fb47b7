"""Recurring annual holidays and the effect each one has per market category.

Effects are small tagged variants instead of independent flags, so a holiday
can only carry one consistent effect for stocks and one for forex:

* stocks: :class:`NoEffect`, :class:`FullClose` or :class:`RestrictedIds`
* forex: :class:`NoEffect`, :class:`FullClose`, :class:`LimitedLiquidity`
  or :class:`HighSpread`

A holiday with no effect in either category closes every market whose local
date matches it.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Tuple, Union

from src.utils.config.configuration_error import ConfigurationError


@dataclass(frozen=True)
class NoEffect:
    """The holiday does not touch this category."""

    def closes(self, market_id: str) -> bool:  # pylint: disable=unused-argument
        """Return whether the market is fully closed."""
        return False


@dataclass(frozen=True)
class FullClose:
    """Every market of the category is closed all day."""

    def closes(self, market_id: str) -> bool:  # pylint: disable=unused-argument
        """Return whether the market is fully closed."""
        return True


@dataclass(frozen=True)
class RestrictedIds:
    """Only the listed stock markets are closed all day."""

    market_ids: FrozenSet[str] = field(default_factory=frozenset)

    def closes(self, market_id: str) -> bool:
        """Return whether the market is fully closed."""
        return market_id in self.market_ids


@dataclass(frozen=True)
class LimitedLiquidity:
    """Forex keeps trading with thin liquidity."""

    def closes(self, market_id: str) -> bool:  # pylint: disable=unused-argument
        """Return whether the market is fully closed."""
        return False


@dataclass(frozen=True)
class HighSpread:
    """Forex stays open during the session but quotes wide spreads."""

    def closes(self, market_id: str) -> bool:  # pylint: disable=unused-argument
        """Return whether the market is fully closed."""
        return False


StockEffect = Union[NoEffect, FullClose, RestrictedIds]
ForexEffect = Union[NoEffect, FullClose, LimitedLiquidity, HighSpread]

_LEAP_YEAR = 2000


@dataclass(frozen=True)
class Holiday:
    """A holiday recurring every year on ``(month, day)``."""

    month: int
    day: int
    name: str
    description: str = ""
    stock_effect: StockEffect = field(default_factory=NoEffect)
    forex_effect: ForexEffect = field(default_factory=NoEffect)

    def __post_init__(self) -> None:
        for attr in ("month", "day"):
            value = getattr(self, attr)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"Holiday `{attr}` must be an integer")
        if not 1 <= self.month <= 12:
            raise ConfigurationError(f"Holiday month out of range 1..12: {self.month}")
        last_day = calendar.monthrange(_LEAP_YEAR, self.month)[1]
        if not 1 <= self.day <= last_day:
            raise ConfigurationError(
                f"Holiday day out of range for month {self.month}: {self.day}"
            )
        if not isinstance(self.name, str) or len(self.name.strip()) == 0:
            raise ConfigurationError("Holiday `name` must be a non-empty string")
        if not isinstance(self.stock_effect, (NoEffect, FullClose, RestrictedIds)):
            raise ConfigurationError(f"Invalid stock effect: {self.stock_effect!r}")
        if not isinstance(
            self.forex_effect, (NoEffect, FullClose, LimitedLiquidity, HighSpread)
        ):
            raise ConfigurationError(f"Invalid forex effect: {self.forex_effect!r}")

    @property
    def key(self) -> Tuple[int, int]:
        """Lookup key ``(month, day)``."""
        return self.month, self.day

    @property
    def is_generic(self) -> bool:
        """``True`` when no category effect is declared at all."""
        return isinstance(self.stock_effect, NoEffect) and isinstance(
            self.forex_effect, NoEffect
        )

    @staticmethod
    def _flag(record: Dict[str, Any], key: str) -> bool:
        value = record.get(key, False)
        if not isinstance(value, bool):
            raise ConfigurationError(f"Holiday flag `{key}` must be bool: {value!r}")
        return value

    @staticmethod
    def _stock_effect(record: Dict[str, Any]) -> StockEffect:
        full_close = Holiday._flag(record, "stocks_full_close")
        restricted = record.get("restricted_stock_ids")
        if restricted is not None:
            if isinstance(restricted, str) or not isinstance(
                restricted, (list, tuple, set, frozenset)
            ):
                raise ConfigurationError(
                    f"`restricted_stock_ids` must be a list: {restricted!r}"
                )
            if full_close:
                raise ConfigurationError(
                    "`stocks_full_close` and `restricted_stock_ids` are exclusive"
                )
            ids = frozenset(str(i).strip().lower() for i in restricted)
            if len(ids) == 0:
                raise ConfigurationError("`restricted_stock_ids` is empty")
            return RestrictedIds(ids)
        return FullClose() if full_close else NoEffect()

    @staticmethod
    def _forex_effect(record: Dict[str, Any]) -> ForexEffect:
        flags = {
            "forex_full_close": FullClose,
            "forex_limited_liquidity": LimitedLiquidity,
            "forex_high_spread": HighSpread,
        }
        chosen = [k for k in flags if Holiday._flag(record, k)]
        if len(chosen) > 1:
            raise ConfigurationError(
                f"Forex holiday flags are exclusive, got: {', '.join(chosen)}"
            )
        return flags[chosen[0]]() if chosen else NoEffect()

    @staticmethod
    def from_parameter(record: Any) -> Holiday:
        """Build a holiday from a flat flag record."""
        if not isinstance(record, dict):
            raise ConfigurationError(f"Holiday record is invalid: {record!r}")
        return Holiday(
            month=record.get("month"),
            day=record.get("day"),
            name=record.get("name"),
            description=record.get("description") or "",
            stock_effect=Holiday._stock_effect(record),
            forex_effect=Holiday._forex_effect(record),
        )

    def to_json(self) -> Dict[str, Any]:
        """Object to JSON, using the flat flag layout of the configuration."""
        result: Dict[str, Any] = {
            "month": self.month,
            "day": self.day,
            "name": self.name,
            "description": self.description,
            "stocks_full_close": isinstance(self.stock_effect, FullClose),
            "forex_full_close": isinstance(self.forex_effect, FullClose),
            "forex_limited_liquidity": isinstance(self.forex_effect, LimitedLiquidity),
            "forex_high_spread": isinstance(self.forex_effect, HighSpread),
        }
        if isinstance(self.stock_effect, RestrictedIds):
            result["restricted_stock_ids"] = sorted(self.stock_effect.market_ids)
        return result
