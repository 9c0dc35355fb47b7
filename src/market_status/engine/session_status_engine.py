"""Session status engine.

Classifies a market at an instant into a :class:`StatusDescriptor`, combining
the market's local clock, its weekly trading days, its session layout and the
recurring holiday calendar. The engine keeps no state: the same inputs always
yield the same descriptor.

Evaluation order:

1. Non-trading weekday: ``CLOSED``.
2. Holiday that fully closes the market: ``CLOSED_HOLIDAY``.
3. Base state from the session layout (``OPEN``, ``SOON``, ``SOON_EXTENDED``
   or ``CLOSED``).
4. Forex holiday overlay (``LIMITED_LIQUIDITY``, ``OPEN_HIGH_SPREAD``).
5. Cosmetic highlight band.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final, Optional, Tuple

from src.market_status.engine.status_descriptor import StatusDescriptor
from src.market_status.engine.status_kind import StatusKind
from src.utils.datetime.timezone_converter import TimezoneConverter
from src.utils.datetime.zoned_parts import ZonedParts
from src.utils.exchange.holiday import HighSpread, Holiday, LimitedLiquidity
from src.utils.exchange.market import Market, MarketCategory
from src.utils.exchange.market_calendar import MarketCalendar

SOON_WINDOW_MINUTES: Final[int] = 60

LABEL_KEYS = {
    StatusKind.CLOSED: "status.closed",
    StatusKind.CLOSED_HOLIDAY: "status.closed_holiday",
    StatusKind.SOON: "status.upcoming_open",
    StatusKind.SOON_EXTENDED: "status.extended_hours",
    StatusKind.LIMITED_LIQUIDITY: "status.liquidity_limited",
    StatusKind.OPEN: "status.open",
    StatusKind.OPEN_HIGH_SPREAD: "status.open_high_spreads",
}
PRE_MARKET_LABEL_KEY: Final[str] = "status.pre_market"


@dataclass(frozen=True)
class _BaseState:
    kind: StatusKind
    label_key: str
    progress: float


class SessionStatusEngine:
    """Pure classification of market status."""

    @staticmethod
    def evaluate(
        market: Market, calendar: MarketCalendar, now: datetime
    ) -> StatusDescriptor:
        """Return the status descriptor of *market* at instant *now*."""
        parts = TimezoneConverter.zoned_parts(now, market.timezone)
        if not market.sessions_days.is_trading_day(parts.weekday_index):
            return SessionStatusEngine._closed(parts)

        holiday = calendar.holiday_for_date(parts.month, parts.day)
        if holiday is not None and SessionStatusEngine._fully_closes(holiday, market):
            return SessionStatusEngine._closed_for_holiday(parts, holiday)

        minutes = parts.minutes_of_day
        base = SessionStatusEngine._base_state(market, minutes)
        kind, label_key, progress = base.kind, base.label_key, base.progress
        label_params: Tuple[str, ...] = ()
        holiday_ref: Optional[Holiday] = None

        if holiday is not None and market.category is MarketCategory.FOREX:
            if isinstance(holiday.forex_effect, LimitedLiquidity):
                kind = StatusKind.LIMITED_LIQUIDITY
                label_key = LABEL_KEYS[kind]
                if base.kind is not StatusKind.OPEN:
                    progress = 0.0
                holiday_ref = holiday
            elif isinstance(holiday.forex_effect, HighSpread):
                if base.kind is StatusKind.OPEN:
                    kind = StatusKind.OPEN_HIGH_SPREAD
                else:
                    kind = StatusKind.CLOSED_HOLIDAY
                    label_params = (holiday.name,)
                    progress = 0.0
                label_key = LABEL_KEYS[kind]
                holiday_ref = holiday

        band = market.highlight_for(minutes)
        return StatusDescriptor(
            status_kind=kind,
            label_key=label_key,
            label_params=label_params,
            progress_percent=round(progress, 1),
            local_clock=parts,
            highlight_tag=None if band is None else band.tag,
            holiday_ref=holiday_ref,
        )

    @staticmethod
    def _fully_closes(holiday: Holiday, market: Market) -> bool:
        if holiday.is_generic:
            return True
        if market.category is MarketCategory.STOCK:
            return holiday.stock_effect.closes(market.market_id)
        return holiday.forex_effect.closes(market.market_id)

    @staticmethod
    def _base_state(market: Market, minutes: int) -> _BaseState:
        sessions = market.sessions_hours
        open_minute = sessions.regular.open_minute
        close_minute = sessions.regular.close_minute

        if open_minute <= minutes < close_minute:
            elapsed = (minutes - open_minute) / (close_minute - open_minute) * 100
            return _BaseState(
                StatusKind.OPEN,
                LABEL_KEYS[StatusKind.OPEN],
                min(max(elapsed, 0.0), 100.0),
            )

        if minutes < open_minute:
            # A declared pre-open window replaces the generic "about to open" rule.
            if sessions.pre_open_hour is not None:
                if minutes >= sessions.pre_open_hour * 60:
                    return _BaseState(StatusKind.SOON, PRE_MARKET_LABEL_KEY, 0.0)
            elif minutes >= open_minute - SOON_WINDOW_MINUTES:
                return _BaseState(StatusKind.SOON, LABEL_KEYS[StatusKind.SOON], 0.0)
            return _BaseState(StatusKind.CLOSED, LABEL_KEYS[StatusKind.CLOSED], 0.0)

        if (
            sessions.after_close_hour is not None
            and minutes < sessions.after_close_hour * 60
        ):
            return _BaseState(
                StatusKind.SOON_EXTENDED, LABEL_KEYS[StatusKind.SOON_EXTENDED], 100.0
            )
        return _BaseState(StatusKind.CLOSED, LABEL_KEYS[StatusKind.CLOSED], 100.0)

    @staticmethod
    def _closed(parts: ZonedParts) -> StatusDescriptor:
        return StatusDescriptor(
            status_kind=StatusKind.CLOSED,
            label_key=LABEL_KEYS[StatusKind.CLOSED],
            label_params=(),
            progress_percent=0.0,
            local_clock=parts,
        )

    @staticmethod
    def _closed_for_holiday(parts: ZonedParts, holiday: Holiday) -> StatusDescriptor:
        return StatusDescriptor(
            status_kind=StatusKind.CLOSED_HOLIDAY,
            label_key=LABEL_KEYS[StatusKind.CLOSED_HOLIDAY],
            label_params=(holiday.name,),
            progress_percent=0.0,
            local_clock=parts,
            holiday_ref=holiday,
        )
