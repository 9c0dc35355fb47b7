"""Terminal board of every market's status, expressed in the viewer's local time.

For each market the board shows the translated status, the elapsed share of
the session, the session open and close converted to the viewer's timezone,
the market's own wall clock and any holiday or highlight band in effect.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Tuple

import pandas as pd  # type: ignore

from src.market_status.engine.session_status_engine import SessionStatusEngine
from src.market_status.engine.status_descriptor import StatusDescriptor
from src.market_status.presentation.display_order import DisplayOrder
from src.market_status.presentation.label_resolver import LabelResolver
from src.utils.datetime.timezone_converter import TimezoneConverter
from src.utils.datetime.zoned_parts import LocalDateTime, ZonedParts
from src.utils.exchange.hours import Hours
from src.utils.exchange.market import Market, MarketCategory
from src.utils.exchange.market_calendar import MarketCalendar

_SECTIONS: List[Tuple[MarketCategory, str]] = [
    (MarketCategory.FOREX, "forex.title"),
    (MarketCategory.STOCK, "stocks.title"),
]


class SessionBoard:
    """Evaluates and renders every configured market for one viewer."""

    def __init__(
        self,
        calendar: MarketCalendar,
        resolver: LabelResolver,
        language: str,
        viewer_timezone: str,
    ) -> None:
        TimezoneConverter.zone(viewer_timezone)
        self.calendar = calendar
        self.resolver = resolver
        self.language = language
        self.viewer_timezone = viewer_timezone

    def _t(self, key: str, params: Any = None) -> str:
        return self.resolver.resolve(key, params, self.language)

    def evaluate(
        self, category: MarketCategory, now: datetime
    ) -> List[Tuple[Market, StatusDescriptor]]:
        """Evaluate the markets of *category* and order them for display."""
        markets = self.calendar.markets_by_category(category)
        descriptors = [
            SessionStatusEngine.evaluate(m, self.calendar, now) for m in markets
        ]
        return DisplayOrder.order_for_display(markets, descriptors)

    def session_bounds(
        self, market: Market, now: datetime
    ) -> Tuple[ZonedParts, ZonedParts]:
        """Return the open and close of the market's current local day, in viewer time."""
        local_day = TimezoneConverter.zoned_parts(now, market.timezone).date
        regular = market.sessions_hours.regular
        bounds = []
        for value in (regular.open, regular.close):
            hour, minute = Hours.split(value)
            fields = LocalDateTime(
                local_day.year, local_day.month, local_day.day, hour, minute
            )
            instant = TimezoneConverter.local_to_utc(fields, market.timezone)
            bounds.append(TimezoneConverter.zoned_parts(instant, self.viewer_timezone))
        return bounds[0], bounds[1]

    def _row(self, market: Market, descriptor: StatusDescriptor, now: datetime):
        open_at, close_at = self.session_bounds(market, now)
        band = market.highlight_for(descriptor.local_clock.minutes_of_day)
        highlight = ""
        if band is not None and descriptor.highlight_tag is not None:
            highlight = self._t(band.label_key) if band.label_key else band.tag
        holiday = descriptor.holiday_ref
        return {
            "market": market.display_name,
            "status": self._t(descriptor.label_key, descriptor.label_params),
            "elapsed": f"{descriptor.progress_percent:.1f}%",
            "open": open_at.hhmm(),
            "close": close_at.hhmm(),
            "market_time": descriptor.local_clock.hhmm(),
            "holiday": "" if holiday is None else holiday.name,
            "highlight": highlight,
        }

    def to_frame(self, category: MarketCategory, now: datetime) -> pd.DataFrame:
        """Return one row per market of *category*, open markets first."""
        rows: List[Dict[str, Any]] = [
            self._row(m, d, now) for m, d in self.evaluate(category, now)
        ]
        columns = {
            "market": self._t("market"),
            "status": self._t("status_label"),
            "elapsed": self._t("elapsed"),
            "open": self._t("open_label").rstrip(":"),
            "close": self._t("close_label").rstrip(":"),
            "market_time": self._t("market_time").rstrip(":"),
            "holiday": self._t("holiday_prefix").rstrip(":"),
            "highlight": self._t("highlight"),
        }
        return pd.DataFrame(rows, columns=list(columns)).rename(columns=columns)

    def clock_line(self, now: datetime) -> str:
        """Return the viewer's wall clock and timezone."""
        parts = TimezoneConverter.zoned_parts(now, self.viewer_timezone)
        return (
            f"{self._t('your_time')} {parts.hhmm()}:{parts.second:02d} "
            f"({self.viewer_timezone.replace('_', ' ')})"
        )

    def render(self, now: datetime) -> str:
        """Render the whole board as plain text."""
        blocks = [self._t("title"), self.clock_line(now)]
        for category, title_key in _SECTIONS:
            frame = self.to_frame(category, now)
            if frame.empty:
                continue
            blocks.append("")
            blocks.append(self._t(title_key))
            blocks.append(frame.to_string(index=False))
        return "\n".join(blocks)
