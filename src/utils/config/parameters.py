"""Central configuration manager.

This module loads the static market registry, the recurring holiday calendar,
the label catalogs and the runtime settings read from the environment. The
market calendar is validated as soon as the loader is built, so any malformed
market or holiday fails fast with :class:`ConfigurationError`.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

from src.utils.config.configuration_error import ConfigurationError
from src.utils.config.path_utils import PathUtils
from src.utils.datetime.timezone_converter import TimezoneConverter
from src.utils.exchange.market_calendar import MarketCalendar
from src.utils.io.logger import Logger

_WEEKDAYS_MON_FRI = [1, 2, 3, 4, 5]
_WEEKDAYS_SUN_FRI = [0, 1, 2, 3, 4, 5]


class ParameterLoader:
    """Centralized configuration manager for markets, holidays and settings."""

    _PREFERENCES_FILEPATH = "config/preferences.json"
    _ENV_FILEPATH = ".env"

    def __init__(self) -> None:
        self.env_filepath = Path(ParameterLoader._ENV_FILEPATH)
        load_dotenv(dotenv_path=self.env_filepath)
        self._parameters: Dict[str, Any] = self._initialize_parameters()
        self._parameters["viewer_timezone"] = self._resolve_viewer_timezone()
        self._market_calendar = MarketCalendar.from_parameter(
            self.get("markets"), self.get("holidays")
        )
        Logger.success(
            f"Loaded {len(self._market_calendar.markets)} markets and "
            f"{len(self._market_calendar.holidays)} holidays"
        )

    def _resolve_viewer_timezone(self) -> str:
        """Return ``VIEWER_TZ`` (validated), else a usable ``TZ``, else UTC."""
        explicit = self._parameters.get("viewer_timezone")
        if explicit:
            TimezoneConverter.zone(explicit)
            return explicit
        system_tz = (os.getenv("TZ") or "").strip().lstrip(":")
        if system_tz:
            try:
                TimezoneConverter.zone(system_tz)
                return system_tz
            except ConfigurationError:
                Logger.warning(f"Ignoring unknown TZ value: {system_tz}")
        return "UTC"

    def _initialize_parameters(self) -> Dict[str, Any]:
        """Build the parameters dictionary from static records and the environment."""
        constant_params = {
            "clock_refresh_seconds": 1,
            "default_language": "es",
            "status_refresh_seconds": 30,
            "supported_languages": ["es", "en"],
            "markets": [
                {
                    "id": "sydney",
                    "name": "Sydney",
                    "category": "forex",
                    "timezone": "Australia/Sydney",
                    "icon": "fa-earth-oceania",
                    "trading_weekdays": _WEEKDAYS_SUN_FRI,
                    "sessions_hours": {"regular": {"open": "07:00", "close": "16:00"}},
                },
                {
                    "id": "tokyo",
                    "name": "Tokyo",
                    "category": "forex",
                    "timezone": "Asia/Tokyo",
                    "icon": "fa-yen-sign",
                    "trading_weekdays": _WEEKDAYS_SUN_FRI,
                    "sessions_hours": {"regular": {"open": "09:00", "close": "18:00"}},
                },
                {
                    "id": "london",
                    "name": "London",
                    "category": "forex",
                    "timezone": "Europe/London",
                    "icon": "fa-sterling-sign",
                    "trading_weekdays": _WEEKDAYS_SUN_FRI,
                    "sessions_hours": {"regular": {"open": "08:00", "close": "17:00"}},
                },
                {
                    "id": "ny",
                    "name": "New York",
                    "category": "forex",
                    "timezone": "America/New_York",
                    "icon": "fa-dollar-sign",
                    "trading_weekdays": _WEEKDAYS_MON_FRI,
                    "sessions_hours": {"regular": {"open": "08:00", "close": "17:00"}},
                },
                {
                    "id": "nasdaq",
                    "name": "NASDAQ",
                    "category": "stock",
                    "timezone": "America/New_York",
                    "icon": "fa-laptop-code",
                    "trading_weekdays": _WEEKDAYS_MON_FRI,
                    "sessions_hours": {"regular": {"open": "09:30", "close": "16:00"}},
                    "highlight_bands": [
                        {
                            "open": "09:30",
                            "close": "10:30",
                            "tag": "morning",
                            "label_key": "bands.high_volatility",
                        },
                        {
                            "open": "11:30",
                            "close": "13:30",
                            "tag": "midday",
                            "label_key": "bands.calm_zone",
                        },
                        {
                            "open": "15:00",
                            "close": "16:00",
                            "tag": "afternoon",
                            "label_key": "bands.high_volatility",
                        },
                    ],
                },
                {
                    "id": "nyse",
                    "name": "NYSE",
                    "category": "stock",
                    "timezone": "America/New_York",
                    "icon": "fa-building-columns",
                    "trading_weekdays": _WEEKDAYS_MON_FRI,
                    "sessions_hours": {
                        "pre_open_hour": 4,
                        "regular": {"open": "09:30", "close": "16:00"},
                        "after_close_hour": 20,
                    },
                },
            ],
            "holidays": [
                {
                    "month": 12,
                    "day": 24,
                    "name": "Christmas Eve",
                    "description": "Official closure for exchanges and FX desks "
                    "in most financial centres",
                    "stocks_full_close": True,
                    "forex_full_close": True,
                },
                {
                    "month": 12,
                    "day": 31,
                    "name": "New Year's Eve",
                    "description": "Year end, global holiday",
                    "stocks_full_close": True,
                    "forex_full_close": True,
                },
                {
                    "month": 7,
                    "day": 4,
                    "name": "US Independence Day",
                    "description": "Wall Street closes; FX keeps limited liquidity",
                    "restricted_stock_ids": ["nasdaq", "nyse"],
                    "forex_limited_liquidity": True,
                },
                {
                    "month": 11,
                    "day": 25,
                    "name": "Thanksgiving",
                    "description": "Stock exchanges closed. Some FX sessions trade "
                    "with wider spreads",
                    "stocks_full_close": True,
                    "forex_high_spread": True,
                },
            ],
            "translations": {
                "es": {
                    "title": "Horarios de Mercados Financieros",
                    "stocks": {
                        "title": "Bolsa de Valores de EE. UU",
                        "subtitle": "Mercado de Acciones",
                    },
                    "forex": {
                        "title": "Sesión de Forex",
                        "subtitle": "Mercado de Divisas",
                    },
                    "status": {
                        "closed": "Cerrado",
                        "closed_holiday": "Cerrado (Feriado: {0})",
                        "open": "Mercado abierto",
                        "upcoming_open": "Próxima apertura",
                        "pre_market": "Pre-mercado",
                        "extended_hours": "Sesión extendida",
                        "liquidity_limited": "Liquidez limitada (Feriado)",
                        "open_high_spreads": "Mercado abierto (Spreads altos)",
                    },
                    "market": "Mercado",
                    "status_label": "Estado",
                    "elapsed": "Transcurrido",
                    "open_label": "Apertura:",
                    "close_label": "Cierre:",
                    "market_time": "Hora del mercado:",
                    "holiday_prefix": "Feriado:",
                    "highlight": "Zona",
                    "your_time": "Tu hora:",
                    "bands": {
                        "high_volatility": "Alta volatilidad",
                        "calm_zone": "Zona de calma",
                    },
                },
                "en": {
                    "title": "Market Session Times",
                    "stocks": {
                        "title": "US Stock Exchanges",
                        "subtitle": "Stock Market",
                    },
                    "forex": {"title": "Forex Session", "subtitle": "Currency Market"},
                    "status": {
                        "closed": "Closed",
                        "closed_holiday": "Closed (Holiday: {0})",
                        "open": "Market open",
                        "upcoming_open": "Upcoming open",
                        "pre_market": "Pre-market",
                        "extended_hours": "Extended hours",
                        "liquidity_limited": "Limited liquidity (Holiday)",
                        "open_high_spreads": "Market open (High spreads)",
                    },
                    "market": "Market",
                    "status_label": "Status",
                    "elapsed": "Elapsed",
                    "open_label": "Open:",
                    "close_label": "Close:",
                    "market_time": "Market time:",
                    "holiday_prefix": "Holiday:",
                    "highlight": "Zone",
                    "your_time": "Your time:",
                    "bands": {
                        "high_volatility": "High volatility",
                        "calm_zone": "Calm zone",
                    },
                },
            },
        }
        env_params = {
            "language": (os.getenv("APP_LANG") or "").strip().lower() or None,
            "locale_hint": os.getenv("LC_ALL") or os.getenv("LANG"),
            "viewer_timezone": (os.getenv("VIEWER_TZ") or "").strip() or None,
        }
        path_params = {
            "preferences_filepath": PathUtils.build(
                ParameterLoader._PREFERENCES_FILEPATH
            ),
        }
        return {**env_params, **constant_params, **path_params}

    def get_all(self) -> Any:
        """Return all parameters."""
        return self._parameters

    def get(self, key: str, default: Any = None) -> Any:
        """Return parameter value if exists, else *default*."""
        try:
            return self._parameters[key]
        except KeyError:
            return default

    def __getitem__(self, key: str) -> Any:
        """Allow dict-style access to parameters."""
        return self._parameters[key]

    def market_calendar(self) -> MarketCalendar:
        """Return the validated market calendar."""
        return self._market_calendar
