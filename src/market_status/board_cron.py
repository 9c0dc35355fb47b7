"""Periodic refresh of the market session board.

The full status board is recomputed at most every ``status_refresh_seconds``;
in between, only the viewer clock is refreshed on the faster
``clock_refresh_seconds`` cadence.
"""

import time
from datetime import datetime, timezone
from typing import Optional

from src.market_status.presentation.label_resolver import LabelResolver
from src.market_status.presentation.language_preference import LanguagePreference
from src.market_status.presentation.session_board import SessionBoard
from src.utils.config.parameters import ParameterLoader
from src.utils.io.logger import Logger


class BoardCron:
    """Decides on each tick whether to re-render the board or just the clock."""

    def __init__(self, board: SessionBoard, status_refresh_seconds: int = 30):
        if status_refresh_seconds <= 0:
            raise ValueError("status_refresh_seconds must be positive")
        self.board = board
        self.status_refresh_seconds = status_refresh_seconds

    def is_due(self, now: datetime, last_render: Optional[datetime]) -> bool:
        """Return ``True`` when the board must be recomputed at *now*."""
        if last_render is None:
            return True
        elapsed = (now - last_render).total_seconds()
        return elapsed < 0 or elapsed >= self.status_refresh_seconds

    def tick(self, now: datetime, last_render: Optional[datetime]) -> Optional[datetime]:
        """Run one tick and return the instant of the latest full render."""
        if self.is_due(now, last_render):
            Logger.separator()
            Logger.info("\n" + self.board.render(now))
            return now
        Logger.debug(self.board.clock_line(now))
        return last_render

    @staticmethod
    def from_parameters(params: ParameterLoader) -> "BoardCron":
        """Wire the board from the loaded configuration and stored preferences."""
        preference = LanguagePreference(
            params.get("preferences_filepath"),
            params.get("supported_languages"),
            params.get("default_language"),
        )
        requested = params.get("language")
        if requested:
            language = preference.save(requested)
        else:
            language = preference.load(params.get("locale_hint"))
        Logger.info(f"Language: {language}, viewer timezone: {params['viewer_timezone']}")
        board = SessionBoard(
            params.market_calendar(),
            LabelResolver(params.get("translations"), params.get("default_language")),
            language,
            params.get("viewer_timezone"),
        )
        return BoardCron(board, params.get("status_refresh_seconds"))


if __name__ == "__main__":
    _PARAMS = ParameterLoader()
    CRON = BoardCron.from_parameters(_PARAMS)
    CLOCK_REFRESH_SECONDS = _PARAMS.get("clock_refresh_seconds")
    LAST_RENDER: Optional[datetime] = None
    try:
        while True:
            try:
                LAST_RENDER = CRON.tick(datetime.now(timezone.utc), LAST_RENDER)
            except RuntimeError as error:
                Logger.error(f"Error during scheduled refresh: {error}")
            time.sleep(CLOCK_REFRESH_SECONDS)
    except KeyboardInterrupt:
        Logger.info("Board stopped.")
