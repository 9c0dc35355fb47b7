"""Value object describing one market's status at one instant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from src.market_status.engine.status_kind import StatusKind
from src.utils.datetime.zoned_parts import ZonedParts
from src.utils.exchange.holiday import Holiday


@dataclass(frozen=True)
class StatusDescriptor:
    """Result of :meth:`SessionStatusEngine.evaluate`.

    * status_kind: the classified :class:`StatusKind`.
    * label_key / label_params: catalog key and positional substitutions.
    * progress_percent: elapsed share of the session, 0.0 to 100.0.
    * highlight_tag: tag of the highlight band covering the instant, if any.
    * holiday_ref: holiday that affected the status, if any.
    * local_clock: the market's wall clock at the evaluated instant.
    """

    status_kind: StatusKind
    label_key: str
    label_params: Tuple[str, ...]
    progress_percent: float
    local_clock: ZonedParts
    highlight_tag: Optional[str] = None
    holiday_ref: Optional[Holiday] = None

    @property
    def is_open(self) -> bool:
        """Shortcut for ``status_kind.is_open``."""
        return self.status_kind.is_open

    def to_json(self) -> Dict[str, Any]:
        """Object to JSON."""
        return {
            "status": self.status_kind.value,
            "label_key": self.label_key,
            "label_params": list(self.label_params),
            "progress": self.progress_percent,
            "highlight_tag": self.highlight_tag,
            "holiday": None if self.holiday_ref is None else self.holiday_ref.name,
            "local_clock": self.local_clock.to_json(),
        }
