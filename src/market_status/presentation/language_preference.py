"""Persisted viewer language preference.

A single ``{"lang": "<code>"}`` document stored as JSON. It only influences
label resolution, never the status engine.
"""

from typing import Any, List, Optional

from src.utils.io.json_manager import JsonManager
from src.utils.io.logger import Logger


class LanguagePreference:
    """Read, detect and store the viewer's language code."""

    _KEY = "lang"

    def __init__(self, filepath: str, supported: List[str], default: str):
        if default not in supported:
            raise ValueError(f"Default language '{default}' is not supported")
        self.filepath = filepath
        self.supported = list(supported)
        self.default = default

    def _normalize(self, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return None
        code = value.strip()[:2].lower()
        return code if code in self.supported else None

    def detect(self, locale_hint: Optional[str]) -> str:
        """Return the language of a locale such as ``en_US.UTF-8``, else the default."""
        return self._normalize(locale_hint) or self.default

    def stored(self) -> Optional[str]:
        """Return the stored language if it is supported."""
        data = JsonManager.load(self.filepath)
        if not isinstance(data, dict):
            return None
        return self._normalize(data.get(self._KEY))

    def load(self, locale_hint: Optional[str] = None) -> str:
        """Return the stored language, else the one detected from *locale_hint*."""
        return self.stored() or self.detect(locale_hint)

    def save(self, language: str) -> str:
        """Store *language* (unsupported codes fall back to the default)."""
        code = self._normalize(language)
        if code is None:
            Logger.warning(
                f"Unsupported language '{language}', using '{self.default}'"
            )
            code = self.default
        JsonManager.save({self._KEY: code}, self.filepath)
        return code

    def clear(self) -> bool:
        """Forget the stored preference."""
        return JsonManager.delete(self.filepath)
