"""Catalog lookup of display labels with language fallback.

The active language is always passed in by the caller; the resolver holds no
"current language" of its own, so one instance can serve any number of viewers.
"""

from typing import Any, Dict, Iterable, Optional, Tuple


class LabelResolver:
    """Resolve dotted catalog keys such as ``"status.open"`` into text.

    Fallback chain: requested language, then the default language, then the
    raw key. Resolution never raises.
    """

    def __init__(self, catalogs: Dict[str, Dict[str, Any]], default_language: str):
        self._catalogs = catalogs or {}
        self._default_language = default_language

    @staticmethod
    def _lookup(catalog: Any, key: str) -> Optional[str]:
        node = catalog
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    @staticmethod
    def _values(params: Any) -> Tuple[Any, ...]:
        if params is None:
            return ()
        if isinstance(params, (str, bytes)):
            return (params,)
        try:
            return tuple(params)
        except TypeError:
            return (params,)

    def resolve(
        self,
        key: str,
        params: Optional[Iterable[Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Return the label for *key*, substituting ``{0}``, ``{1}``... with *params*."""
        if not isinstance(key, str):
            return str(key)
        text = None
        if isinstance(language, str):
            text = self._lookup(self._catalogs.get(language), key)
        if text is None:
            text = self._lookup(self._catalogs.get(self._default_language), key)
        if text is None:
            text = key
        for index, value in enumerate(self._values(params)):
            text = text.replace(f"{{{index}}}", str(value))
        return text
