"""Path utilities module.

Builds normalized file system paths rooted at the optional
``MARKET_SESSIONS_HOME`` directory, accepting either separator style.
"""

import os
import re
from typing import List


class PathUtils:  # pylint: disable=too-few-public-methods
    """Utility class for building normalized file system paths."""

    _HOME_ENV: str = "MARKET_SESSIONS_HOME"

    @staticmethod
    def home() -> str:
        """Return the configured base directory, or an empty string for the CWD."""
        raw: str = os.path.expanduser(os.getenv(PathUtils._HOME_ENV, "").strip())
        if not raw:
            return ""
        base = os.sep.join(p for p in re.split(r"[\\/]", raw) if p.strip())
        return os.sep + base if raw.startswith(("\\", "/")) else base

    @staticmethod
    def build(*segments: str) -> str:
        """Join *segments* under :meth:`home`, splitting on either separator."""
        parts: List[str] = []
        for segment in segments:
            if segment:
                parts.extend(p for p in re.split(r"[\\/]", segment) if p)
        return os.path.join(PathUtils.home(), *parts)
