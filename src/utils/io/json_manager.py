"""Module for reading and writing small JSON documents such as user preferences."""

import json
import os
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from src.utils.io.logger import Logger


class JsonManager:
    """Class for handling JSON file operations."""

    @staticmethod
    def exists(filepath: str) -> bool:
        """Check if a file exists at the given path."""
        return os.path.exists(filepath)

    @staticmethod
    def _serialize(obj: Any) -> Any:
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, (set, frozenset)):
            return sorted(obj)
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    @staticmethod
    def load(filepath: Optional[str]) -> Any:
        """Load JSON data from a file, or ``None`` when missing or unreadable."""
        if not filepath or not filepath.strip():
            Logger.error("filepath is empty")
            return None
        if not JsonManager.exists(filepath):
            Logger.debug(f"File not found: {filepath}")
            return None
        try:
            with open(filepath, "r", encoding="utf-8") as file:
                return json.load(file)
        except (OSError, TypeError, json.JSONDecodeError) as e:
            Logger.error(f"Error loading JSON file {filepath}: {e}")
            return None

    @staticmethod
    def save(data: Any, filepath: Optional[str]) -> bool:
        """Save data to a JSON file, creating parent folders as needed."""
        if not filepath or not filepath.strip():
            Logger.error("filepath is empty")
            return False
        try:
            payload = json.dumps(
                data, indent=4, default=JsonManager._serialize, ensure_ascii=False
            )
            folder = os.path.dirname(filepath)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(filepath, "w", encoding="utf-8") as file:
                file.write(payload)
            return True
        except (OSError, TypeError, ValueError) as e:
            Logger.error(f"Error saving JSON file {filepath}: {e}")
            return False

    @staticmethod
    def delete(filepath: str) -> bool:
        """Delete a JSON file."""
        if not JsonManager.exists(filepath):
            Logger.warning(f"File to delete not found: {filepath}")
            return False
        try:
            os.remove(filepath)
            return True
        except OSError as e:
            Logger.error(f"Error deleting JSON file {filepath}: {e}")
            return False
