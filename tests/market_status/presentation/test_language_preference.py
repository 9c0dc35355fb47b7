"""Unit tests for LanguagePreference."""

import json
import unittest
from pathlib import Path
from unittest.mock import patch

import pytest  # type: ignore

from src.market_status.presentation.language_preference import LanguagePreference


@pytest.fixture(name="preference")
def fixture_preference(tmp_path) -> LanguagePreference:
    """Preference stored under a temporary directory."""
    return LanguagePreference(str(tmp_path / "config" / "preferences.json"), ["es", "en"], "es")


@pytest.mark.parametrize(
    "hint, expected",
    [
        ("en_US.UTF-8", "en"),
        ("EN", "en"),
        ("es_CL.UTF-8", "es"),
        ("fr_FR.UTF-8", "es"),
        (None, "es"),
        ("", "es"),
    ],
)
def test_detect(preference, hint, expected):
    """Locale hints map to their two-letter language when supported."""
    if preference.detect(hint) != expected:
        raise AssertionError(f"{hint!r} should detect {expected}")


def test_save_and_load(preference):
    """A stored language wins over the locale hint."""
    if preference.load("en_US.UTF-8") != "en":
        raise AssertionError("Without storage the hint decides")
    if preference.save("es") != "es":
        raise AssertionError("Expected stored code")
    stored = json.loads(Path(preference.filepath).read_text(encoding="utf-8"))
    if stored != {"lang": "es"}:
        raise AssertionError(f"Unexpected stored document: {stored}")
    if preference.load("en_US.UTF-8") != "es":
        raise AssertionError("Stored language should win")


def test_stored_ignores_unsupported(preference):
    """A stored code no longer supported is ignored."""
    path = Path(preference.filepath)
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"lang": "de"}), encoding="utf-8")
    if preference.stored() is not None:
        raise AssertionError("Unsupported stored code should be ignored")
    if preference.load("en_GB") != "en":
        raise AssertionError("Expected detection fallback")


def test_clear(preference):
    """Clearing removes the stored document."""
    preference.save("en")
    preference.clear()
    if Path(preference.filepath).exists():
        raise AssertionError("Preference file should be removed")
    if preference.load() != "es":
        raise AssertionError("Expected default after clearing")


def test_default_must_be_supported(tmp_path):
    """The default language must be one of the supported ones."""
    with pytest.raises(ValueError, match="not supported"):
        LanguagePreference(str(tmp_path / "p.json"), ["es", "en"], "fr")


class TestLanguagePreferenceLogging(unittest.TestCase):
    """Logging of unsupported languages."""

    @patch("src.utils.io.logger.Logger.warning")
    def test_save_unsupported_logs_warning(self, mock_warning):
        """Unsupported codes are replaced by the default and reported."""
        with patch(
            "src.market_status.presentation.language_preference.JsonManager.save"
        ) as mock_save:
            preference = LanguagePreference("unused.json", ["es", "en"], "es")
            self.assertEqual(preference.save("de"), "es")
            mock_save.assert_called_once_with({"lang": "es"}, "unused.json")
        mock_warning.assert_called_once()
        self.assertIn("de", mock_warning.call_args[0][0])
