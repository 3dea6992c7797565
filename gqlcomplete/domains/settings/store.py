"""Saved defaults for the command line: schema location and output format."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

# Can be overridden via environment variable for testing
CONFIG_DIR = Path(os.environ.get("GQLCOMPLETE_CONFIG_DIR", Path.home() / ".gqlcomplete"))

SCHEMA_PATH_SETTING = "schema_path"
OUTPUT_FORMAT_SETTING = "output_format"

OUTPUT_FORMATS = ("table", "json")

DEFAULT_SETTINGS: dict[str, str | None] = {
    SCHEMA_PATH_SETTING: None,
    OUTPUT_FORMAT_SETTING: "table",
}


class SettingsError(ValueError):
    """Raised for an unknown setting or a value the setting does not accept."""


def _resolve_settings_path() -> Path:
    override = os.environ.get("GQLCOMPLETE_SETTINGS_PATH", "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "settings.json"


def validate_setting(key: str, value: str) -> None:
    """Check that ``key`` is a known setting and ``value`` suits it.

    Raises:
        SettingsError: If the key is unknown or the value is rejected.
    """
    if key not in DEFAULT_SETTINGS:
        raise SettingsError(f"Unknown setting '{key}'. Known settings: {', '.join(DEFAULT_SETTINGS)}")
    if key == OUTPUT_FORMAT_SETTING and value not in OUTPUT_FORMATS:
        raise SettingsError(f"'{OUTPUT_FORMAT_SETTING}' must be one of: {', '.join(OUTPUT_FORMATS)}")
    if key == SCHEMA_PATH_SETTING and not value.strip():
        raise SettingsError(f"'{SCHEMA_PATH_SETTING}' must not be empty")


class SettingsStore:
    """Settings kept as a JSON object in ~/.gqlcomplete/settings.json.

    Only known keys with string values are read back; anything else in a
    hand-edited file is ignored.
    """

    def __init__(self, file_path: Path | None = None) -> None:
        self.file_path = file_path or _resolve_settings_path()

    def load_all(self) -> dict[str, str]:
        """Load the saved settings, without defaults."""
        try:
            data = json.loads(self.file_path.read_text(encoding="utf-8"))
        except (FileNotFoundError, json.JSONDecodeError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {key: value for key, value in data.items() if key in DEFAULT_SETTINGS and isinstance(value, str)}

    def save_all(self, settings: dict[str, str]) -> None:
        """Replace the saved settings.

        Writes to a temp file in the same directory, then renames it over
        the target.
        """
        for key, value in settings.items():
            validate_setting(key, value)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.file_path.parent, prefix=".tmp_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(settings, f, indent=2)
            os.replace(tmp_path, self.file_path)
        except Exception:
            os.unlink(tmp_path)
            raise

    def get(self, key: str) -> str | None:
        """Get a setting, falling back to the built-in default."""
        return self.load_all().get(key, DEFAULT_SETTINGS.get(key))

    def set(self, key: str, value: str) -> None:
        validate_setting(key, value)
        settings = self.load_all()
        settings[key] = value
        self.save_all(settings)

    def delete(self, key: str) -> bool:
        """Delete a saved setting.

        Returns:
            True if key was saved and is now removed, False otherwise.
        """
        settings = self.load_all()
        if key not in settings:
            return False
        del settings[key]
        self.save_all(settings)
        return True


def load_settings(path: Path | None = None) -> dict[str, str | None]:
    """Load settings merged over the defaults."""
    return {**DEFAULT_SETTINGS, **SettingsStore(file_path=path).load_all()}


def save_settings(settings: dict[str, str], path: Path | None = None) -> None:
    SettingsStore(file_path=path).save_all(settings)
