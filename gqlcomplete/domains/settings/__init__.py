"""Persistent user settings."""

from .store import (
    DEFAULT_SETTINGS,
    OUTPUT_FORMAT_SETTING,
    OUTPUT_FORMATS,
    SCHEMA_PATH_SETTING,
    SettingsError,
    SettingsStore,
    load_settings,
    save_settings,
    validate_setting,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "OUTPUT_FORMAT_SETTING",
    "OUTPUT_FORMATS",
    "SCHEMA_PATH_SETTING",
    "SettingsError",
    "SettingsStore",
    "load_settings",
    "save_settings",
    "validate_setting",
]
