"""Config – settings dataclasses, loaders and validation errors."""
from faceted_search.config.settings import (
    EnvSettingsLoader,
    FacetSearchSettings,
    Settings,
    SettingsLoader,
)
from faceted_search.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FacetSearchSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
