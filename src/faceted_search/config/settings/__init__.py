"""Config settings – 12-factor env-based configuration."""
from faceted_search.config.settings.base import FacetSearchSettings, Settings
from faceted_search.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "FacetSearchSettings", "Settings", "SettingsLoader"]
