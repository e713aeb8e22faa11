"""Configuration package for handler settings and registration validation."""

from .settings import HandlerSettings, SettingsLoadError, config_load_settings, config_normalize_option_key

__all__ = ["HandlerSettings", "SettingsLoadError", "config_load_settings", "config_normalize_option_key"]
