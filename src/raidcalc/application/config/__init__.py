"""Calculator configuration."""

from .settings import CalculatorSettings, SettingsError, load_settings

__all__ = [
    "CalculatorSettings",
    "SettingsError",
    "load_settings",
]
