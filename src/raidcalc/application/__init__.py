"""Application layer - calculator facade and configuration."""

from .calculator import (
    RaidCalculator,
    calculate,
    get_calculator,
    list_layouts,
    reset_calculator,
    set_calculator,
)
from .config import CalculatorSettings, SettingsError, load_settings

__all__ = [
    "CalculatorSettings",
    "RaidCalculator",
    "SettingsError",
    "calculate",
    "get_calculator",
    "list_layouts",
    "load_settings",
    "reset_calculator",
    "set_calculator",
]
