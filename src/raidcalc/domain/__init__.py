"""Domain layer - RAID layouts and their calculations."""

from .layouts import (
    BaseLayout,
    CalculationResult,
    CatalogError,
    LayoutInfo,
    LayoutMetrics,
    LayoutOptions,
    RaidCatalog,
    layout_registry,
)
from .value_objects import FailureKind, GroupDivisionPolicy, RaidLevel

__all__ = [
    "BaseLayout",
    "CalculationResult",
    "CatalogError",
    "FailureKind",
    "GroupDivisionPolicy",
    "LayoutInfo",
    "LayoutMetrics",
    "LayoutOptions",
    "RaidCatalog",
    "RaidLevel",
    "layout_registry",
]
