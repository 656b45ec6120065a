"""RAID layout definitions.

This package provides one layout class per RaidLevel, registered with the
LayoutRegistry, and the RaidCatalog that instantiates them.

Core:
- BaseLayout: Shared validate-then-compute pipeline
- LayoutRegistry / layout_registry: Decorator-based class registry
- RaidCatalog: Total, read-only RaidLevel -> layout mapping
- CalculationResult / LayoutMetrics: Success or failure of a calculation
- LayoutParameters: Typed schemas for extra fields

Layouts:
- Striping: RAID 0
- Mirroring: RAID 1, 1E, 10
- Parity: RAID 5, 5E, 5EE, 6
- Nested parity: RAID 50, 60
- ZFS: RAID-Z1, Z2, Z3
"""

from .base import BaseLayout, DiskRule, read_speed
from .catalog import CatalogError, LayoutInfo, RaidCatalog
from .mirrored import Raid1ELayout, Raid1Layout, Raid10Layout
from .nested import NestedParityLayout, Raid50Layout, Raid60Layout
from .options import LayoutOptions
from .parameters import (
    LayoutParameters,
    ParameterError,
    Raid50Parameters,
    Raid60Parameters,
    RaidZ1Parameters,
    RaidZ2Parameters,
    RaidZ3Parameters,
    parse_parameters,
)
from .parity import ParityLayout, Raid5ELayout, Raid5EELayout, Raid5Layout, Raid6Layout
from .protocol import Layout
from .raidz import RaidZ1Layout, RaidZ2Layout, RaidZ3Layout, RaidZLayout
from .registry import LayoutRegistry, layout_registry
from .results import CalculationResult, LayoutMetrics
from .striped import Raid0Layout

__all__ = [
    # Core
    "BaseLayout",
    "CalculationResult",
    "CatalogError",
    "DiskRule",
    "Layout",
    "LayoutInfo",
    "LayoutMetrics",
    "LayoutOptions",
    "LayoutRegistry",
    "RaidCatalog",
    "layout_registry",
    "read_speed",
    # Parameters
    "LayoutParameters",
    "ParameterError",
    "Raid50Parameters",
    "Raid60Parameters",
    "RaidZ1Parameters",
    "RaidZ2Parameters",
    "RaidZ3Parameters",
    "parse_parameters",
    # Layouts
    "NestedParityLayout",
    "ParityLayout",
    "Raid0Layout",
    "Raid1Layout",
    "Raid1ELayout",
    "Raid5Layout",
    "Raid5ELayout",
    "Raid5EELayout",
    "Raid6Layout",
    "Raid10Layout",
    "Raid50Layout",
    "Raid60Layout",
    "RaidZLayout",
    "RaidZ1Layout",
    "RaidZ2Layout",
    "RaidZ3Layout",
]
