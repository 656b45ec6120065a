"""RAID calculator facade.

Entry point for callers such as a storage-sizing UI: list the available
layouts and run a calculation for one of them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from raidcalc.application.config import CalculatorSettings
from raidcalc.domain.layouts import (
    CalculationResult,
    Layout,
    LayoutInfo,
    RaidCatalog,
)
from raidcalc.domain.value_objects import RaidLevel

logger = logging.getLogger(__name__)


class RaidCalculator:
    """Dispatches calculations to the layouts in a RaidCatalog.

    The calculator holds no mutable state after construction and can be
    shared between threads.

    Example:
        calculator = RaidCalculator()
        result = calculator.calculate("50", 6, 1000, {"parityRaidCount": "2"})
        if result.success:
            print(result.metrics.capacity)  # 4000
        else:
            print(result.error)
    """

    def __init__(self, settings: CalculatorSettings | None = None) -> None:
        """Build the catalog for the given settings.

        Args:
            settings: Behaviour flags. Defaults to CalculatorSettings().
        """
        self.settings = settings or CalculatorSettings()
        self.catalog = RaidCatalog(self.settings.to_options())

    def list_layouts(self) -> list[LayoutInfo]:
        """Return a summary of every layout for a selection list."""
        return self.catalog.describe()

    def get_definition(self, level: RaidLevel | str) -> Layout:
        """Return the layout for a RAID level.

        Args:
            level: A RaidLevel or its string value (e.g. "5EE").

        Raises:
            ValueError: If ``level`` is not a known RAID level.
        """
        return self.catalog.get(RaidLevel(level))

    def calculate(
        self,
        level: RaidLevel | str,
        disks: int,
        capacity_per_disk: float,
        fields: Mapping[str, str] | None = None,
    ) -> CalculationResult:
        """Compute capacity, speed and fault tolerance for a layout.

        Invalid user input produces a failed result rather than an
        exception. Only an unknown ``level`` raises.

        Args:
            level: A RaidLevel or its string value.
            disks: Number of physical disks.
            capacity_per_disk: Capacity of one disk, any unit.
            fields: Extra fields keyed by wire name, as listed in
                ``LayoutInfo.additional_fields``.

        Returns:
            CalculationResult with metrics or an error message.

        Raises:
            ValueError: If ``level`` is not a known RAID level.
        """
        layout = self.get_definition(level)
        logger.debug(
            f"Calculating {layout.label}: disks={disks}, "
            f"capacity_per_disk={capacity_per_disk}, fields={dict(fields or {})}"
        )
        return layout.calculate(disks, capacity_per_disk, fields)


# Default calculator instance
_default_calculator: RaidCalculator | None = None


def get_calculator() -> RaidCalculator:
    """Get the default calculator, building it on first use."""
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = RaidCalculator()
    return _default_calculator


def set_calculator(calculator: RaidCalculator | None) -> None:
    """Set a custom default calculator (e.g. with non-default settings)."""
    global _default_calculator
    _default_calculator = calculator


def reset_calculator() -> None:
    """Reset the default calculator (for testing cleanup)."""
    global _default_calculator
    _default_calculator = None


def list_layouts() -> list[LayoutInfo]:
    """List layouts using the default calculator."""
    return get_calculator().list_layouts()


def calculate(
    level: RaidLevel | str,
    disks: int,
    capacity_per_disk: float,
    fields: Mapping[str, str] | None = None,
) -> CalculationResult:
    """Run a calculation using the default calculator."""
    return get_calculator().calculate(level, disks, capacity_per_disk, fields)
