"""Protocol definition for RAID layouts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from ..value_objects import RaidLevel
from .results import CalculationResult


@runtime_checkable
class Layout(Protocol):
    """Protocol for RAID layout definitions.

    A layout knows its display label, which extra fields it needs beyond
    disk count and per-disk capacity, and how to turn those inputs into
    capacity, speed and fault tolerance.

    Attributes:
        level: The RaidLevel this layout implements.
        label: Human-readable name, e.g. "RAID 50".
        additional_fields: Wire field name -> description for every extra
            field ``calculate`` requires. Empty when none are needed.
        hidden_fields: Standard inputs a UI should hide for this layout.

    Example:
        @layout_registry.register(RaidLevel.RAID5)
        class Raid5Layout(BaseLayout):
            label = "RAID 5"
            min_disks = 3
            ...
    """

    level: RaidLevel
    label: str

    @property
    def additional_fields(self) -> Mapping[str, str]:
        """Return the extra fields this layout requires."""
        ...

    @property
    def hidden_fields(self) -> frozenset[str]:
        """Return the standard inputs that are not meaningful here."""
        ...

    def calculate(
        self,
        disks: int,
        capacity_per_disk: float,
        fields: Mapping[str, str] | None = None,
    ) -> CalculationResult:
        """Validate the input and compute the layout metrics.

        Never raises for invalid user input; returns a failed result instead.

        Args:
            disks: Number of physical disks.
            capacity_per_disk: Capacity of one disk, any unit.
            fields: Extra fields keyed by wire name.

        Returns:
            CalculationResult with metrics or an error message.
        """
        ...
