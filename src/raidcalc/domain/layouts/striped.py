"""Striping without redundancy (RAID 0)."""

from __future__ import annotations

from ..value_objects import RaidLevel
from .base import BaseLayout
from .parameters import LayoutParameters
from .registry import layout_registry


@layout_registry.register(RaidLevel.RAID0)
class Raid0Layout(BaseLayout):
    """Every disk holds data; a single failure loses the array."""

    label = "RAID 0"
    min_disks = 0
    extra_details = "No fault tolerance. Data is striped across all disks."

    def data_disks(self, disks: int, params: LayoutParameters | None) -> int:
        return disks

    def fault_tolerance(self, disks: int, params: LayoutParameters | None) -> int:
        return 0

    def speed(self, disks: int, params: LayoutParameters | None) -> str:
        return f"{disks}x read and write speed gain"
