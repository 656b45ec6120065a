"""Single-array parity layouts: RAID 5, 5E, 5EE and 6."""

from __future__ import annotations

from typing import ClassVar

from ..value_objects import RaidLevel
from .base import BaseLayout, read_speed
from .parameters import LayoutParameters
from .registry import layout_registry


class ParityLayout(BaseLayout):
    """Layout that gives up ``parity_disks`` disks' worth of capacity.

    Distributed hot spares (5E, 5EE) are modelled the same way: the spare
    capacity is subtracted from the data disks.
    """

    parity_disks: ClassVar[int]

    def data_disks(self, disks: int, params: LayoutParameters | None) -> int:
        return disks - self.parity_disks

    def fault_tolerance(self, disks: int, params: LayoutParameters | None) -> int:
        return self.parity_disks

    def speed(self, disks: int, params: LayoutParameters | None) -> str:
        return read_speed(disks - self.parity_disks)


@layout_registry.register(RaidLevel.RAID5)
class Raid5Layout(ParityLayout):
    label = "RAID 5"
    min_disks = 3
    parity_disks = 1
    extra_details = (
        "Data is striped with a single parity disk. "
        "Fault tolerance is 1 disk failure."
    )


@layout_registry.register(RaidLevel.RAID5E)
class Raid5ELayout(ParityLayout):
    label = "RAID 5E"
    min_disks = 4
    parity_disks = 1
    extra_details = "Includes a hot spare disk for faster recovery."


@layout_registry.register(RaidLevel.RAID5EE)
class Raid5EELayout(ParityLayout):
    label = "RAID 5EE"
    min_disks = 5
    parity_disks = 2
    extra_details = "Includes distributed hot spares for higher availability."


@layout_registry.register(RaidLevel.RAID6)
class Raid6Layout(ParityLayout):
    label = "RAID 6"
    min_disks = 4
    parity_disks = 2
    extra_details = "Data is striped with dual parity, allowing 2 disk failures."
