"""ZFS RAID-Z layouts.

A RAID-Z pool is described by its vdev groups rather than a raw disk count:
``numOfDriveGroups`` groups of ``numDrivesPerGroup`` drives each. The disk
count input is ignored and flagged as hidden for the UI.
"""

from __future__ import annotations

from typing import ClassVar, cast

from ..value_objects import RaidLevel
from .base import BaseLayout
from .parameters import (
    LayoutParameters,
    RaidZ1Parameters,
    RaidZ2Parameters,
    RaidZ3Parameters,
)
from .registry import layout_registry


class RaidZLayout(BaseLayout):
    """RAID-Z with ``parity`` parity drives per group."""

    min_disks = None
    hidden = frozenset({"disks"})
    parity: ClassVar[int]

    def data_disks(self, disks: int, params: LayoutParameters | None) -> int:
        p = cast(RaidZ1Parameters, params)
        return (p.drives_per_group - self.parity) * p.group_count

    def fault_tolerance(self, disks: int, params: LayoutParameters | None) -> int:
        return self.parity

    def speed(self, disks: int, params: LayoutParameters | None) -> str:
        return f"{cast(RaidZ1Parameters, params).group_count}x read/write"


@layout_registry.register(RaidLevel.RAIDZ1)
class RaidZ1Layout(RaidZLayout):
    label = "RAIDz1 (Single parity)"
    parameters = RaidZ1Parameters
    parity = 1


@layout_registry.register(RaidLevel.RAIDZ2)
class RaidZ2Layout(RaidZLayout):
    label = "RAIDz2 (Double parity)"
    parameters = RaidZ2Parameters
    parity = 2


@layout_registry.register(RaidLevel.RAIDZ3)
class RaidZ3Layout(RaidZLayout):
    label = "RAIDz3 (Triple parity)"
    parameters = RaidZ3Parameters
    parity = 3
