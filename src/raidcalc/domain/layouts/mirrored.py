"""Mirrored layouts: RAID 1, RAID 1E and RAID 10."""

from __future__ import annotations

from collections.abc import Sequence

from ..value_objects import RaidLevel
from .base import BaseLayout, DiskRule, read_speed
from .parameters import LayoutParameters
from .registry import layout_registry


def _is_odd(disks: int) -> bool:
    return disks % 2 == 1


def _is_even(disks: int) -> bool:
    return disks % 2 == 0


@layout_registry.register(RaidLevel.RAID1)
class Raid1Layout(BaseLayout):
    """Every disk is a full copy, so capacity does not scale with disk count."""

    label = "RAID 1"
    min_disks = 2
    extra_details = (
        "Data is mirrored across all disks. "
        "Fault tolerance equals the number of mirrored copies."
    )

    def data_disks(self, disks: int, params: LayoutParameters | None) -> int:
        return 1

    def fault_tolerance(self, disks: int, params: LayoutParameters | None) -> int:
        return disks - 1

    def speed(self, disks: int, params: LayoutParameters | None) -> str:
        return read_speed(disks)


@layout_registry.register(RaidLevel.RAID1E)
class Raid1ELayout(BaseLayout):
    """Striped mirroring across an odd number of disks.

    The odd-count rule is only enforced when
    ``LayoutOptions.raid1e_requires_odd`` is set.
    """

    label = "RAID 1E"
    min_disks = 3
    extra_details = (
        "Data is mirrored and striped. "
        "Fault tolerance depends on the mirroring structure."
    )

    def disk_rules(self) -> Sequence[DiskRule]:
        if not self.options.raid1e_requires_odd:
            return ()
        return (DiskRule(_is_odd, "RAID 1E requires an odd number of drives."),)

    def data_disks(self, disks: int, params: LayoutParameters | None) -> int:
        return disks // 2

    def fault_tolerance(self, disks: int, params: LayoutParameters | None) -> int:
        return disks // 2

    def speed(self, disks: int, params: LayoutParameters | None) -> str:
        return read_speed(disks)


@layout_registry.register(RaidLevel.RAID10)
class Raid10Layout(BaseLayout):
    """Stripe of mirrored pairs."""

    label = "RAID 10"
    min_disks = 4
    extra_details = (
        "Data is mirrored and striped. "
        "Fault tolerance is based on the mirroring setup."
    )

    def disk_rules(self) -> Sequence[DiskRule]:
        return (DiskRule(_is_even, "RAID 10 requires an even number of disks."),)

    def data_disks(self, disks: int, params: LayoutParameters | None) -> int:
        return disks // 2

    def fault_tolerance(self, disks: int, params: LayoutParameters | None) -> int:
        return disks // 2

    def speed(self, disks: int, params: LayoutParameters | None) -> str:
        return read_speed(disks // 2)
