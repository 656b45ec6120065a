"""Nested parity layouts: RAID 50 and RAID 60.

Disks are split into ``parityRaidCount`` equal groups, each group being a
RAID 5 (or RAID 6) array, and the groups are striped together. Group size is
always ``disks // groups``. Under ``GroupDivisionPolicy.FLOOR`` leftover
disks are simply not counted; under ``REJECT`` they are an error.
"""

from __future__ import annotations

from typing import ClassVar, cast

from ..value_objects import FailureKind, GroupDivisionPolicy, RaidLevel
from .base import BaseLayout, read_speed
from .parameters import LayoutParameters, Raid50Parameters, Raid60Parameters
from .registry import layout_registry
from .results import CalculationResult


class NestedParityLayout(BaseLayout):
    """Stripe of equally sized parity groups.

    Class attributes:
        member_label: Display name of one group, e.g. "RAID 5".
        group_parity: Parity disks per group.
        min_group_size: Smallest allowed group.
    """

    member_label: ClassVar[str]
    group_parity: ClassVar[int]
    min_group_size: ClassVar[int]

    @staticmethod
    def group_count(params: LayoutParameters | None) -> int:
        return cast(Raid50Parameters, params).parity_raid_count

    def group_size(self, disks: int, params: LayoutParameters | None) -> int:
        return disks // self.group_count(params)

    def check(
        self, disks: int, params: LayoutParameters | None
    ) -> CalculationResult | None:
        groups = self.group_count(params)
        if (
            self.options.group_division is GroupDivisionPolicy.REJECT
            and disks % groups != 0
        ):
            return CalculationResult.fail(
                f"Disks must divide evenly across {self.member_label} groups.",
                FailureKind.PARITY_CONSTRAINT,
            )
        if self.group_size(disks, params) < self.min_group_size:
            return CalculationResult.fail(
                f"Each {self.member_label} group must have at least "
                f"{self.min_group_size} disks.",
                FailureKind.GROUP_SIZE,
            )
        return None

    def data_disks(self, disks: int, params: LayoutParameters | None) -> int:
        group_data = self.group_size(disks, params) - self.group_parity
        return self.group_count(params) * group_data

    def fault_tolerance(self, disks: int, params: LayoutParameters | None) -> int:
        return self.group_count(params) * self.group_parity

    def speed(self, disks: int, params: LayoutParameters | None) -> str:
        return read_speed(self.group_size(disks, params) - self.group_parity)


@layout_registry.register(RaidLevel.RAID50)
class Raid50Layout(NestedParityLayout):
    label = "RAID 50"
    min_disks = 6
    parameters = Raid50Parameters
    member_label = "RAID 5"
    group_parity = 1
    min_group_size = 3
    extra_details = "Nested RAID with multiple RAID 5 groups."


@layout_registry.register(RaidLevel.RAID60)
class Raid60Layout(NestedParityLayout):
    label = "RAID 60"
    min_disks = 8
    parameters = Raid60Parameters
    member_label = "RAID 6"
    group_parity = 2
    min_group_size = 4
    extra_details = "Nested RAID with multiple RAID 6 groups."
