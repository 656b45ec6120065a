"""Behaviour options shared by every layout in a catalog."""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import GroupDivisionPolicy


@dataclass(frozen=True)
class LayoutOptions:
    """Options that select between the historical validation behaviours.

    Attributes:
        group_division: How RAID 50/60 handle disks that do not divide
            evenly into the requested number of groups.
        raid1e_requires_odd: Whether RAID 1E rejects an even disk count.
    """

    group_division: GroupDivisionPolicy = GroupDivisionPolicy.REJECT
    raid1e_requires_odd: bool = True
