"""Value objects for the RAID calculation domain."""

from __future__ import annotations

from enum import Enum


class RaidLevel(str, Enum):
    """Closed set of RAID layouts the calculator knows about.

    Values are the short identifiers used on the wire (e.g. "50", "Z2").
    Member order is the order layouts are presented in a selection list.
    """

    RAID0 = "0"
    RAID1 = "1"
    RAID1E = "1E"
    RAID5 = "5"
    RAID50 = "50"
    RAID5E = "5E"
    RAID5EE = "5EE"
    RAID10 = "10"
    RAID6 = "6"
    RAID60 = "60"
    RAIDZ1 = "Z1"
    RAIDZ2 = "Z2"
    RAIDZ3 = "Z3"


class FailureKind(str, Enum):
    """Category of an expected, input-driven calculation failure.

    Attributes:
        INSUFFICIENT_DISKS: Disk count below the layout minimum (or negative).
        PARITY_CONSTRAINT: Disk count fails an odd/even/divisibility rule.
        INVALID_FIELD: A required extra field is missing, blank, not an
            integer, or below its allowed minimum.
        GROUP_SIZE: A derived group size is below the per-group minimum.
        INVALID_CAPACITY: Per-disk capacity is negative.
    """

    INSUFFICIENT_DISKS = "insufficient_disks"
    PARITY_CONSTRAINT = "parity_constraint"
    INVALID_FIELD = "invalid_field"
    GROUP_SIZE = "group_size"
    INVALID_CAPACITY = "invalid_capacity"


class GroupDivisionPolicy(str, Enum):
    """How nested layouts treat disks that do not divide evenly into groups.

    - REJECT: fail the calculation when disks % groups != 0
    - FLOOR: floor the group size; remainder disks are left uncredited
    """

    REJECT = "reject"
    FLOOR = "floor"
