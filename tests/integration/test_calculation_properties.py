"""Cross-layout properties of the RAID calculator.

These tests run every layout through the public facade and check the
behaviour all layouts share: below-minimum input fails cleanly, results are
deterministic, and capacity grows with per-disk capacity.
"""

from __future__ import annotations

import pytest

from raidcalc.application import RaidCalculator
from raidcalc.domain.value_objects import FailureKind, RaidLevel

# (level, minimum disks, extra fields) for layouts driven by disk count
DISK_MINIMUMS = [
    (RaidLevel.RAID0, 0, None),
    (RaidLevel.RAID1, 2, None),
    (RaidLevel.RAID1E, 3, None),
    (RaidLevel.RAID5, 3, None),
    (RaidLevel.RAID50, 6, {"parityRaidCount": "1"}),
    (RaidLevel.RAID5E, 4, None),
    (RaidLevel.RAID5EE, 5, None),
    (RaidLevel.RAID10, 4, None),
    (RaidLevel.RAID6, 4, None),
    (RaidLevel.RAID60, 8, {"parityRaidCount": "2"}),
]

# (level, minimum drives per group) for RAID-Z
RAIDZ_MINIMUMS = [
    (RaidLevel.RAIDZ1, 2),
    (RaidLevel.RAIDZ2, 3),
    (RaidLevel.RAIDZ3, 4),
]

# One valid input per layout
VALID_INPUTS = [
    (RaidLevel.RAID0, 4, None),
    (RaidLevel.RAID1, 2, None),
    (RaidLevel.RAID1E, 5, None),
    (RaidLevel.RAID5, 5, None),
    (RaidLevel.RAID50, 6, {"parityRaidCount": "2"}),
    (RaidLevel.RAID5E, 4, None),
    (RaidLevel.RAID5EE, 5, None),
    (RaidLevel.RAID10, 4, None),
    (RaidLevel.RAID6, 4, None),
    (RaidLevel.RAID60, 8, {"parityRaidCount": "2"}),
    (RaidLevel.RAIDZ1, 0, {"numOfDriveGroups": "2", "numDrivesPerGroup": "3"}),
    (RaidLevel.RAIDZ2, 0, {"numOfDriveGroups": "2", "numDrivesPerGroup": "4"}),
    (RaidLevel.RAIDZ3, 0, {"numOfDriveGroups": "2", "numDrivesPerGroup": "5"}),
]


class TestBelowMinimum:
    """Every disk count below a layout's minimum fails without raising."""

    @pytest.mark.parametrize(("level", "minimum", "fields"), DISK_MINIMUMS)
    def test_disk_counts_below_minimum(
        self,
        calculator: RaidCalculator,
        level: RaidLevel,
        minimum: int,
        fields: dict[str, str] | None,
    ) -> None:
        """All counts from -1 up to minimum - 1 produce a failure."""
        for disks in range(-1, minimum):
            result = calculator.calculate(level, disks, 10, fields)
            assert not result.success, f"RAID {level.value} accepted {disks} disks"
            assert result.error

    @pytest.mark.parametrize(("level", "minimum"), RAIDZ_MINIMUMS)
    def test_drives_below_minimum(
        self, calculator: RaidCalculator, level: RaidLevel, minimum: int
    ) -> None:
        """All drives-per-group values below the minimum produce a failure."""
        for drives in range(-1, minimum):
            result = calculator.calculate(
                level,
                0,
                10,
                {"numOfDriveGroups": "1", "numDrivesPerGroup": str(drives)},
            )
            assert not result.success
            assert result.error == f"Drives per group must be at least {minimum}."
            assert result.kind is FailureKind.GROUP_SIZE


class TestDeterminism:
    """Calculations are pure functions of their input."""

    @pytest.mark.parametrize(("level", "disks", "fields"), VALID_INPUTS)
    def test_repeated_calls_identical(
        self,
        calculator: RaidCalculator,
        level: RaidLevel,
        disks: int,
        fields: dict[str, str] | None,
    ) -> None:
        """Two calls with the same input give equal results."""
        first = calculator.calculate(level, disks, 10, fields)
        second = calculator.calculate(level, disks, 10, fields)

        assert first.success
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_independent_calculators_agree(self) -> None:
        """Separately built calculators give the same answers."""
        a, b = RaidCalculator(), RaidCalculator()

        for level, disks, fields in VALID_INPUTS:
            assert a.calculate(level, disks, 3, fields) == b.calculate(
                level, disks, 3, fields
            )

    def test_fields_not_mutated(self, calculator: RaidCalculator) -> None:
        """The caller's field mapping is left untouched."""
        fields = {"numOfDriveGroups": "", "numDrivesPerGroup": "3"}

        calculator.calculate(RaidLevel.RAIDZ1, 0, 10, fields)

        assert fields == {"numOfDriveGroups": "", "numDrivesPerGroup": "3"}


class TestMonotonicity:
    """Capacity never shrinks as per-disk capacity grows."""

    @pytest.mark.parametrize(("level", "disks", "fields"), VALID_INPUTS)
    def test_capacity_non_decreasing(
        self,
        calculator: RaidCalculator,
        level: RaidLevel,
        disks: int,
        fields: dict[str, str] | None,
    ) -> None:
        """Capacity is non-decreasing in capacity_per_disk."""
        capacities = [
            calculator.calculate(level, disks, per_disk, fields).metrics.capacity
            for per_disk in (0, 1, 2.5, 10, 1000, 16_000_000)
        ]

        assert capacities == sorted(capacities)

    @pytest.mark.parametrize(("level", "disks", "fields"), VALID_INPUTS)
    def test_capacity_is_proportional(
        self,
        calculator: RaidCalculator,
        level: RaidLevel,
        disks: int,
        fields: dict[str, str] | None,
    ) -> None:
        """Capacity is a whole number of disks times the per-disk capacity."""
        unit = calculator.calculate(level, disks, 1, fields).metrics.capacity
        scaled = calculator.calculate(level, disks, 500, fields).metrics.capacity

        assert scaled == unit * 500
        assert unit == int(unit)


class TestWireFormat:
    """Results serialize to the shape a UI consumes."""

    def test_success_round_trip_keys(self, calculator: RaidCalculator) -> None:
        """A RAID 5 result carries all four data keys."""
        data = calculator.calculate("5", 5, 10).to_dict()

        assert data["success"] is True
        assert set(data["data"]) == {
            "capacity",
            "speed",
            "faultTolerance",
            "extraDetails",
        }

    def test_failure_keys(self, calculator: RaidCalculator) -> None:
        """A failure carries only success and error."""
        data = calculator.calculate("10", 5, 10).to_dict()

        assert data == {
            "success": False,
            "error": "RAID 10 requires an even number of disks.",
        }
