"""Shared validate-then-compute pipeline for RAID layouts.

Every layout follows the same steps:

1. Reject a non-finite or negative per-disk capacity.
2. Check the raw disk count: not negative, at least ``min_disks``, then any
   layout-specific ``disk_rules`` (odd/even counts).
3. Parse extra fields through the layout's ``parameters`` schema.
4. Check derived constraints (group divisibility, per-group minimums).
5. Compute capacity, speed and fault tolerance from the layout formulas.

Subclasses describe themselves with class attributes and override the small
formula hooks; they do not re-implement the control flow.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Callable, ClassVar

from ..value_objects import FailureKind, RaidLevel
from .options import LayoutOptions
from .parameters import LayoutParameters, ParameterError, parse_parameters
from .results import CalculationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiskRule:
    """A structural precondition on the raw disk count.

    Attributes:
        holds: Predicate that returns True when the disk count is acceptable.
        message: Error reported when the predicate fails.
        kind: Failure category reported with the message.
    """

    holds: Callable[[int], bool]
    message: str
    kind: FailureKind = FailureKind.PARITY_CONSTRAINT


def read_speed(factor: int) -> str:
    """Speed summary for layouts that only accelerate reads."""
    return f"{factor}x read speed, no write speed gain"


class BaseLayout:
    """Base class implementing the shared calculation pipeline.

    Class attributes:
        level: Set by ``layout_registry.register``.
        label: Display name.
        min_disks: Minimum raw disk count, or None for layouts that derive
            their disk count from extra fields.
        parameters: Schema for extra fields, or None if none are needed.
        hidden: Standard inputs a UI should hide.
        extra_details: Explanatory sentence attached to successful results.
    """

    level: ClassVar[RaidLevel]
    label: ClassVar[str]
    min_disks: ClassVar[int | None] = 0
    parameters: ClassVar[type[LayoutParameters] | None] = None
    hidden: ClassVar[frozenset[str]] = frozenset()
    extra_details: ClassVar[str | None] = None

    def __init__(self, options: LayoutOptions | None = None) -> None:
        self.options = options or LayoutOptions()

    @property
    def additional_fields(self) -> dict[str, str]:
        """Wire field name -> description for each required extra field."""
        if self.parameters is None:
            return {}
        return self.parameters.field_descriptions()

    @property
    def hidden_fields(self) -> frozenset[str]:
        """Standard inputs that are not meaningful for this layout."""
        return self.hidden

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self.level.value!r}, label={self.label!r})"

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def disk_rules(self) -> Sequence[DiskRule]:
        """Extra rules on the raw disk count, checked after ``min_disks``."""
        return ()

    def check(
        self, disks: int, params: LayoutParameters | None
    ) -> CalculationResult | None:
        """Check constraints that depend on parsed parameters.

        Returns:
            A failed result, or None when everything holds.
        """
        return None

    def data_disks(self, disks: int, params: LayoutParameters | None) -> int:
        """Number of disks whose capacity is usable for data."""
        raise NotImplementedError

    def fault_tolerance(self, disks: int, params: LayoutParameters | None) -> int:
        """Number of whole-disk failures the layout survives."""
        raise NotImplementedError

    def speed(self, disks: int, params: LayoutParameters | None) -> str:
        """Relative speed summary."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _check_disks(self, disks: int) -> CalculationResult | None:
        if self.min_disks is None:
            return None
        if disks < 0:
            return CalculationResult.fail(
                "Disk count cannot be negative.", FailureKind.INSUFFICIENT_DISKS
            )
        if disks < self.min_disks:
            return CalculationResult.fail(
                f"{self.label} requires at least {self.min_disks} disks.",
                FailureKind.INSUFFICIENT_DISKS,
            )
        for rule in self.disk_rules():
            if not rule.holds(disks):
                return CalculationResult.fail(rule.message, rule.kind)
        return None

    def _validate(
        self,
        disks: int,
        capacity_per_disk: float,
        fields: Mapping[str, str] | None,
    ) -> tuple[LayoutParameters | None, CalculationResult | None]:
        if not math.isfinite(capacity_per_disk):
            return None, CalculationResult.fail(
                "Capacity per disk must be a finite number.",
                FailureKind.INVALID_CAPACITY,
            )
        if capacity_per_disk < 0:
            return None, CalculationResult.fail(
                "Capacity per disk cannot be negative.",
                FailureKind.INVALID_CAPACITY,
            )

        failure = self._check_disks(disks)
        if failure is not None:
            return None, failure

        params = None
        if self.parameters is not None:
            try:
                params = parse_parameters(self.parameters, fields)
            except ParameterError as e:
                return None, CalculationResult.fail(e.message, e.kind)

        return params, self.check(disks, params)

    def calculate(
        self,
        disks: int,
        capacity_per_disk: float,
        fields: Mapping[str, str] | None = None,
    ) -> CalculationResult:
        """Validate the input and compute the layout metrics.

        Args:
            disks: Number of physical disks.
            capacity_per_disk: Capacity of one disk, any unit.
            fields: Extra fields keyed by wire name.

        Returns:
            CalculationResult with metrics, or with the first violated
            constraint as a human-readable error.
        """
        params, failure = self._validate(disks, capacity_per_disk, fields)
        if failure is not None:
            logger.debug(f"RAID {self.level.value} rejected input: {failure.error}")
            return failure

        return CalculationResult.ok(
            capacity=self.data_disks(disks, params) * capacity_per_disk,
            speed=self.speed(disks, params),
            fault_tolerance=self.fault_tolerance(disks, params),
            extra_details=self.extra_details,
        )
