"""Result types for layout calculations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..value_objects import FailureKind


@dataclass(frozen=True)
class LayoutMetrics:
    """Derived metrics for a valid RAID layout.

    Attributes:
        capacity: Usable capacity, in the same unit as the per-disk capacity.
        speed: Relative speed summary (a description, not a measured rate).
        fault_tolerance: Number of whole-disk failures the layout survives.
        extra_details: Optional explanatory sentence for display.
    """

    capacity: float
    speed: str
    fault_tolerance: int
    extra_details: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase keys the UI expects."""
        data: dict[str, Any] = {
            "capacity": self.capacity,
            "speed": self.speed,
            "faultTolerance": self.fault_tolerance,
        }
        if self.extra_details is not None:
            data["extraDetails"] = self.extra_details
        return data


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a single layout calculation.

    Exactly one of ``metrics`` (success) or ``error`` (failure) is set.
    Failures also carry a ``kind`` so callers can branch on the category
    without parsing the message.

    Attributes:
        metrics: Computed metrics when the calculation succeeded.
        error: Human-readable reason when the calculation failed.
        kind: Category of the failure, None on success.
    """

    metrics: LayoutMetrics | None = None
    error: str | None = None
    kind: FailureKind | None = None

    def __post_init__(self) -> None:
        if (self.metrics is None) == (self.error is None):
            raise ValueError("CalculationResult needs exactly one of metrics or error")
        if self.error is not None and self.kind is None:
            raise ValueError("Failed CalculationResult must have a failure kind")
        if self.metrics is not None and self.kind is not None:
            raise ValueError("Successful CalculationResult cannot have a failure kind")

    @property
    def success(self) -> bool:
        """True when the layout is valid for the given input."""
        return self.metrics is not None

    @classmethod
    def ok(
        cls,
        capacity: float,
        speed: str,
        fault_tolerance: int,
        extra_details: str | None = None,
    ) -> CalculationResult:
        """Create a successful result.

        Args:
            capacity: Usable capacity.
            speed: Relative speed summary.
            fault_tolerance: Whole-disk failures tolerated.
            extra_details: Optional explanatory sentence.

        Returns:
            A CalculationResult carrying LayoutMetrics.
        """
        return cls(
            metrics=LayoutMetrics(
                capacity=capacity,
                speed=speed,
                fault_tolerance=fault_tolerance,
                extra_details=extra_details,
            )
        )

    @classmethod
    def fail(cls, error: str, kind: FailureKind) -> CalculationResult:
        """Create a failed result.

        Args:
            error: Human-readable message naming the violated constraint.
            kind: Failure category.

        Returns:
            A CalculationResult carrying the error.
        """
        return cls(error=error, kind=kind)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the success/data or success/error wire shape."""
        if self.metrics is not None:
            return {"success": True, "data": self.metrics.to_dict()}
        return {"success": False, "error": self.error}
