"""Calculator settings schema.

Settings select between the two historical validation behaviours of the
calculator. They are plain data supplied by the embedding application
(for example parsed from its own configuration); the calculator reads no
files or environment variables itself.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from raidcalc.domain.layouts import LayoutOptions
from raidcalc.domain.value_objects import GroupDivisionPolicy


class SettingsError(Exception):
    """Exception raised when calculator settings fail validation.

    Attributes:
        message: Human-readable summary of every problem found.
        details: One dict per problem with path, message and value.
    """

    def __init__(
        self, message: str, details: list[dict[str, Any]] | None = None
    ) -> None:
        self.message = message
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class CalculatorSettings(BaseModel):
    """Behaviour flags for a RaidCalculator.

    Attributes:
        group_division: RAID 50/60 handling of disks that do not divide
            evenly into groups ("reject" or "floor").
        raid1e_requires_odd: Reject an even disk count for RAID 1E.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    group_division: GroupDivisionPolicy = Field(
        default=GroupDivisionPolicy.REJECT,
        description="How RAID 50/60 treat disks left over after grouping",
    )
    raid1e_requires_odd: bool = Field(
        default=True,
        description="Require an odd number of disks for RAID 1E",
    )

    def to_options(self) -> LayoutOptions:
        """Convert to the domain LayoutOptions."""
        return LayoutOptions(
            group_division=self.group_division,
            raid1e_requires_odd=self.raid1e_requires_odd,
        )


def load_settings(data: dict[str, Any] | None) -> CalculatorSettings:
    """Validate a settings mapping.

    Args:
        data: Raw settings, e.g. ``{"group_division": "floor"}``. None or an
            empty mapping gives the defaults.

    Returns:
        A validated CalculatorSettings instance.

    Raises:
        SettingsError: If a key is unknown or a value has the wrong type.
    """
    try:
        return CalculatorSettings.model_validate(data or {})
    except PydanticValidationError as e:
        details = [
            {
                "path": ".".join(str(part) for part in err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
            }
            for err in e.errors()
        ]
        lines = ["Calculator settings validation failed:"]
        lines.extend(f"  - {d['path']}: {d['message']}" for d in details)
        raise SettingsError("\n".join(lines), details=details) from e
