"""Typed parameter schemas for layouts that need extra fields.

Callers hand extra fields over as a loose ``{name: string}`` mapping (what a
form produces). Each layout that needs extra fields declares a schema here;
the mapping is parsed once, before the layout formula runs, so formulas only
ever see validated integers and a missing field is never treated as zero.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.fields import FieldInfo
from pydantic_core import PydanticCustomError

from ..value_objects import FailureKind

# Pydantic error types that mean "this is not an integer"
_NOT_A_NUMBER_ERRORS = frozenset(
    {"int_parsing", "int_parsing_size", "int_from_float", "int_type"}
)

_PLAIN_INTEGER = re.compile(r"^\s*[+-]?[0-9]+\s*$")

# Field metadata key naming the FailureKind reported when the value is too small
BELOW_MINIMUM_KIND = "below_minimum_kind"


class ParameterError(ValueError):
    """Raised when extra fields fail to parse against a layout schema.

    Attributes:
        message: Human-readable description of the first problem found.
        field: Wire name of the offending field.
        kind: Failure category for the problem.
    """

    def __init__(
        self,
        message: str,
        field: str,
        kind: FailureKind = FailureKind.INVALID_FIELD,
    ) -> None:
        self.message = message
        self.field = field
        self.kind = kind
        super().__init__(message)


class LayoutParameters(BaseModel):
    """Base class for per-layout parameter schemas.

    Fields are declared with their wire name as ``alias``, a short ``title``
    used in error messages and a ``description`` shown next to the input.
    A field whose minimum is a per-group size sets ``BELOW_MINIMUM_KIND`` in
    ``json_schema_extra`` so a too-small value is reported as a group-size
    failure.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def plain_integer_strings(cls, value: Any) -> Any:
        """Accept only optionally signed decimal digits from string input."""
        if isinstance(value, str) and not _PLAIN_INTEGER.match(value):
            raise PydanticCustomError("int_parsing", "Input should be a valid integer")
        if isinstance(value, str):
            return value.strip()
        return value

    @classmethod
    def field_descriptions(cls) -> dict[str, str]:
        """Map each wire field name to its display description."""
        return {
            _wire_name(name, info): info.description or name
            for name, info in cls.model_fields.items()
        }


class Raid50Parameters(LayoutParameters):
    """Extra fields for RAID 50."""

    parity_raid_count: int = Field(
        alias="parityRaidCount",
        title="Parity RAIDs count",
        description="Number of RAID 5 groups",
        ge=1,
    )


class Raid60Parameters(Raid50Parameters):
    """Extra fields for RAID 60."""

    parity_raid_count: int = Field(
        alias="parityRaidCount",
        title="Parity RAIDs count",
        description="Number of RAID 6 groups",
        ge=2,
    )


def _drives_per_group(minimum: int) -> Any:
    return Field(
        alias="numDrivesPerGroup",
        title="Drives per group",
        description="Drives per group",
        ge=minimum,
        json_schema_extra={BELOW_MINIMUM_KIND: FailureKind.GROUP_SIZE.value},
    )


class RaidZ1Parameters(LayoutParameters):
    """Extra fields for single-parity RAID-Z."""

    group_count: int = Field(
        alias="numOfDriveGroups",
        title="Number of groups",
        description="Number of groups",
        ge=1,
    )
    drives_per_group: int = _drives_per_group(2)


class RaidZ2Parameters(RaidZ1Parameters):
    """Extra fields for double-parity RAID-Z."""

    drives_per_group: int = _drives_per_group(3)


class RaidZ3Parameters(RaidZ1Parameters):
    """Extra fields for triple-parity RAID-Z."""

    drives_per_group: int = _drives_per_group(4)


def _wire_name(name: str, info: FieldInfo) -> str:
    return info.alias or name


def _below_minimum_kind(info: FieldInfo | None) -> FailureKind:
    extra = info.json_schema_extra if info is not None else None
    if isinstance(extra, dict) and BELOW_MINIMUM_KIND in extra:
        return FailureKind(extra[BELOW_MINIMUM_KIND])
    return FailureKind.INVALID_FIELD


def _describe_error(schema: type[LayoutParameters], err: Any) -> ParameterError:
    """Turn one pydantic error entry into a ParameterError."""
    loc = err["loc"][0] if err["loc"] else ""
    info = None
    for name, candidate in schema.model_fields.items():
        if loc in (name, candidate.alias):
            info = candidate
            loc = _wire_name(name, candidate)
            break
    title = info.title if info is not None and info.title else str(loc)

    error_type = err["type"]
    kind = FailureKind.INVALID_FIELD
    if error_type == "missing":
        message = f"{title} is required."
    elif error_type in _NOT_A_NUMBER_ERRORS:
        message = f"{title} must be a valid number."
    elif error_type == "greater_than_equal":
        message = f"{title} must be at least {err['ctx']['ge']}."
        kind = _below_minimum_kind(info)
    else:
        message = f"{title}: {err['msg']}"
    return ParameterError(message, field=str(loc), kind=kind)


def parse_parameters(
    schema: type[LayoutParameters], fields: Mapping[str, Any] | None
) -> LayoutParameters:
    """Parse a raw extra-field mapping against a layout schema.

    Blank strings are treated the same as an absent field. String values must
    be plain decimal integers; digit separators such as ``"1_0"`` are
    rejected. When several fields are wrong only the first one, in
    declaration order, is reported.

    Args:
        schema: The layout's parameter schema.
        fields: Raw extra fields keyed by wire name, or None.

    Returns:
        A validated instance of ``schema``.

    Raises:
        ParameterError: If a field is missing, not an integer, or too small.
    """
    cleaned = {
        key: value
        for key, value in (fields or {}).items()
        if not (isinstance(value, str) and not value.strip())
    }
    try:
        return schema.model_validate(cleaned)
    except PydanticValidationError as e:
        raise _describe_error(schema, e.errors()[0]) from e
