"""The RAID catalog: one layout instance per RaidLevel."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..value_objects import RaidLevel

# Importing the layout modules registers their classes.
from . import mirrored, nested, parity, raidz, striped  # noqa: F401
from .base import BaseLayout
from .options import LayoutOptions
from .protocol import Layout
from .registry import LayoutRegistry, layout_registry

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    """Raised when the catalog cannot cover every RaidLevel."""


@dataclass(frozen=True)
class LayoutInfo:
    """Summary of one layout for populating a selection list.

    Attributes:
        level: RAID level identifier.
        label: Display name.
        additional_fields: Wire field name -> description of extra inputs.
        hidden_fields: Standard inputs the UI should hide.
    """

    level: RaidLevel
    label: str
    additional_fields: dict[str, str] = field(default_factory=dict)
    hidden_fields: frozenset[str] = frozenset()


class RaidCatalog:
    """Read-only mapping from every RaidLevel to its layout.

    All layouts share one LayoutOptions instance. Construction fails if
    any RaidLevel has no registered layout, so an incomplete catalog can
    never be handed out.

    Example:
        catalog = RaidCatalog()
        result = catalog.get(RaidLevel.RAID5).calculate(5, 10)
        assert result.metrics.capacity == 40
    """

    def __init__(
        self,
        options: LayoutOptions | None = None,
        registry: LayoutRegistry | None = None,
    ) -> None:
        """Instantiate every registered layout.

        Args:
            options: Behaviour options passed to each layout.
            registry: Registry to read layout classes from. Defaults to the
                module-level ``layout_registry``.

        Raises:
            CatalogError: If any RaidLevel has no registered layout.
        """
        registry = registry if registry is not None else layout_registry
        missing = registry.missing()
        if missing:
            names = ", ".join(level.value for level in missing)
            raise CatalogError(f"No layout registered for RAID level(s): {names}")

        self.options = options or LayoutOptions()
        self._layouts: Mapping[RaidLevel, BaseLayout] = MappingProxyType(
            {level: registry.get(level)(self.options) for level in RaidLevel}
        )
        logger.debug(
            f"Built RAID catalog with {len(self._layouts)} layouts ({self.options})"
        )

    def get(self, level: RaidLevel) -> Layout:
        """Return the layout for ``level``.

        Raises:
            KeyError: If ``level`` is not a RaidLevel member.
        """
        return self._layouts[level]

    def describe(self) -> list[LayoutInfo]:
        """Summaries of all layouts, in RaidLevel declaration order."""
        return [
            LayoutInfo(
                level=level,
                label=layout.label,
                additional_fields=layout.additional_fields,
                hidden_fields=layout.hidden_fields,
            )
            for level, layout in self._layouts.items()
        ]

    def __getitem__(self, level: RaidLevel) -> BaseLayout:
        return self._layouts[level]

    def __iter__(self) -> Iterator[RaidLevel]:
        return iter(self._layouts)

    def __len__(self) -> int:
        return len(self._layouts)
