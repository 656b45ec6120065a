"""Layout registry mapping each RaidLevel to its layout class."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TypeVar

from ..value_objects import RaidLevel

if TYPE_CHECKING:
    from .base import BaseLayout

logger = logging.getLogger(__name__)

L = TypeVar("L", bound="BaseLayout")


class LayoutRegistry:
    """Singleton registry for layout classes.

    Layout modules register their classes at import time with the
    ``register`` decorator. The RaidCatalog later instantiates every
    registered class and checks that no RaidLevel was left out.

    Example:
        @layout_registry.register(RaidLevel.RAID6)
        class Raid6Layout(BaseLayout):
            ...

        layout_cls = layout_registry.get(RaidLevel.RAID6)
    """

    _instance: LayoutRegistry | None = None
    _layouts: dict[RaidLevel, type[BaseLayout]]

    def __new__(cls) -> LayoutRegistry:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._layouts = {}
        return cls._instance

    def register(self, level: RaidLevel) -> Callable[[type[L]], type[L]]:
        """Decorator to register a layout class for a RAID level.

        Args:
            level: The RaidLevel the decorated class implements.

        Returns:
            A decorator that records the class, sets its ``level`` and
            returns it unchanged otherwise.

        Raises:
            ValueError: If a class is already registered for ``level``.
        """

        def decorator(cls: type[L]) -> type[L]:
            if level in self._layouts:
                raise ValueError(
                    f"Layout for RAID level '{level.value}' already registered "
                    f"({self._layouts[level].__name__})"
                )
            cls.level = level
            self._layouts[level] = cls
            logger.debug(f"Registered layout '{level.value}': {cls.__name__}")
            return cls

        return decorator

    def get(self, level: RaidLevel) -> type[BaseLayout]:
        """Get the layout class registered for a RAID level.

        Raises:
            KeyError: If nothing is registered for ``level``.
        """
        if level not in self._layouts:
            raise KeyError(f"No layout registered for RAID level '{level}'")
        return self._layouts[level]

    def levels(self) -> list[RaidLevel]:
        """Registered levels in RaidLevel declaration order."""
        return [level for level in RaidLevel if level in self._layouts]

    def missing(self) -> list[RaidLevel]:
        """RaidLevel members that have no registered layout."""
        return [level for level in RaidLevel if level not in self._layouts]

    def snapshot(self) -> dict[RaidLevel, type[BaseLayout]]:
        """Return a copy of the current level -> class mapping."""
        return dict(self._layouts)

    def restore(self, layouts: dict[RaidLevel, type[BaseLayout]]) -> None:
        """Replace the registered classes with a previous snapshot.

        Intended for tests that register throwaway layouts.
        """
        self._layouts = dict(layouts)

    def clear(self) -> None:
        """Remove every registration.

        Warning:
            For tests only. Layout modules are not re-imported, so the
            built-in layouts stay gone until ``restore`` is called.
        """
        self._layouts.clear()


layout_registry = LayoutRegistry()
