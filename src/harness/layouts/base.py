"""Base class and registry for initial layout generators."""

import random
from abc import ABC, abstractmethod
from typing import Any, Type

from src.circle.circle import SwitchCircle
from src.circle.types import SwitchState
from src.circle.validation import validate_size


class LayoutGenerator(ABC):
    """Abstract base class for initial switch layouts.

    A layout generator decides how the switches of a fresh circle start
    out. The circle itself is always built the same way from the layout.
    """

    @abstractmethod
    def family_name(self) -> str:
        """Return the layout family name."""
        pass

    @abstractmethod
    def generate(self, size: int, rng: random.Random, params: dict[str, Any]) -> list[SwitchState]:
        """Produce the initial switch states.

        Args:
            size: Number of switches
            rng: Random source (ignored by deterministic layouts)
            params: Layout-specific parameters

        Returns:
            Exactly `size` states in ring order
        """
        pass

    def build(
        self,
        size: int,
        seed: int | None = None,
        params: dict[str, Any] | None = None,
    ) -> SwitchCircle:
        """Build a circle with this layout."""
        validate_size(size)
        states = self.generate(size, random.Random(seed), params or {})
        return SwitchCircle.from_states(states)


class LayoutRegistry:
    """Registry of available layout generators."""

    _layouts: dict[str, Type[LayoutGenerator]] = {}

    @classmethod
    def register(cls, name: str, layout_class: Type[LayoutGenerator]) -> None:
        """Register a layout generator class."""
        cls._layouts[name] = layout_class

    @classmethod
    def create(cls, name: str) -> LayoutGenerator | None:
        """Create a layout generator instance by name."""
        layout_class = cls._layouts.get(name)
        if layout_class is None:
            return None
        return layout_class()

    @classmethod
    def list_available(cls) -> list[str]:
        """List all available layout names."""
        return list(cls._layouts.keys())
