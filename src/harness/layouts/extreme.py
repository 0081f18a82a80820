"""Deterministic edge-case layouts.

Random layouts almost never produce these, but every strategy has to
handle them:
- All switches ON: "↑↑↑↑..."
- All switches OFF: "↓↓↓↓..."
- Alternating, starting ON: "↑↓↑↓..."
"""

import random
from typing import Any

from src.circle.types import SwitchState
from src.harness.layouts.base import LayoutGenerator


class AllOnLayout(LayoutGenerator):
    def family_name(self) -> str:
        return "all_on"

    def generate(self, size: int, rng: random.Random, params: dict[str, Any]) -> list[SwitchState]:
        return [SwitchState.ON] * size


class AllOffLayout(LayoutGenerator):
    def family_name(self) -> str:
        return "all_off"

    def generate(self, size: int, rng: random.Random, params: dict[str, Any]) -> list[SwitchState]:
        return [SwitchState.OFF] * size


class AlternatingLayout(LayoutGenerator):
    """Alternating ON/OFF switches.

    Parameters:
        first: State of the start switch, "on" (default) or "off"
    """

    def family_name(self) -> str:
        return "alternating"

    def generate(self, size: int, rng: random.Random, params: dict[str, Any]) -> list[SwitchState]:
        first = SwitchState.OFF if params.get("first", "on") == "off" else SwitchState.ON
        states = []
        for i in range(size):
            states.append(first if i % 2 == 0 else first.flipped())
        return states
