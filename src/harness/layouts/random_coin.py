"""Random coin-flip layout.

Every switch is set independently. With the default probability this is
the fair-coin layout the puzzle is usually posed with.
"""

import random
from typing import Any

from src.circle.types import SwitchState
from src.harness.layouts.base import LayoutGenerator


class RandomCoinLayout(LayoutGenerator):
    """Independent coin flips per switch.

    Parameters:
        on_probability: Chance of each switch starting ON (default 0.5)
    """

    def family_name(self) -> str:
        return "random_coin"

    def generate(self, size: int, rng: random.Random, params: dict[str, Any]) -> list[SwitchState]:
        p = params.get("on_probability", 0.5)
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"on_probability must be within [0, 1], got {p}")
        return [SwitchState.ON if rng.random() < p else SwitchState.OFF for _ in range(size)]
