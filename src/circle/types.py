"""Type definitions for the switch circle."""

from dataclasses import dataclass
from enum import Enum

from src.circle.validation import validate_size


class SwitchState(str, Enum):
    """Position of a single switch.

    The values are the glyphs used when a circle is printed:
    ↑ = switch is ON
    ↓ = switch is OFF
    """

    ON = "↑"
    OFF = "↓"

    def flipped(self) -> "SwitchState":
        return SwitchState.OFF if self is SwitchState.ON else SwitchState.ON


@dataclass
class SwitchCell:
    """One switch in the ring arena.

    Attributes:
        state: Current switch position
        left: Arena index of the left neighbour
        right: Arena index of the right neighbour
    """

    state: SwitchState
    left: int
    right: int


@dataclass(frozen=True)
class CircleConfig:
    """Construction parameters for a random circle.

    Attributes:
        size: Number of switches in the ring (N)
        on_probability: Chance that any one switch starts ON
    """

    size: int
    on_probability: float = 0.5

    def __post_init__(self) -> None:
        validate_size(self.size)
        if not 0.0 <= self.on_probability <= 1.0:
            raise ValueError(
                f"on_probability must be within [0, 1], got {self.on_probability}"
            )
