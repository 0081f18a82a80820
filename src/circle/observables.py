"""Read-only measurements over a switch circle.

These look at the whole ring at once, which no strategy may do. They are
used by the harness for reporting and by tests to check final layouts.
"""

from src.circle.circle import SwitchCircle
from src.circle.types import SwitchState


def count_on(circle: SwitchCircle) -> int:
    """Number of switches currently ON."""
    return sum(1 for state in circle.states() if state is SwitchState.ON)


def count_off(circle: SwitchCircle) -> int:
    """Number of switches currently OFF."""
    return len(circle) - count_on(circle)


def on_density(circle: SwitchCircle) -> float:
    """Fraction of switches that are ON (0.0 to 1.0)."""
    return count_on(circle) / len(circle)


def render_states(circle: SwitchCircle) -> str:
    """Glyph string of the ring walked right from the start, e.g. '↑↓↓↑'."""
    return "".join(state.value for state in circle.states())
