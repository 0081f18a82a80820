"""The agent's view of a switch circle.

A cursor is the only handle a strategy receives. It can read and flip the
switch under it and walk left or right; it has no way to reach the ring's
adjacency. Movement is the only thing that costs steps.
"""

from src.circle.circle import SwitchCircle
from src.circle.types import SwitchState
from src.circle.validation import validate_step_count


class CircleCursor:
    """A movable position on a circle plus a running step count."""

    def __init__(self, circle: SwitchCircle):
        self._circle = circle
        self._position = circle.start
        self._steps = 0

    @property
    def steps(self) -> int:
        """Total steps walked so far. Never decreases."""
        return self._steps

    @property
    def position(self) -> int:
        return self._position

    def read(self) -> SwitchState:
        return self._circle.cell(self._position).state

    def toggle(self) -> None:
        """Flip the switch under the cursor. Free."""
        cell = self._circle.cell(self._position)
        cell.state = cell.state.flipped()

    def step_right(self, k: int = 1) -> None:
        """Walk k switches to the right, wrapping around the ring."""
        validate_step_count(k)
        for _ in range(k):
            self._position = self._circle.cell(self._position).right
        self._steps += k

    def step_left(self, k: int = 1) -> None:
        """Walk k switches to the left, wrapping around the ring."""
        validate_step_count(k)
        for _ in range(k):
            self._position = self._circle.cell(self._position).left
        self._steps += k

    # Convenience wrappers; reading and toggling cost nothing.

    def is_on(self) -> bool:
        return self.read() is SwitchState.ON

    def is_off(self) -> bool:
        return self.read() is SwitchState.OFF

    def turn_on(self) -> None:
        if self.is_off():
            self.toggle()

    def turn_off(self) -> None:
        if self.is_on():
            self.toggle()
