"""The switch circle: an arena of cells linked into a ring.

Cells live in a flat list and refer to their neighbours by index, so the
ring never holds cyclic object references and a clone is a plain copy of
the arena. New cells are always inserted to the right of the tracked
tail, which keeps the ring closed after every insertion.
"""

import random
from typing import Iterable

from src.circle.types import CircleConfig, SwitchCell, SwitchState
from src.circle.validation import StructuralViolationError, validate_size


class SwitchCircle:
    """A closed ring of N switches with a fixed start cell.

    Usage:
        circle = build(10, rng=random.Random(7))
        copy = clone(circle)
    """

    def __init__(self, first: SwitchState):
        self._cells: list[SwitchCell] = [SwitchCell(state=first, left=0, right=0)]
        self._tail = 0
        self._start = 0
        self._frozen = False

    def __len__(self) -> int:
        return len(self._cells)

    def __str__(self) -> str:
        glyphs = "".join(state.value for state in self.states())
        return f"{len(self)} switches: {glyphs}"

    def __repr__(self) -> str:
        return f"SwitchCircle(size={len(self)}, start={self._start}, frozen={self._frozen})"

    @property
    def start(self) -> int:
        """Arena index of the cell a new cursor starts on."""
        return self._start

    @property
    def frozen(self) -> bool:
        return self._frozen

    def cell(self, index: int) -> SwitchCell:
        return self._cells[index]

    def insert_right(self, state: SwitchState) -> int:
        """Insert a new switch to the right of the current tail.

        Args:
            state: Initial position of the new switch

        Returns:
            Arena index of the inserted cell

        Raises:
            StructuralViolationError: If the circle has been frozen
        """
        if self._frozen:
            raise StructuralViolationError(
                "Cannot insert a switch into a frozen circle; "
                "only switch states may change once a run has started"
            )
        index = len(self._cells)
        tail = self._cells[self._tail]
        head = tail.right
        self._cells.append(SwitchCell(state=state, left=self._tail, right=head))
        self._cells[head].left = index
        tail.right = index
        self._tail = index
        return index

    def freeze(self) -> None:
        """Forbid further changes to the ring's adjacency."""
        self._frozen = True

    def states(self) -> list[SwitchState]:
        """Return switch states in ring order, walking right from the start cell."""
        result = []
        index = self._start
        for _ in range(len(self._cells)):
            cell = self._cells[index]
            result.append(cell.state)
            index = cell.right
        return result

    @classmethod
    def from_states(cls, states: Iterable[SwitchState], start: int = 0) -> "SwitchCircle":
        """Build a circle with an explicit layout.

        Args:
            states: Switch positions in ring order (left to right)
            start: Offset of the start cell within `states`

        Raises:
            InvalidSizeError: If `states` is empty
            ValueError: If start is outside the ring
        """
        states = [SwitchState(s) for s in states]
        validate_size(len(states))
        if not 0 <= start < len(states):
            raise ValueError(f"start must be within [0, {len(states)}), got {start}")

        circle = cls(states[0])
        for state in states[1:]:
            circle.insert_right(state)
        circle._start = start
        return circle


def build(
    n: int,
    rng: random.Random | int | None = None,
    on_probability: float = 0.5,
) -> SwitchCircle:
    """Build a circle of n switches with independently random positions.

    Args:
        n: Number of switches (must be >= 1)
        rng: Random source, or an integer seed for one
        on_probability: Chance that each switch starts ON

    Returns:
        A ring of exactly n switches whose start is the first built cell

    Raises:
        InvalidSizeError: If n < 1
    """
    config = CircleConfig(size=n, on_probability=on_probability)
    if not isinstance(rng, random.Random):
        rng = random.Random(rng)

    def flip() -> SwitchState:
        return SwitchState.ON if rng.random() < config.on_probability else SwitchState.OFF

    circle = SwitchCircle(flip())
    for _ in range(config.size - 1):
        circle.insert_right(flip())
    return circle


def clone(circle: SwitchCircle) -> SwitchCircle:
    """Return an independent copy with the same states and start offset.

    The copy shares no cells with the source and is never frozen, so a
    strategy can mutate it freely.
    """
    copy = SwitchCircle.__new__(SwitchCircle)
    copy._cells = [SwitchCell(c.state, c.left, c.right) for c in circle._cells]
    copy._tail = circle._tail
    copy._start = circle._start
    copy._frozen = False
    return copy
