"""Strategies for counting the switches in a circle.

Every strategy follows the same protocol. The start switch is forced ON,
then each round searches outward, turning switches OFF, and walks back to
the start. If the start switch is now OFF, the last search went all the
way around and its length gives N. Otherwise another round begins.

Only the cursor is used, so the step count recorded on the cursor is the
cost of the strategy.
"""

from enum import Enum
from typing import Callable

from src.circle.cursor import CircleCursor
from src.discovery.answer import Answer

Strategy = Callable[[CircleCursor], Answer]


class StrategyKind(str, Enum):
    """Known strategies, ordered from most to least expensive."""

    PRIMITIVE = "primitive"
    BASIC = "basic"
    ENHANCED = "enhanced"
    BIDIRECTIONAL = "bidirectional"


def primitive(cursor: CircleCursor) -> Answer:
    """Walk out k steps, turn that switch OFF, walk back, for k = 1, 2, ...

    The start switch can only go OFF in the round where the walk lands on
    it, which first happens at k == N. Costs N * (N + 1) steps on every
    layout.
    """
    cursor.turn_on()
    switches = 0
    while True:
        switches += 1
        cursor.step_right(switches)
        cursor.turn_off()
        cursor.step_left(switches)
        if cursor.is_off():
            return Answer(count=switches, steps=cursor.steps)


def basic(cursor: CircleCursor) -> Answer:
    """Walk right only as far as the next ON switch.

    OFF switches between the start and the next ON switch cannot be the
    start, so there is no point turning back before reaching an ON one.
    """
    cursor.turn_on()
    while True:
        steps = 0
        while True:
            cursor.step_right()
            steps += 1
            if cursor.is_on():
                break
        cursor.turn_off()

        cursor.step_left(steps)
        if cursor.is_off():
            return Answer(count=steps, steps=cursor.steps)


def enhanced(cursor: CircleCursor) -> Answer:
    """Turn OFF a whole run of ON switches per round.

    The walk keeps going after the first ON switch and only stops at the
    first OFF switch after it. The neighbour of the start is always OFF by
    the time a walk wraps around, so the walk that clears the start is one
    step longer than N.
    """
    cursor.turn_on()
    while True:
        steps = 0
        saw_on = False
        while True:
            cursor.step_right()
            steps += 1
            if cursor.is_on():
                cursor.turn_off()
                saw_on = True
            elif saw_on:
                break

        cursor.step_left(steps)
        if cursor.is_off():
            return Answer(count=steps - 1, steps=cursor.steps)


def bidirectional(cursor: CircleCursor) -> Answer:
    """Same sweep as `enhanced`, but in whichever direction was cheaper last time.

    The length of the latest sweep in each direction is kept; the next
    round goes the way whose last sweep was shorter, right on a tie.
    """
    cursor.turn_on()
    left_cost = 0
    right_cost = 0
    while True:
        walk_right = right_cost <= left_cost
        steps = 0
        toggled = False
        while True:
            if walk_right:
                cursor.step_right()
            else:
                cursor.step_left()
            steps += 1
            if cursor.is_off():
                if toggled:
                    break
            else:
                cursor.turn_off()
                toggled = True

        if walk_right:
            cursor.step_left(steps)
            right_cost = steps
        else:
            cursor.step_right(steps)
            left_cost = steps
        if cursor.is_off():
            return Answer(count=steps - 1, steps=cursor.steps)


STRATEGIES: dict[StrategyKind, Strategy] = {
    StrategyKind.PRIMITIVE: primitive,
    StrategyKind.BASIC: basic,
    StrategyKind.ENHANCED: enhanced,
    StrategyKind.BIDIRECTIONAL: bidirectional,
}


def get_strategy(kind: StrategyKind | str) -> Strategy:
    """Look up a strategy by kind or by name.

    Raises:
        ValueError: If the name is not a known strategy
    """
    try:
        kind = StrategyKind(kind)
    except ValueError:
        valid = [k.value for k in StrategyKind]
        raise ValueError(f"Unknown strategy '{kind}'. Valid strategies: {valid}") from None
    return STRATEGIES[kind]


def list_strategies() -> list[StrategyKind]:
    return list(STRATEGIES)
