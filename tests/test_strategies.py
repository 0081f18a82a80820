"""Tests for the switch counting strategies."""

import pytest

from src.circle.circle import SwitchCircle, build, clone
from src.circle.cursor import CircleCursor
from src.circle.observables import count_on
from src.circle.types import SwitchState
from src.discovery import (
    Answer,
    StrategyKind,
    basic,
    bidirectional,
    enhanced,
    get_strategy,
    list_strategies,
    primitive,
    run,
)

ON = SwitchState.ON
OFF = SwitchState.OFF

ALL_KINDS = list(StrategyKind)


class TestRegistry:
    def test_order(self):
        assert list_strategies() == [
            StrategyKind.PRIMITIVE,
            StrategyKind.BASIC,
            StrategyKind.ENHANCED,
            StrategyKind.BIDIRECTIONAL,
        ]

    def test_lookup_by_name(self):
        assert get_strategy("primitive") is primitive
        assert get_strategy("basic") is basic
        assert get_strategy(StrategyKind.ENHANCED) is enhanced
        assert get_strategy("bidirectional") is bidirectional

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown strategy"):
            get_strategy("teleport")


class TestCorrectness:
    @pytest.mark.parametrize("kind", ALL_KINDS)
    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 8, 17, 64])
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_random_layouts(self, kind, n, seed):
        answer = run(kind, build(n, rng=seed))
        assert answer.count == n

    @pytest.mark.parametrize("kind", ALL_KINDS)
    @pytest.mark.parametrize("n", range(1, 13))
    def test_all_on(self, kind, n):
        assert run(kind, SwitchCircle.from_states([ON] * n)).count == n

    @pytest.mark.parametrize("kind", ALL_KINDS)
    @pytest.mark.parametrize("n", range(1, 13))
    def test_all_off(self, kind, n):
        assert run(kind, SwitchCircle.from_states([OFF] * n)).count == n

    @pytest.mark.parametrize("kind", ALL_KINDS)
    @pytest.mark.parametrize("n", [2, 3, 6, 9])
    def test_alternating(self, kind, n):
        states = [ON if i % 2 else OFF for i in range(n)]
        assert run(kind, SwitchCircle.from_states(states)).count == n

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_start_offset_does_not_matter(self, kind):
        states = [ON, OFF, ON, ON, OFF, OFF, ON]
        for start in range(len(states)):
            circle = SwitchCircle.from_states(states, start=start)
            assert run(kind, circle).count == len(states)

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_every_switch_ends_off(self, kind):
        circle = build(30, rng=4)
        run(kind, circle)
        assert count_on(circle) == 0


class TestSingleSwitch:
    @pytest.mark.parametrize("state", [ON, OFF])
    def test_primitive_and_basic_take_two_steps(self, state):
        for strategy in (primitive, basic):
            answer = run(strategy, SwitchCircle.from_states([state]))
            assert answer == Answer(count=1, steps=2)

    @pytest.mark.parametrize("state", [ON, OFF])
    def test_sweeping_strategies_take_four_steps(self, state):
        for strategy in (enhanced, bidirectional):
            answer = run(strategy, SwitchCircle.from_states([state]))
            assert answer == Answer(count=1, steps=4)


class TestFiveSwitchScenario:
    """Initial layout ↓↓↑↓↑ with the cursor on the first switch."""

    @pytest.fixture
    def circle(self):
        return SwitchCircle.from_states([OFF, OFF, ON, OFF, ON])

    def test_basic(self, circle):
        answer = run(basic, circle)
        assert answer == Answer(count=5, steps=22)
        assert answer.steps % 2 == 0

        cursor = CircleCursor(circle)
        for _ in range(answer.count):
            assert cursor.read() is OFF
            cursor.step_right()
        assert cursor.position == circle.start

    def test_primitive(self, circle):
        assert run(primitive, circle) == Answer(count=5, steps=30)

    def test_enhanced(self, circle):
        assert run(enhanced, circle) == Answer(count=5, steps=18)

    def test_bidirectional(self, circle):
        assert run(bidirectional, circle) == Answer(count=5, steps=22)


class TestStepCosts:
    @pytest.mark.parametrize("n", [1, 5, 20])
    @pytest.mark.parametrize("seed", [0, 7])
    def test_primitive_is_quadratic(self, n, seed):
        assert run(primitive, build(n, rng=seed)).steps == n * (n + 1)

    @pytest.mark.parametrize("n", [1, 4, 15])
    def test_all_off_costs(self, n):
        assert run(basic, SwitchCircle.from_states([OFF] * n)).steps == 2 * n
        assert run(enhanced, SwitchCircle.from_states([OFF] * n)).steps == 2 * (n + 1)

    @pytest.mark.parametrize("seed", range(10))
    def test_basic_never_worse_than_primitive(self, seed):
        circle = build(25, rng=seed)
        assert run(basic, clone(circle)).steps <= run(primitive, clone(circle)).steps

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_steps_are_even(self, kind):
        # Every round walks out and back the same distance
        for seed in range(5):
            assert run(kind, build(21, rng=seed)).steps % 2 == 0


class TestDeterminism:
    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_same_layout_same_answer(self, kind):
        circle = build(50, rng=123)
        first = run(kind, clone(circle))
        second = run(kind, clone(circle))
        assert first == second

    def test_run_freezes_circle(self):
        circle = build(6, rng=0)
        run(basic, circle)
        assert circle.frozen

    def test_run_accepts_plain_callable(self):
        def walk_once(cursor: CircleCursor) -> Answer:
            cursor.step_right()
            return Answer(count=0, steps=cursor.steps)

        assert run(walk_once, build(3, rng=0)) == Answer(count=0, steps=1)
