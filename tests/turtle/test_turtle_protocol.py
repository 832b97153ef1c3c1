"""Tests for turtle actions and the state-keeping turtle."""

from __future__ import annotations

import math

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from fractal.geometry import Point
from fractal.turtle import (Forward, PenDown, PenUp, SetHeading, SetPosition,
                            Turn, TurtleState)
from helpers.recording import RecordingTurtle


class TestStateTurtle:
    """Group pose bookkeeping checks so every backend inherits the same motion."""

    def test_forward_turn_forward_scenario(self) -> None:
        """Verify a right-angle path ends at (1, 1) facing straight up."""
        turtle = RecordingTurtle()

        for action in (Forward(1.0), Turn(math.pi / 2), Forward(1.0)):
            turtle.perform(action)

        assert turtle.state.position.x == pytest.approx(1.0)
        assert turtle.state.position.y == pytest.approx(1.0)
        assert turtle.state.heading == pytest.approx(math.pi / 2)
        assert len(turtle.lines) == 2

    def test_forward_with_pen_up_moves_without_drawing(self) -> None:
        turtle = RecordingTurtle()

        turtle.perform(PenUp())
        turtle.perform(Forward(2.0))

        assert turtle.lines == []
        assert turtle.state.position.x == pytest.approx(2.0)

    def test_pen_down_resumes_drawing_from_current_position(self) -> None:
        turtle = RecordingTurtle()

        for action in (PenUp(), Forward(1.0), PenDown(), Forward(1.0)):
            turtle.perform(action)

        assert len(turtle.lines) == 1
        start, end = turtle.lines[0]
        assert start.x == pytest.approx(1.0)
        assert end.x == pytest.approx(2.0)

    def test_set_position_and_heading(self) -> None:
        turtle = RecordingTurtle()

        turtle.perform(SetPosition(Point(0.25, -0.5)))
        turtle.perform(SetHeading(math.pi))
        turtle.perform(Forward(0.25))

        assert turtle.state.position.x == pytest.approx(0.0)
        assert turtle.state.position.y == pytest.approx(-0.5)
        assert turtle.lines == [(Point(0.25, -0.5), turtle.state.position)]

    @given(
        turns=st.lists(
            st.floats(min_value=-100.0, max_value=100.0, allow_nan=False), max_size=20
        )
    )
    @example(turns=[-5e-324])
    @example(turns=[-2.2250738585e-313])
    def test_heading_stays_within_one_turn(self, turns: list[float]) -> None:
        """Confirm repeated turns keep the heading in [0, 2*pi)."""
        turtle = RecordingTurtle()

        for radians in turns:
            turtle.perform(Turn(radians))

        assert 0.0 <= turtle.state.heading < 2 * math.pi

    def test_new_state_defaults(self) -> None:
        state = TurtleState.initial()

        assert state.position == Point(0.0, 0.0)
        assert state.heading == 0.0
        assert state.pen_down is True

    def test_unknown_action_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            RecordingTurtle().perform("forward")  # type: ignore[arg-type]
