"""
Test Boundary Tolerance
=======================

Default epsilon, reassignment, scoped overrides and validation.

Usage:
    source .venv/bin/activate && pytest test_tolerance.py
"""

import contextvars
import json
import logging

import pytest

from shapekit import (
    DEFAULT_TOLERANCE,
    CircleShape,
    ErrorKind,
    InvalidToleranceError,
    Point,
    Segment,
    get_tolerance,
    set_tolerance,
    tolerance_scope,
)

OFF_SEGMENT = Point(3, 4)  # deviates ~0.185 from the segment below


@pytest.fixture
def segment():
    return Segment(Point(1, 1), Point(5, 5))


def test_default_tolerance():
    assert DEFAULT_TOLERANCE == 0.01
    assert get_tolerance() == DEFAULT_TOLERANCE


def test_set_tolerance_affects_subsequent_calls(segment):
    assert not segment.boundary_contains(OFF_SEGMENT)

    set_tolerance(0.5)

    assert get_tolerance() == 0.5
    assert segment.boundary_contains(OFF_SEGMENT)


def test_per_call_epsilon_overrides_default(segment):
    set_tolerance(0.5)

    assert not segment.boundary_contains(OFF_SEGMENT, epsilon=0.1)
    assert segment.boundary_contains(OFF_SEGMENT, epsilon=0.2)


def test_default_applies_to_shapes():
    circle = CircleShape(Point(0, 0), 10)
    near_boundary = Point(10.5, 0)  # equation value 1.1025

    assert not circle.boundary_intersects(near_boundary)

    set_tolerance(0.2)

    assert circle.boundary_intersects(near_boundary)


def test_tolerance_scope_restores_previous_value(segment):
    set_tolerance(0.02)

    with tolerance_scope(0.5) as value:
        assert value == 0.5
        assert get_tolerance() == 0.5
        assert segment.boundary_contains(OFF_SEGMENT)

    assert get_tolerance() == 0.02
    assert not segment.boundary_contains(OFF_SEGMENT)


def test_tolerance_scope_restores_on_error():
    with pytest.raises(RuntimeError):
        with tolerance_scope(0.3):
            raise RuntimeError("boom")

    assert get_tolerance() == DEFAULT_TOLERANCE


def test_fresh_context_starts_at_default():
    set_tolerance(0.25)

    assert contextvars.Context().run(get_tolerance) == DEFAULT_TOLERANCE
    assert get_tolerance() == 0.25


@pytest.mark.parametrize("value", [0, -0.1, float("nan"), float("inf"), "abc", None])
def test_invalid_tolerance_rejected(value):
    with pytest.raises(InvalidToleranceError) as exc_info:
        set_tolerance(value)

    assert exc_info.value.kind is ErrorKind.INVALID_TOLERANCE
    assert get_tolerance() == DEFAULT_TOLERANCE


def test_invalid_scope_rejected():
    with pytest.raises(InvalidToleranceError):
        with tolerance_scope(-1):
            pass


def test_tolerance_change_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="shapekit.tolerance")

    set_tolerance(0.05)

    entries = [json.loads(r.getMessage()) for r in caplog.records if r.name == "shapekit.tolerance"]
    assert entries[-1]['event'] == "tolerance.changed"
    assert entries[-1]['metadata'] == {'previous': DEFAULT_TOLERANCE, 'current': 0.05}
