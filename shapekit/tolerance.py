"""
Boundary Tolerance
==================

Bounded Context: Numeric tolerance for boundary tests.

Every boundary test (Segment.boundary_contains, Shape.boundary_intersects)
takes an optional `epsilon`. When it is omitted, the current default from
this module is used.

Design:
- Default lives in a ContextVar, scoped per execution context
  (a new thread starts at DEFAULT_TOLERANCE)
- set_tolerance() reassigns it for the current context
- tolerance_scope() overrides it for a `with` block and restores it after
"""

import math
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from shapekit.errors import InvalidToleranceError
from shapekit.logging import LogEvent, create_logger

DEFAULT_TOLERANCE = 0.01

_tolerance: ContextVar[float] = ContextVar("shapekit_tolerance", default=DEFAULT_TOLERANCE)

logger = create_logger("tolerance")


def _validate(value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidToleranceError(f"Tolerance must be a real number, got {value!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise InvalidToleranceError(f"Tolerance must be finite and > 0, got {value}")
    return value


def get_tolerance() -> float:
    """Return the default tolerance for the current context."""
    return _tolerance.get()


def set_tolerance(value: float) -> None:
    """
    Reassign the default tolerance.

    Affects subsequent boundary tests in the current context only.

    Args:
        value: New epsilon (finite, > 0)

    Raises:
        InvalidToleranceError: If value is not a finite positive number
    """
    value = _validate(value)
    previous = _tolerance.get()
    _tolerance.set(value)
    logger.debug(
        event=LogEvent.TOLERANCE_CHANGED,
        message="Default tolerance changed",
        metadata={'previous': previous, 'current': value}
    )


@contextmanager
def tolerance_scope(value: float) -> Iterator[float]:
    """
    Temporarily override the default tolerance.

    Example:
        >>> with tolerance_scope(0.5):
        ...     segment.boundary_contains(point)
    """
    value = _validate(value)
    token = _tolerance.set(value)
    logger.debug(
        event=LogEvent.TOLERANCE_SCOPE_ENTERED,
        message="Tolerance override entered",
        metadata={'value': value}
    )
    try:
        yield value
    finally:
        _tolerance.reset(token)


def resolve(epsilon: Optional[float]) -> float:
    """Return `epsilon` if given, else the current default."""
    if epsilon is None:
        return _tolerance.get()
    return epsilon
