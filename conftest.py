import pytest

from shapekit import DEFAULT_TOLERANCE, set_tolerance


@pytest.fixture(autouse=True)
def reset_tolerance():
    """Restore the default tolerance after each test."""
    yield
    set_tolerance(DEFAULT_TOLERANCE)
