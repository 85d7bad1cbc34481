"""
Geometry Errors
===============

Bounded Context: Failure taxonomy for shape queries.

Every failure raised by shapekit derives from GeometryError and carries a
typed ErrorKind, so callers can branch on `err.kind` instead of parsing
messages.

Design:
- Enum-tagged errors (no string inspection)
- Each error also subclasses the matching builtin (IndexError, ValueError...)
- Raised immediately, never retried
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Discriminator for GeometryError subclasses."""

    OUT_OF_RANGE = "out_of_range"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    DEGENERATE_GEOMETRY = "degenerate_geometry"
    INVALID_TOLERANCE = "invalid_tolerance"
    INVALID_CONFIGURATION = "invalid_configuration"


class GeometryError(Exception):
    """Base class for all shapekit errors."""

    kind: ErrorKind


class OutOfRangeError(GeometryError, IndexError):
    """Raised when an indexed point/segment lookup falls outside the shape."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for {size} items")


class UnsupportedOperationError(GeometryError, NotImplementedError):
    """Raised when a shape has no implementation for a query (e.g. ellipse perimeter)."""

    kind = ErrorKind.UNSUPPORTED_OPERATION

    def __init__(self, operation: str, shape_name: str):
        self.operation = operation
        self.shape_name = shape_name
        super().__init__(f"{operation} is not supported for {shape_name}")


class DegenerateGeometryError(GeometryError, ValueError):
    """Raised when shape parameters cannot describe a closed shape."""

    kind = ErrorKind.DEGENERATE_GEOMETRY


class InvalidToleranceError(GeometryError, ValueError):
    """Raised for non-positive or non-finite tolerance values."""

    kind = ErrorKind.INVALID_TOLERANCE


class ConfigurationError(GeometryError, ValueError):
    """Raised when a geometry configuration is malformed."""

    kind = ErrorKind.INVALID_CONFIGURATION
