"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for shapekit structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: tolerance, shape, config, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - tolerance.*: Default epsilon changes
    - shape.*: Shape construction notices
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Tolerance Events ==========
    TOLERANCE_CHANGED = "tolerance.changed"
    """Default tolerance reassigned via set_tolerance()."""

    TOLERANCE_SCOPE_ENTERED = "tolerance.scope.entered"
    """Temporary tolerance override entered."""

    # ========== Shape Events ==========
    SHAPE_ORIENTATION_UNEXPECTED = "shape.orientation.unexpected"
    """Rectangle corners given in an unexpected order (non-positive width/height)."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Geometry configuration loaded from YAML."""

    # ========== Error Events ==========
    CONFIGURATION_ERROR = "error.configuration"
    """Configuration failed validation."""

