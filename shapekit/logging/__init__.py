"""
Structured Logging for shapekit
===============================

Bounded Context: Observability

JSON-structured logging with typed events. Geometry queries themselves never
log; only state changes (tolerance), suspicious construction input and
configuration loading do.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from shapekit.logging import create_logger, LogEvent
    >>> logger = create_logger("config")
    >>> logger.info(
    ...     event=LogEvent.CONFIG_LOADED,
    ...     message="Loaded geometry config",
    ...     metadata={'shape_count': 2}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
