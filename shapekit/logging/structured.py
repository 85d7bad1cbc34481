"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Wraps Python's logging module and emits one JSON object per record.

Example:
    >>> logger = StructuredLogger(component="tolerance")
    >>> logger.debug(
    ...     event=LogEvent.TOLERANCE_CHANGED,
    ...     message="Default tolerance changed",
    ...     metadata={'previous': 0.01, 'current': 0.001}
    ... )

Output (when DEBUG is enabled for shapekit.tolerance):
    {"timestamp": "2025-10-24T15:30:45.123456+00:00", "level": "DEBUG",
     "component": "tolerance", "event": "tolerance.changed",
     "message": "Default tolerance changed",
     "metadata": {"previous": 0.01, "current": 0.001}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON logger bound to one shapekit component.

    Records go to the `shapekit.<component>` logger, so the usual logging
    configuration (levels, handlers, caplog) applies. Records below the
    logger's level are dropped before any JSON is built.
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        self.component = component
        self.logger_name = logger_name or f"shapekit.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def entry(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> Dict[str, Any]:
        """Build the JSON-ready record for one event."""
        record = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if metadata:
            record['metadata'] = metadata
        if exc_info:
            record['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }
        return record

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return
        record = self.entry(level, event, message, metadata, exc_info)
        self.logger.log(log_level, json.dumps(record, default=str))

    def debug(self, event: LogEvent, message: str,
              metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log('DEBUG', event, message, metadata)

    def info(self, event: LogEvent, message: str,
             metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log('INFO', event, message, metadata)

    def warning(self, event: LogEvent, message: str,
                metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """Log an error; `exc_info` is summarized under "exception"."""
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Pass-through formatter: StructuredLogger messages are already JSON."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """Create a StructuredLogger for `component` (logger shapekit.<component>)."""
    return StructuredLogger(component=component, level=level)
