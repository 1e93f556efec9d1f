"""
JSON logging for validation sweeps.

Each record is one JSON object on the logger's normal channel. Records
emitted inside one ``correlated()`` block share a ``VAL_`` correlation id so
a whole locale sweep can be filtered out of interleaved output.
"""

import json
import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any

CORRELATION_PREFIX = "VAL_"


class StructuredLogger:
    """Emits JSON records tagged with the active correlation id."""

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)
        self._correlation_id: str | None = None

    @property
    def correlation_id(self) -> str | None:
        return self._correlation_id

    def set_correlation_id(self, correlation_id: str):
        self._correlation_id = correlation_id

    def clear_correlation_id(self):
        self._correlation_id = None

    def generate_correlation_id(self) -> str:
        return f"{CORRELATION_PREFIX}{uuid.uuid4().hex[:12]}"

    @contextmanager
    def correlated(self) -> Iterator[str]:
        """Tag every record inside the block with a fresh correlation id."""
        correlation_id = self.generate_correlation_id()
        self.set_correlation_id(correlation_id)
        try:
            yield correlation_id
        finally:
            self.clear_correlation_id()

    def _entry(self, level: int, message: str, context: dict[str, Any]) -> dict[str, Any]:
        entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": logging.getLevelName(level),
            "logger": self.logger.name,
            "message": message,
            "correlation_id": self._correlation_id or "none",
        }
        if context:
            entry["context"] = context
        return entry

    def _log(self, level: int, message: str, context: dict[str, Any]) -> None:
        # Skip serialization for records the logger would drop
        if not self.logger.isEnabledFor(level):
            return
        entry = self._entry(level, message, context)
        self.logger.log(level, json.dumps(entry, default=str, ensure_ascii=False))

    def debug(self, message: str, **context: Any):
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any):
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any):
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context: Any):
        self._log(logging.ERROR, message, context)


def get_structured_logger(name: str) -> StructuredLogger:
    return StructuredLogger(name)
