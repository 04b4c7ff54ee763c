"""Structured logging utilities.

Records are emitted as one JSON object per line on stderr, leaving stdout
to the CLI's machine-readable output.
"""

from __future__ import annotations

import json
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TextIO

LEVELS = {"DEBUG": 0, "INFO": 1, "WARN": 2, "ERROR": 3}
_ALIASES = {"WARNING": "WARN"}
_default_level = "WARN"


def _normalize_level(level: str) -> str:
    name = level.upper()
    name = _ALIASES.get(name, name)
    if name not in LEVELS:
        raise ValueError(f"Unknown log level: {level!r} (expected one of {sorted(LEVELS)})")
    return name


@dataclass
class LogRecord:
    """Structured log record."""

    level: str
    message: str
    timestamp: float = field(default_factory=time.time)
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp,
            **self.data,
        }

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), default=str)


class StructuredLogger:
    """Simple structured logger with JSON output."""

    def __init__(
        self,
        name: str,
        output: TextIO | None = None,
        min_level: str = "WARN",
    ) -> None:
        self.name = name
        self._output = output
        self._min_level = LEVELS[_normalize_level(min_level)]

    @property
    def output(self) -> TextIO:
        # Resolved per call so redirected stderr (tests, CLI wrappers) is honored
        return self._output or sys.stderr

    def set_level(self, level: str) -> None:
        self._min_level = LEVELS[_normalize_level(level)]

    def is_enabled(self, level: str) -> bool:
        return LEVELS[_normalize_level(level)] >= self._min_level

    def _log(self, level: str, message: str, **data: Any) -> None:
        if LEVELS[level] < self._min_level:
            return

        record = LogRecord(level=level, message=message, data={"logger": self.name, **data})
        print(record.to_json(), file=self.output)

    def debug(self, message: str, **data: Any) -> None:
        """Log at DEBUG level."""
        self._log("DEBUG", message, **data)

    def info(self, message: str, **data: Any) -> None:
        """Log at INFO level."""
        self._log("INFO", message, **data)

    def warn(self, message: str, **data: Any) -> None:
        """Log at WARN level."""
        self._log("WARN", message, **data)

    def error(self, message: str, **data: Any) -> None:
        """Log at ERROR level."""
        self._log("ERROR", message, **data)

    @contextmanager
    def timer(self, operation: str):
        """Context manager for timing operations.

        Usage:
            with logger.timer("evaluate_drive"):
                ledger = ...
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.debug(f"{operation} completed", elapsed_ms=elapsed * 1000)


# Global logger cache
_loggers: dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (typically __name__).

    Returns:
        StructuredLogger instance at the current default level.
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, min_level=_default_level)
    return _loggers[name]


def set_log_level(level: str) -> None:
    """Set minimum log level for all existing and future loggers.

    Args:
        level: One of DEBUG, INFO, WARN (or WARNING), ERROR.
    """
    global _default_level
    _default_level = _normalize_level(level)
    for logger in _loggers.values():
        logger.set_level(_default_level)
