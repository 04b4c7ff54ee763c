"""Error types."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised for malformed input shapes or physically invalid magnitudes."""
