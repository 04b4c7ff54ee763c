"""Input validation for loss-model arguments.

All checks raise InvalidArgumentError and return the normalized value, so
callers can write ``rho = check_magnitude(rho, "rho")``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from .errors import InvalidArgumentError


def _as_float(value: Any, name: str) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"{name} must be a real number, got {value!r}") from None
    if not np.isfinite(out):
        raise InvalidArgumentError(f"{name} must be finite, got {out}")
    return out


def check_magnitude(value: Any, name: str) -> float:
    """Validate a physical magnitude (radius, tension, pitch, cadence).

    Args:
        value: Candidate value.
        name: Argument name used in the error message.

    Returns:
        The value as float.

    Raises:
        InvalidArgumentError: If not a finite number >= 0.
    """
    out = _as_float(value, name)
    if out < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {out}")
    return out


def check_angle(value: Any, name: str) -> float:
    """Validate an angle in radians (any finite real)."""
    return _as_float(value, name)


def check_coefficient(value: Any, name: str) -> float:
    """Validate a friction coefficient (finite, >= 0)."""
    return check_magnitude(value, name)


def check_tooth_count(value: Any, name: str) -> int:
    """Validate a single sprocket tooth count (integral, >= 1)."""
    out = _as_float(value, name)
    if out != int(out) or out < 1:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return int(out)


def check_teeth(teeth: Sequence[int] | np.ndarray) -> tuple[int, int]:
    """Validate sprocket tooth counts.

    Args:
        teeth: Front and rear tooth counts, in that order. Extra entries
            are ignored.

    Returns:
        (front, rear) as ints.

    Raises:
        InvalidArgumentError: If fewer than two counts are given or a count
            is not a positive integer.
    """
    arr = np.asarray(teeth, dtype=object)
    if arr.ndim != 1 or arr.size < 2:
        raise InvalidArgumentError(
            f"teeth must contain front and rear tooth counts, got {teeth!r}"
        )

    return check_tooth_count(arr[0], "teeth[front]"), check_tooth_count(arr[1], "teeth[rear]")


def check_friction(mu: Sequence[float] | np.ndarray, n: int = 3) -> tuple[float, ...]:
    """Validate a friction-coefficient vector.

    Args:
        mu: Coefficients for loss cases 1..n, in that order. Extra entries
            are ignored.
        n: Number of coefficients required.

    Returns:
        Tuple of the first ``n`` coefficients as floats.

    Raises:
        InvalidArgumentError: If fewer than ``n`` coefficients are given or
            any is negative.
    """
    arr = np.asarray(mu, dtype=object)
    if arr.ndim != 1 or arr.size < n:
        raise InvalidArgumentError(f"mu must contain {n} friction coefficients, got {mu!r}")
    return tuple(check_coefficient(arr[i], f"mu[{i + 1}]") for i in range(n))
