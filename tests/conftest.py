"""Pytest configuration for chaindrive.

Shared fixtures describe the documented reference operating point: a 48/24
drive at 80 rpm under 300 N free tension with 0.09 friction everywhere.
"""

from __future__ import annotations

import math

import pytest

from chaindrive.core.logging import set_log_level
from chaindrive.core.types import DriveParams

REF_OMEGA = 80 * (2 * math.pi / 60)


@pytest.fixture(autouse=True)
def _quiet_logs():
    # CLI tests change the global level; restore the default afterwards
    set_log_level("WARN")
    yield
    set_log_level("WARN")


@pytest.fixture
def ref_omega() -> float:
    return REF_OMEGA


@pytest.fixture
def ref_args() -> tuple:
    """Positional arguments for Ptotal/η at the reference point."""
    return ([0.09] * 3, 0.01222, 0.00175968, math.pi / 2, 0.00249288, 300, [48, 24], REF_OMEGA, math.pi / 180)


@pytest.fixture
def ref_params() -> DriveParams:
    return DriveParams.reference()
