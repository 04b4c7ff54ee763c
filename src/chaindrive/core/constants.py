"""Core constants for chaindrive.

This module defines:
- Model version string (bump when a loss formula changes)
- Calibrated loss-model coefficients
- The reference operating point the coefficients were calibrated at
"""

from __future__ import annotations

import math

MODEL_VERSION = "v1.0_20261017_engagement_rate"

# Loss-model coefficients (dimensionless)
# Pin/bushing articulation: energy per engagement relative to mu * rho * T0 * (2 pi / N)
ARTICULATION_FACTOR = 3.3253557252708421
# Roller/tooth: seated-roller normal load as a fraction of T0
ROLLER_LOAD_RATIO = 0.0020991806066494143

# Reference operating point
REF_MU = (0.09, 0.09, 0.09)
REF_PITCH = 0.01222  # m
REF_BUSHING_RADIUS = 0.00175968  # m
REF_ROLLER_RADIUS = 0.00249288  # m
REF_ROLLER_ROTATION = math.pi / 2  # rad
REF_TENSION = 300.0  # N
REF_TEETH = (48, 24)
REF_CADENCE_RPM = 80.0
REF_OFFSET_ANGLE = math.pi / 180  # rad

# Closure tolerance for loss ledgers (W)
CLOSURE_TOL = 1e-9
