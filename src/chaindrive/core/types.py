"""Core types for drive parameters and model coefficients.

This module defines the canonical records passed between the loss
formulas, the ledger, the analysis helpers and the CLI.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from .constants import (
    ARTICULATION_FACTOR,
    REF_BUSHING_RADIUS,
    REF_CADENCE_RPM,
    REF_MU,
    REF_OFFSET_ANGLE,
    REF_PITCH,
    REF_ROLLER_RADIUS,
    REF_ROLLER_ROTATION,
    REF_TEETH,
    REF_TENSION,
    ROLLER_LOAD_RATIO,
)
from .validation import (
    check_angle,
    check_coefficient,
    check_friction,
    check_magnitude,
    check_teeth,
)


@dataclass(frozen=True)
class LossCoefficients:
    """Dimensionless coefficients of the articulation and roller models.

    Attributes:
        articulation_factor: Scales the pin/bushing articulation energy
            mu1 * rho * T0 * (2 pi / N) per engagement.
        roller_load_ratio: Seated-roller normal load as a fraction of T0.
    """

    articulation_factor: float = ARTICULATION_FACTOR
    roller_load_ratio: float = ROLLER_LOAD_RATIO

    def __post_init__(self) -> None:
        check_coefficient(self.articulation_factor, "articulation_factor")
        check_coefficient(self.roller_load_ratio, "roller_load_ratio")


@dataclass(frozen=True)
class DriveParams:
    """Chain drive operating point.

    Attributes:
        mu: Friction coefficients (pin/bushing, offset, roller/tooth).
        pitch: Chain pitch (m).
        rho: Bushing radius (m).
        psi: Absolute roller rotation angle (rad).
        r_roller: Roller radius (m). Also used as the offset contact radius.
        t0: Free chain tension (N).
        teeth: Front and rear sprocket tooth counts.
        omega: Pedaling cadence (rad/s).
        gamma: Chain offset angle (rad).
    """

    mu: tuple[float, float, float]
    pitch: float
    rho: float
    psi: float
    r_roller: float
    t0: float
    teeth: tuple[int, int]
    omega: float
    gamma: float

    def __post_init__(self) -> None:
        # Normalize in place; frozen dataclasses need object.__setattr__
        object.__setattr__(self, "mu", check_friction(self.mu))
        object.__setattr__(self, "teeth", check_teeth(self.teeth))
        for name in ("pitch", "rho", "r_roller", "t0", "omega"):
            object.__setattr__(self, name, check_magnitude(getattr(self, name), name))
        for name in ("psi", "gamma"):
            object.__setattr__(self, name, check_angle(getattr(self, name), name))

    @classmethod
    def reference(cls) -> DriveParams:
        """Return the documented reference operating point."""
        from ..chain.geometry import cadence_to_omega

        return cls(
            mu=REF_MU,
            pitch=REF_PITCH,
            rho=REF_BUSHING_RADIUS,
            psi=REF_ROLLER_ROTATION,
            r_roller=REF_ROLLER_RADIUS,
            t0=REF_TENSION,
            teeth=REF_TEETH,
            omega=cadence_to_omega(REF_CADENCE_RPM),
            gamma=REF_OFFSET_ANGLE,
        )

    def replace(self, **changes: Any) -> DriveParams:
        """Return a copy with fields replaced (re-validated)."""
        return dataclasses.replace(self, **changes)

    def as_args(self) -> tuple:
        """Positional arguments in the order taken by total_loss/efficiency."""
        return (
            list(self.mu),
            self.pitch,
            self.rho,
            self.psi,
            self.r_roller,
            self.t0,
            list(self.teeth),
            self.omega,
            self.gamma,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        out = dataclasses.asdict(self)
        out["mu"] = list(self.mu)
        out["teeth"] = list(self.teeth)
        return out
