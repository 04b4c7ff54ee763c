"""Power accounting for a chain drive operating point.

Implements the closure check:
    P_in = P_out + Sum(Losses)

The breakdown keeps each loss source separate so that sweeps and
sensitivity scans can report which mechanism dominates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.constants import CLOSURE_TOL, MODEL_VERSION
from ..core.logging import get_logger
from ..core.types import DriveParams, LossCoefficients
from .geometry import input_power
from .losses import (
    efficiency,
    efficiency_from_losses,
    offset_loss,
    pin_bushing_loss,
    roller_loss,
)

logger = get_logger(__name__)


@dataclass
class LossBreakdown:
    """Power flow through the drive (W)."""

    # Loss terms [Positive = power dissipated]
    pin_bushing: float = 0.0
    offset: float = 0.0
    roller: float = 0.0

    # Power delivered by the chain tension
    input_power: float = 0.0

    # Power delivered to the rear wheel
    output_power: float = 0.0

    tolerance: float = CLOSURE_TOL

    @property
    def total(self) -> float:
        """Sum of all loss terms."""
        return self.pin_bushing + self.offset + self.roller

    @property
    def is_feasible(self) -> bool:
        """Losses stay below the input power (or the drive is unloaded)."""
        return self.input_power <= 0 or self.total < self.input_power

    @property
    def efficiency(self) -> float:
        """Transmission efficiency in (0, 1].

        Raises:
            InvalidArgumentError: If the losses reach the input power.
        """
        return efficiency_from_losses(self.input_power, self.total)

    def compute_closure_error(self) -> float:
        """Residual = P_in - (P_out + Losses)."""
        return self.input_power - (self.output_power + self.total)

    @property
    def is_closed(self) -> bool:
        """Check if the power balance is satisfied within tolerance."""
        return self.is_feasible and abs(self.compute_closure_error()) < self.tolerance

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "pin_bushing_loss": self.pin_bushing,
            "offset_loss": self.offset,
            "roller_loss": self.roller,
            "total_loss": self.total,
            "input_power": self.input_power,
            "output_power": self.output_power,
            "efficiency": self.efficiency if self.is_feasible else None,
            "model_version": MODEL_VERSION,
        }

    def summarize(self) -> str:
        eff = f"{self.efficiency:.4%}" if self.is_feasible else "n/a (losses exceed input)"
        return (
            f"P_in: {self.input_power:.4f} W | P_out: {self.output_power:.4f} W\n"
            f"Losses -- Pin: {self.pin_bushing:.4f}, Offset: {self.offset:.4f}, "
            f"Roller: {self.roller:.4f}\n"
            f"Closure Err: {self.compute_closure_error():.2e} | Eff: {eff}"
        )


def evaluate_drive(
    params: DriveParams,
    coeffs: LossCoefficients | None = None,
) -> LossBreakdown:
    """Evaluate every loss source at an operating point.

    Args:
        params: Drive operating point.
        coeffs: Model coefficients (defaults to the calibrated set).

    Returns:
        LossBreakdown whose efficiency equals ``efficiency(*params.as_args())``.
        The output power comes from that efficiency, so the closure check
        compares the formula module against the itemized losses.

    Raises:
        InvalidArgumentError: If the losses reach the input power.
    """
    mu1, mu2, mu3 = params.mu

    with logger.timer("evaluate_drive"):
        power_in = input_power(params.t0, params.pitch, params.teeth, params.omega)
        ledger = LossBreakdown(
            pin_bushing=pin_bushing_loss(
                mu1, params.rho, params.t0, params.teeth, params.omega, coeffs=coeffs
            ),
            offset=offset_loss(
                params.teeth, params.omega, mu2, params.t0, params.r_roller, params.gamma
            ),
            roller=roller_loss(
                mu3,
                params.t0,
                params.r_roller,
                params.teeth,
                params.omega,
                params.psi,
                coeffs=coeffs,
            ),
            input_power=power_in,
            output_power=efficiency(*params.as_args(), coeffs=coeffs) * power_in,
        )

    logger.debug(
        "drive evaluated",
        teeth=list(params.teeth),
        total_loss=ledger.total,
        efficiency=ledger.efficiency,
    )
    return ledger
