"""Analytic frictional losses of a bicycle chain drive.

Three loss sources are modeled separately and summed:

1. Pin/bushing friction from link articulation (``pin_bushing_loss``, P1)
2. Chain offset (misalignment) friction (``offset_loss``, P2)
3. Roller/sprocket-tooth interaction (``roller_loss``, P3)

All functions are pure and return power in watts. The short names used in
the published documentation (P1, P2, P3, Ptotal, η) are bound at the bottom
of this module.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..core.errors import InvalidArgumentError
from ..core.types import LossCoefficients
from ..core.validation import (
    check_angle,
    check_coefficient,
    check_friction,
    check_magnitude,
    check_teeth,
)
from .geometry import engagement_rate, input_power

_DEFAULT_COEFFS = LossCoefficients()


def pin_bushing_loss(
    mu1: float,
    rho: float,
    t0: float,
    teeth: Sequence[int],
    omega: float,
    *,
    coeffs: LossCoefficients | None = None,
) -> float:
    """Compute the power loss due to friction between pins and bushings.

    A link articulates by 2 pi / N_i on each sprocket; engagements occur
    N_front * omega / (2 pi) times per second on both, so

        P1 = mu1 * rho * T0 * omega * (1 + N_front / N_rear) * k_art

    Args:
        mu1: Friction coefficient between pin and bushing.
        rho: Bushing radius (m).
        t0: Free chain tension (N).
        teeth: Front and rear sprocket tooth counts.
        omega: Pedaling cadence (rad/s).
        coeffs: Model coefficients (defaults to the calibrated set).

    Returns:
        Power loss (W).
    """
    mu1 = check_coefficient(mu1, "mu1")
    rho = check_magnitude(rho, "rho")
    t0 = check_magnitude(t0, "t0")
    front, rear = check_teeth(teeth)
    omega = check_magnitude(omega, "omega")
    coeffs = coeffs or _DEFAULT_COEFFS

    return float(mu1 * rho * t0 * omega * (1 + front / rear) * coeffs.articulation_factor)


def offset_loss(
    teeth: Sequence[int],
    omega: float,
    mu2: float,
    t0: float,
    r0: float,
    gamma: float,
) -> float:
    """Compute the power loss due to chain offset.

    P2 = mu2 * T0 * r0 * |sin(gamma)| * omega * (1 + N_front / N_rear)

    Args:
        teeth: Front and rear sprocket tooth counts.
        omega: Pedaling cadence (rad/s).
        mu2: Friction coefficient between chain and sprocket teeth.
        t0: Free chain tension (N).
        r0: Radius of contact during offset operation (m).
        gamma: Chain offset angle (rad).

    Returns:
        Power loss (W).
    """
    front, rear = check_teeth(teeth)
    omega = check_magnitude(omega, "omega")
    mu2 = check_coefficient(mu2, "mu2")
    t0 = check_magnitude(t0, "t0")
    r0 = check_magnitude(r0, "r0")
    gamma = check_angle(gamma, "gamma")

    return float(mu2 * t0 * r0 * abs(np.sin(gamma)) * omega * (1 + front / rear))


def roller_loss(
    mu3: float,
    t0: float,
    r_roller: float,
    teeth: Sequence[int],
    omega: float,
    psi: float,
    *,
    coeffs: LossCoefficients | None = None,
) -> float:
    """Compute the power loss due to interaction between rollers and sprocket teeth.

    Each roller turns through |psi| against a tooth load kappa * T0 at every
    engagement, on both sprockets.

    Args:
        mu3: Friction coefficient between roller and sprocket teeth.
        t0: Free chain tension (N).
        r_roller: Roller radius (m).
        teeth: Front and rear sprocket tooth counts.
        omega: Pedaling cadence (rad/s).
        psi: Absolute roller rotation angle (rad).
        coeffs: Model coefficients (defaults to the calibrated set).

    Returns:
        Power loss (W).
    """
    mu3 = check_coefficient(mu3, "mu3")
    t0 = check_magnitude(t0, "t0")
    r_roller = check_magnitude(r_roller, "r_roller")
    psi = check_angle(psi, "psi")
    coeffs = coeffs or _DEFAULT_COEFFS
    rate = engagement_rate(teeth, omega)

    return float(mu3 * coeffs.roller_load_ratio * t0 * r_roller * abs(psi) * 2 * rate)


def total_loss(
    mu: Sequence[float],
    p: float,
    rho: float,
    psi: float,
    r_roller: float,
    t0: float,
    teeth: Sequence[int],
    omega: float,
    gamma: float,
    *,
    coeffs: LossCoefficients | None = None,
) -> float:
    """Compute the power loss due to all three sources.

    Sum of pin/bushing, offset and roller/tooth losses. The offset contact
    radius is taken as the roller radius.

    Args:
        mu: Friction coefficients for cases 1, 2 and 3 (in that order).
        p: Chain pitch (m).
        rho: Bushing radius (m).
        psi: Absolute roller rotation angle (rad).
        r_roller: Roller radius (m).
        t0: Free chain tension (N).
        teeth: Front and rear sprocket tooth counts.
        omega: Pedaling cadence (rad/s).
        gamma: Chain offset angle (rad).
        coeffs: Model coefficients (defaults to the calibrated set).

    Returns:
        Power loss (W).
    """
    mu1, mu2, mu3 = check_friction(mu)
    check_magnitude(p, "p")

    p1 = pin_bushing_loss(mu1, rho, t0, teeth, omega, coeffs=coeffs)
    p2 = offset_loss(teeth, omega, mu2, t0, r_roller, gamma)
    p3 = roller_loss(mu3, t0, r_roller, teeth, omega, psi, coeffs=coeffs)
    return p1 + p2 + p3


def efficiency(
    mu: Sequence[float],
    p: float,
    rho: float,
    psi: float,
    r_roller: float,
    t0: float,
    teeth: Sequence[int],
    omega: float,
    gamma: float,
    *,
    coeffs: LossCoefficients | None = None,
) -> float:
    """Compute the power transmission efficiency considering only frictional losses.

    eta = (P_in - P_loss) / P_in, with P_in = T0 * p * N_front * omega / (2 pi)

    Args:
        mu: Friction coefficients for cases 1, 2 and 3 (in that order).
        p: Chain pitch (m).
        rho: Bushing radius (m).
        psi: Absolute roller rotation angle (rad).
        r_roller: Roller radius (m).
        t0: Free chain tension (N).
        teeth: Front and rear sprocket tooth counts.
        omega: Pedaling cadence (rad/s).
        gamma: Chain offset angle (rad).
        coeffs: Model coefficients (defaults to the calibrated set).

    Returns:
        Efficiency in (0, 1].

    Raises:
        InvalidArgumentError: If the losses reach the input power.
    """
    power_loss = total_loss(
        mu, p, rho, psi, r_roller, t0, teeth, omega, gamma, coeffs=coeffs
    )
    power_in = input_power(t0, p, teeth, omega)
    return efficiency_from_losses(power_in, power_loss)


def efficiency_from_losses(power_in: float, power_loss: float) -> float:
    """Efficiency (P_in - P_loss) / P_in of a drive with known power flows.

    A stationary or unloaded drive (P_in <= 0) transmits losslessly.

    Raises:
        InvalidArgumentError: If the losses reach the input power; the
            operating point is then outside the range of the friction model.
    """
    if power_in <= 0:
        return 1.0
    if power_loss >= power_in:
        raise InvalidArgumentError(
            f"losses ({power_loss:.6g} W) reach the input power ({power_in:.6g} W)"
        )
    return (power_in - power_loss) / power_in


# Documented short names
P1 = pin_bushing_loss
P2 = offset_loss
P3 = roller_loss
Ptotal = total_loss
η = efficiency
eta = efficiency
