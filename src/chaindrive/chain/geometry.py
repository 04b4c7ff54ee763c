"""Sprocket and chain kinematics.

Shared by the loss formulas. Front sprocket turns at the pedaling cadence;
the rear sprocket turns faster by the tooth ratio.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..core.validation import check_magnitude, check_teeth, check_tooth_count


def cadence_to_omega(rpm: float) -> float:
    """Convert a cadence in rev/min to rad/s."""
    return float(rpm * (2 * np.pi / 60))


def speed_ratio(teeth: Sequence[int]) -> float:
    """Rear-to-front angular speed ratio N_front / N_rear."""
    front, rear = check_teeth(teeth)
    return front / rear


def rear_angular_velocity(teeth: Sequence[int], omega: float) -> float:
    """Angular velocity of the rear sprocket (rad/s)."""
    return check_magnitude(omega, "omega") * speed_ratio(teeth)


def engagement_rate(teeth: Sequence[int], omega: float) -> float:
    """Link engagements per second on each sprocket.

    Both sprockets see the same rate: N_front * omega / (2 pi).
    """
    front, _ = check_teeth(teeth)
    return float(front * check_magnitude(omega, "omega") / (2 * np.pi))


def articulation_angles(teeth: Sequence[int]) -> tuple[float, float]:
    """Link articulation angle 2 pi / N on the front and rear sprockets (rad)."""
    front, rear = check_teeth(teeth)
    return float(2 * np.pi / front), float(2 * np.pi / rear)


def pitch_radius(pitch: float, n: int) -> float:
    """Pitch-circle radius of an N-tooth sprocket (m).

    r = p / (2 sin(pi / N))
    """
    pitch = check_magnitude(pitch, "pitch")
    n = check_tooth_count(n, "n")
    if n < 2:
        # degenerate polygon: a single pitch spans the diameter
        return pitch / 2
    return float(pitch / (2 * np.sin(np.pi / n)))


def chain_speed(pitch: float, teeth: Sequence[int], omega: float) -> float:
    """Mean linear chain speed (m/s): one pitch per engagement."""
    return check_magnitude(pitch, "pitch") * engagement_rate(teeth, omega)


def input_power(t0: float, pitch: float, teeth: Sequence[int], omega: float) -> float:
    """Power carried into the drive by the chain tension (W).

    P_in = T0 * v_chain
    """
    return check_magnitude(t0, "t0") * chain_speed(pitch, teeth, omega)
