"""Tests for sprocket and chain kinematics."""

import math

import pytest

from chaindrive.chain.geometry import (
    articulation_angles,
    cadence_to_omega,
    chain_speed,
    engagement_rate,
    input_power,
    pitch_radius,
    rear_angular_velocity,
    speed_ratio,
)
from chaindrive.core.errors import InvalidArgumentError


def test_cadence_conversion():
    assert cadence_to_omega(60.0) == pytest.approx(2 * math.pi)
    assert cadence_to_omega(0.0) == 0.0


def test_speed_ratio_and_rear_speed(ref_omega):
    assert speed_ratio([48, 24]) == 2.0
    assert rear_angular_velocity([48, 24], ref_omega) == pytest.approx(2 * ref_omega)


def test_engagement_rate_matches_both_sprockets(ref_omega):
    # 48 teeth at 80 rpm -> 64 links per second; the rear at 160 rpm with 24 teeth sees the same
    assert engagement_rate([48, 24], ref_omega) == pytest.approx(64.0)
    rear_rate = 24 * rear_angular_velocity([48, 24], ref_omega) / (2 * math.pi)
    assert engagement_rate([48, 24], ref_omega) == pytest.approx(rear_rate)


def test_articulation_angles():
    front, rear = articulation_angles([48, 24])
    assert front == pytest.approx(math.pi / 24)
    assert rear == pytest.approx(math.pi / 12)


def test_pitch_radius():
    assert pitch_radius(0.0127, 50) == pytest.approx(0.0127 / (2 * math.sin(math.pi / 50)))
    # Large sprockets approach the circumference relation N p = 2 pi r
    assert pitch_radius(0.0127, 200) == pytest.approx(200 * 0.0127 / (2 * math.pi), rel=1e-4)
    assert pitch_radius(0.0127, 1) == pytest.approx(0.0127 / 2)


@pytest.mark.parametrize("n", [0, -3, 12.5, "x"])
def test_pitch_radius_rejects_bad_tooth_count(n):
    with pytest.raises(InvalidArgumentError, match="n must"):
        pitch_radius(0.0127, n)


def test_pitch_radius_accepts_integral_float():
    assert pitch_radius(0.0127, 24.0) == pitch_radius(0.0127, 24)


def test_chain_speed_and_input_power(ref_omega):
    assert chain_speed(0.01222, [48, 24], ref_omega) == pytest.approx(0.01222 * 64)
    assert input_power(300, 0.01222, [48, 24], ref_omega) == pytest.approx(234.624, rel=1e-12)
