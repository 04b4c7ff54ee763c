"""Documented example values of the five loss functions."""

import math

import pytest

from chaindrive import P1, P2, P3, Ptotal, η

OMEGA = 80 * (2 * math.pi / 60)


def test_pin_bushing_reference():
    assert P1(0.09, 0.00175968, 300, [48, 24], OMEGA) == pytest.approx(3.970776399955861, rel=1e-12)


def test_offset_reference():
    value = P2([48, 24], OMEGA, 0.09, 300, 0.00249288, math.pi / 180)
    assert value == pytest.approx(0.02952298838057144, rel=1e-12)


def test_roller_reference():
    value = P3(0.09, 300, 0.00249288, [48, 24], OMEGA, math.pi / 2)
    assert value == pytest.approx(0.02840827017479334, rel=1e-12)


def test_total_reference(ref_args):
    assert Ptotal(*ref_args) == pytest.approx(4.028707658511226, rel=1e-12)


def test_efficiency_reference(ref_args):
    assert η(*ref_args) == pytest.approx(0.9828290896987895, rel=1e-12)


def test_reference_params_match_documented_point(ref_params, ref_args):
    """DriveParams.reference() reproduces the documented argument list."""
    assert Ptotal(*ref_params.as_args()) == pytest.approx(Ptotal(*ref_args), rel=1e-15)
    assert ref_params.teeth == (48, 24)
    assert ref_params.mu == (0.09, 0.09, 0.09)


def test_ascii_alias():
    from chaindrive import efficiency, eta

    assert eta is efficiency
    assert η is efficiency
