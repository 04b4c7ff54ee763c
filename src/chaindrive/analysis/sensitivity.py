"""One-at-a-time sensitivity of efficiency and loss to drive parameters."""

from __future__ import annotations

from ..chain.ledger import evaluate_drive
from ..core.types import DriveParams, LossCoefficients

# Scalar parameters perturbed by the scan; friction entries are indexed into mu
SCALAR_PARAMS = ("pitch", "rho", "psi", "r_roller", "t0", "omega", "gamma")
FRICTION_PARAMS = ("mu1", "mu2", "mu3")


def _metrics(params: DriveParams, coeffs: LossCoefficients | None) -> dict[str, float]:
    ledger = evaluate_drive(params, coeffs)
    return {"efficiency": ledger.efficiency, "loss": ledger.total}


def _perturbed(params: DriveParams, name: str, value: float) -> DriveParams:
    if name in FRICTION_PARAMS:
        mu = list(params.mu)
        mu[FRICTION_PARAMS.index(name)] = value
        return params.replace(mu=tuple(mu))
    return params.replace(**{name: value})


def _base_value(params: DriveParams, name: str) -> float:
    if name in FRICTION_PARAMS:
        return params.mu[FRICTION_PARAMS.index(name)]
    return getattr(params, name)


def sensitivity_scan(
    params: DriveParams,
    coeffs: LossCoefficients | None = None,
    rel_step: float = 0.01,
) -> dict:
    """Perturb each parameter +/- rel_step and measure output sensitivity.

    Parameters at zero are skipped (no relative step exists). Negative
    perturbations of non-negative magnitudes are floored at zero.

    Args:
        params: Base operating point.
        coeffs: Model coefficients.
        rel_step: Relative perturbation size.

    Returns:
        Dict with ``base_metrics`` and a ``sensitivities`` list, one record
        per parameter with deltas and normalized (elasticity) sensitivities.
    """
    if rel_step <= 0:
        raise ValueError(f"rel_step must be > 0, got {rel_step}")

    base_metrics = _metrics(params, coeffs)
    sensitivities = []

    for name in FRICTION_PARAMS + SCALAR_PARAMS:
        x0 = _base_value(params, name)
        if x0 == 0:
            continue

        delta = abs(x0) * rel_step
        x_plus = x0 + delta
        x_minus = x0 - delta
        if name not in ("psi", "gamma"):
            x_minus = max(x_minus, 0.0)

        metrics_plus = _metrics(_perturbed(params, name, x_plus), coeffs)
        metrics_minus = _metrics(_perturbed(params, name, x_minus), coeffs)

        sens = {
            "param": name,
            "base_value": float(x0),
            "delta": float(delta),
        }

        for metric in ("efficiency", "loss"):
            d_plus = metrics_plus[metric] - base_metrics[metric]
            d_minus = metrics_minus[metric] - base_metrics[metric]
            sens[f"d_{metric}_plus"] = float(d_plus)
            sens[f"d_{metric}_minus"] = float(d_minus)
            # Normalized sensitivity: (d_metric / metric) / (d_param / param)
            if base_metrics[metric] != 0:
                sens[f"sens_{metric}"] = float(
                    (d_plus - d_minus)
                    / base_metrics[metric]
                    / ((x_plus - x_minus) / x0)
                )
            else:
                sens[f"sens_{metric}"] = 0.0

        sensitivities.append(sens)

    return {
        "base_metrics": base_metrics,
        "sensitivities": sensitivities,
    }
