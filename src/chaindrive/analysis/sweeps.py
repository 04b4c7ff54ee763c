"""Parameter sweeps over gear selection and cadence."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from ..chain.geometry import cadence_to_omega, speed_ratio
from ..chain.ledger import evaluate_drive
from ..core.types import DriveParams, LossCoefficients


def sweep_gears(
    params: DriveParams,
    fronts: Iterable[int],
    rears: Iterable[int],
    coeffs: LossCoefficients | None = None,
) -> list[dict]:
    """Evaluate every front/rear sprocket combination.

    Args:
        params: Base operating point (teeth are replaced per combination).
        fronts: Chainring tooth counts.
        rears: Cog tooth counts.
        coeffs: Model coefficients.

    Returns:
        Records ordered front-major, each with teeth, ratio, loss breakdown
        and efficiency.
    """
    rears = list(rears)
    records = []
    for front in fronts:
        for rear in rears:
            point = params.replace(teeth=(front, rear))
            ledger = evaluate_drive(point, coeffs)
            records.append(
                {
                    "front": point.teeth[0],
                    "rear": point.teeth[1],
                    "ratio": speed_ratio(point.teeth),
                    **ledger.to_dict(),
                }
            )
    return records


def sweep_cadence(
    params: DriveParams,
    rpms: Iterable[float],
    coeffs: LossCoefficients | None = None,
) -> list[dict]:
    """Evaluate the drive across pedaling cadences given in rev/min."""
    records = []
    for rpm in np.asarray(list(rpms), dtype=np.float64):
        ledger = evaluate_drive(params.replace(omega=cadence_to_omega(rpm)), coeffs)
        records.append({"cadence_rpm": float(rpm), **ledger.to_dict()})
    return records


def best_combination(records: list[dict]) -> dict:
    """Return the sweep record with the highest efficiency."""
    if not records:
        raise ValueError("No sweep records to rank")
    effs = np.array([r["efficiency"] for r in records], dtype=np.float64)
    return records[int(np.argmax(effs))]
