"""Chain module: drive kinematics, loss formulas and power ledger."""

from .ledger import LossBreakdown, evaluate_drive
from .losses import (
    P1,
    P2,
    P3,
    Ptotal,
    efficiency,
    eta,
    offset_loss,
    pin_bushing_loss,
    roller_loss,
    total_loss,
    η,
)

__all__ = [
    "LossBreakdown",
    "P1",
    "P2",
    "P3",
    "Ptotal",
    "efficiency",
    "eta",
    "evaluate_drive",
    "offset_loss",
    "pin_bushing_loss",
    "roller_loss",
    "total_loss",
    "η",
]
