"""Power losses and efficiency of a bicycle chain drive."""

from .chain import (
    P1,
    P2,
    P3,
    LossBreakdown,
    Ptotal,
    efficiency,
    eta,
    evaluate_drive,
    offset_loss,
    pin_bushing_loss,
    roller_loss,
    total_loss,
    η,
)
from .core import DriveParams, InvalidArgumentError, LossCoefficients

__version__ = "0.1.0"

__all__ = [
    "DriveParams",
    "InvalidArgumentError",
    "LossBreakdown",
    "LossCoefficients",
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
