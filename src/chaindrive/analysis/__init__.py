"""Analysis helpers: sensitivity scans and parameter sweeps."""

from .sensitivity import sensitivity_scan
from .sweeps import best_combination, sweep_cadence, sweep_gears

__all__ = ["best_combination", "sensitivity_scan", "sweep_cadence", "sweep_gears"]
