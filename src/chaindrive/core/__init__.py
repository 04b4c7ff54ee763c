"""Core module: types, validation, configuration, logging."""

from .config import ChainDriveConfig, default_config, load_config, merge_config, save_config
from .errors import InvalidArgumentError
from .types import DriveParams, LossCoefficients

__all__ = [
    "ChainDriveConfig",
    "DriveParams",
    "InvalidArgumentError",
    "LossCoefficients",
    "default_config",
    "load_config",
    "merge_config",
    "save_config",
]
