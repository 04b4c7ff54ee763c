"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from .constants import (
    ARTICULATION_FACTOR,
    REF_BUSHING_RADIUS,
    REF_CADENCE_RPM,
    REF_MU,
    REF_OFFSET_ANGLE,
    REF_PITCH,
    REF_ROLLER_RADIUS,
    REF_ROLLER_ROTATION,
    REF_TEETH,
    REF_TENSION,
    ROLLER_LOAD_RATIO,
)
from .types import DriveParams, LossCoefficients


class FrictionConfig(BaseModel):
    """Friction coefficients of the three loss sources."""

    pin_bushing: float = Field(default=REF_MU[0], ge=0.0, le=1.0)
    offset: float = Field(default=REF_MU[1], ge=0.0, le=1.0)
    roller: float = Field(default=REF_MU[2], ge=0.0, le=1.0)


class ChainConfig(BaseModel):
    """Chain geometry (SI units)."""

    pitch_m: float = Field(default=REF_PITCH, gt=0.0, le=0.1)
    bushing_radius_m: float = Field(default=REF_BUSHING_RADIUS, ge=0.0, le=0.05)
    roller_radius_m: float = Field(default=REF_ROLLER_RADIUS, ge=0.0, le=0.05)
    roller_rotation_rad: float = Field(default=REF_ROLLER_ROTATION, ge=0.0, le=2 * math.pi)


class OperatingConfig(BaseModel):
    """Operating point: cadence, tension and gear selection."""

    cadence_rpm: float = Field(default=REF_CADENCE_RPM, ge=0.0, le=300.0)
    tension_n: float = Field(default=REF_TENSION, ge=0.0, le=1e4)
    front_teeth: int = Field(default=REF_TEETH[0], ge=1, le=200)
    rear_teeth: int = Field(default=REF_TEETH[1], ge=1, le=200)
    offset_angle_deg: float = Field(
        default=math.degrees(REF_OFFSET_ANGLE), ge=-45.0, le=45.0
    )


class ModelConfig(BaseModel):
    """Dimensionless loss-model coefficients."""

    articulation_factor: float = Field(default=ARTICULATION_FACTOR, ge=0.0)
    roller_load_ratio: float = Field(default=ROLLER_LOAD_RATIO, ge=0.0)


class ChainDriveConfig(BaseModel):
    """Root configuration object."""

    friction: FrictionConfig = Field(default_factory=FrictionConfig)
    chain: ChainConfig = Field(default_factory=ChainConfig)
    operating: OperatingConfig = Field(default_factory=OperatingConfig)
    model: ModelConfig = Field(default_factory=ModelConfig)

    def to_drive_params(self) -> DriveParams:
        """Build the validated drive operating point."""
        from ..chain.geometry import cadence_to_omega

        return DriveParams(
            mu=(self.friction.pin_bushing, self.friction.offset, self.friction.roller),
            pitch=self.chain.pitch_m,
            rho=self.chain.bushing_radius_m,
            psi=self.chain.roller_rotation_rad,
            r_roller=self.chain.roller_radius_m,
            t0=self.operating.tension_n,
            teeth=(self.operating.front_teeth, self.operating.rear_teeth),
            omega=cadence_to_omega(self.operating.cadence_rpm),
            gamma=math.radians(self.operating.offset_angle_deg),
        )

    def to_coefficients(self) -> LossCoefficients:
        """Build the model coefficients."""
        return LossCoefficients(
            articulation_factor=self.model.articulation_factor,
            roller_load_ratio=self.model.roller_load_ratio,
        )


def load_config(path: str | Path) -> ChainDriveConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed ChainDriveConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return ChainDriveConfig.model_validate(data or {})


def save_config(config: ChainDriveConfig, path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False)


def default_config() -> ChainDriveConfig:
    """Return default configuration (the reference operating point)."""
    return ChainDriveConfig()


def merge_config(base: ChainDriveConfig, overrides: dict[str, Any]) -> ChainDriveConfig:
    """Merge overrides into base configuration.

    Args:
        base: Base configuration.
        overrides: Nested dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump()

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return ChainDriveConfig.model_validate(merged)
