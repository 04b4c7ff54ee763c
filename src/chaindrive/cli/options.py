"""Shared argparse options for the chaindrive CLIs."""

from __future__ import annotations

import argparse
from typing import Any

from ..core.config import ChainDriveConfig, default_config, load_config, merge_config
from ..core.logging import LEVELS


def add_operating_args(parser: argparse.ArgumentParser) -> None:
    """Register config-file and operating-point override options."""
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--cadence-rpm", type=float, default=None, help="Pedaling cadence (rpm)")
    parser.add_argument("--tension", type=float, default=None, help="Free chain tension (N)")
    parser.add_argument("--offset-deg", type=float, default=None, help="Chain offset angle (deg)")
    parser.add_argument(
        "--mu",
        type=float,
        nargs=3,
        default=None,
        metavar=("MU1", "MU2", "MU3"),
        help="Friction coefficients (pin/bushing, offset, roller)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARN",
        choices=sorted(LEVELS),
        help="Minimum level for JSON logs on stderr",
    )


def config_from_args(args: argparse.Namespace, **extra: Any) -> ChainDriveConfig:
    """Load the base config and apply any command-line overrides.

    Args:
        args: Parsed arguments from a parser set up by ``add_operating_args``.
        extra: Additional ``operating`` overrides (e.g. tooth counts).

    Returns:
        Validated configuration.
    """
    base = load_config(args.config) if args.config else default_config()

    operating: dict[str, Any] = {}
    if args.cadence_rpm is not None:
        operating["cadence_rpm"] = args.cadence_rpm
    if args.tension is not None:
        operating["tension_n"] = args.tension
    if args.offset_deg is not None:
        operating["offset_angle_deg"] = args.offset_deg
    operating.update({k: v for k, v in extra.items() if v is not None})

    overrides: dict[str, Any] = {}
    if operating:
        overrides["operating"] = operating
    if args.mu is not None:
        mu1, mu2, mu3 = args.mu
        overrides["friction"] = {"pin_bushing": mu1, "offset": mu2, "roller": mu3}

    return merge_config(base, overrides) if overrides else base
