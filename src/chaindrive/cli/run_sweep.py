"""Gear-combination sweep CLI.

Usage:
    python -m chaindrive.cli.run_sweep --fronts 34 50 --rears 11 13 15 17 21 25

Outputs JSON with one record per combination and the most efficient one.
"""

from __future__ import annotations

import argparse
import json

from pydantic import ValidationError

from ..core.errors import InvalidArgumentError
from ..core.logging import get_logger, set_log_level
from .options import add_operating_args, config_from_args

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Sweep sprocket combinations at one cadence and tension.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = invalid input).
    """
    parser = argparse.ArgumentParser(description="Sweep chain drive efficiency over gears")
    add_operating_args(parser)
    parser.add_argument("--fronts", type=int, nargs="+", required=True, help="Chainring teeth")
    parser.add_argument("--rears", type=int, nargs="+", required=True, help="Cog teeth")

    args = parser.parse_args(argv)
    set_log_level(args.log_level)

    from ..analysis.sweeps import best_combination, sweep_gears

    try:
        config = config_from_args(args)
        records = sweep_gears(
            config.to_drive_params(), args.fronts, args.rears, config.to_coefficients()
        )
    except (InvalidArgumentError, ValidationError) as exc:
        logger.error("invalid sweep input", error=str(exc))
        return 2

    logger.info("sweep complete", n_combinations=len(records))

    output = {
        "records": records,
        "best": best_combination(records),
    }

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
