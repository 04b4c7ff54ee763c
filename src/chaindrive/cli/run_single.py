"""Single operating-point evaluation CLI.

Usage:
    python -m chaindrive.cli.run_single --front 48 --rear 24 --cadence-rpm 80

Outputs JSON with the drive parameters and loss breakdown to stdout.
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
    """Evaluate one chain drive operating point.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = invalid input).
    """
    parser = argparse.ArgumentParser(description="Evaluate chain drive losses and efficiency")
    add_operating_args(parser)
    parser.add_argument("--front", type=int, default=None, help="Chainring teeth")
    parser.add_argument("--rear", type=int, default=None, help="Cog teeth")

    args = parser.parse_args(argv)
    set_log_level(args.log_level)

    from ..chain.ledger import evaluate_drive

    try:
        config = config_from_args(args, front_teeth=args.front, rear_teeth=args.rear)
        params = config.to_drive_params()
        ledger = evaluate_drive(params, config.to_coefficients())
    except (InvalidArgumentError, ValidationError) as exc:
        logger.error("invalid drive input", error=str(exc))
        return 2

    logger.info("evaluated operating point", efficiency=ledger.efficiency)

    output = {
        "params": params.to_dict(),
        "losses": ledger.to_dict(),
        "is_closed": ledger.is_closed,
    }

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
