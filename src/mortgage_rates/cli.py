"""Command-line entry point for the daily rate update."""

import argparse
import logging
import os
import sys
from pathlib import Path

from mortgage_rates.exceptions import MortgageRatesException
from mortgage_rates.updater import format_summary, run_update
from mortgage_rates.utils.config import (
    RateUpdateConfig,
    get_rates_file,
    load_environment,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the update command."""
    parser = argparse.ArgumentParser(
        prog="mortgage-rates-update",
        description=(
            "Merge mortgage rates from RATE_*, APR_* and PREV_RATE_* environment "
            "variables into the rates snapshot file."
        ),
    )
    parser.add_argument(
        "--rates-file",
        type=Path,
        default=None,
        help="Snapshot file to update (default: $RATES_FILE or rates.json)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load variables from this .env file (default: search for .env)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one update and print the summary.

    Returns:
        Process exit status: 0 on success, 1 if the update failed
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    if args.env_file is not None and not args.env_file.is_file():
        logger.warning(
            "Env file %s not found; using process environment", args.env_file
        )
    load_environment(args.env_file)
    rates_file = args.rates_file or get_rates_file(os.environ)

    try:
        config = RateUpdateConfig.from_environment(os.environ)
        snapshot = run_update(rates_file, config)
    except MortgageRatesException as e:
        logger.error("❌ Error updating rates: %s", e)
        return 1

    for line in format_summary(snapshot):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
