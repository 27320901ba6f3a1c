"""
Gilded Rose - Command Line Runner
=================================

Prints the day-by-day report for the standard shop inventory.

Usage:
    gilded-rose [--days N] [--csv PATH] [--summary] [--log-level LEVEL]
    python -m gilded_rose.cli --days 30
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .simulation import default_inventory, render_report, simulate, summarize
from .utils.logger import LogContext, get_logger, log_history_info
from .validators import InventoryValidator

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Run the Gilded Rose inventory simulation')
    parser.add_argument('--days', type=int, default=config.default_days,
                        help='Number of days to simulate')
    parser.add_argument('--csv', type=Path, default=config.output_path,
                        help='Write the history table to this CSV file')
    parser.add_argument('--summary', action='store_true',
                        help='Print a per-category summary of the last day')
    parser.add_argument('--log-level', default=config.log_level.upper(), type=str.upper,
                        choices=LOG_LEVELS, help='Logging level')
    parser.add_argument('--log-file', type=Path, default=config.log_file,
                        help='Also write logs to this file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    config = Config()
    args = build_parser(config).parse_args(argv)

    if args.days < 0:
        print(f"--days must be >= 0, got {args.days}", file=sys.stderr)
        return 2

    config = Config(log_level=args.log_level, log_file=args.log_file,
                    default_days=args.days, output_path=args.csv)
    logger = get_logger('gilded_rose', log_file=config.log_file, level=config.log_level_value)

    print("OMGHAI!")

    with LogContext(logger, f"Simulating {args.days} day(s)"):
        history = simulate(default_inventory(), args.days, config)

    log_history_info(logger, history)

    result = InventoryValidator(config).validate_history(history)
    for error in result.errors:
        logger.warning(error)

    print(render_report(history))

    if args.summary:
        print(summarize(history).to_string())

    if config.output_path:
        config.output_path.parent.mkdir(parents=True, exist_ok=True)
        history.to_csv(config.output_path, index=False)
        logger.info(f"History written to {config.output_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
