"""CLI to inspect normalized rates and price parking windows offline."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import UTC, datetime

from pydantic import ValidationError

from spotrate.core.config import load_service_config
from spotrate.rates.errors import RateError
from spotrate.rates.table import RateTable

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

COLUMNS = ["bucket", "weekday", "start_clock", "end_clock", "price", "source_timezone"]


def _load_table(seed: str | None) -> RateTable | None:
    seed_path = seed or load_service_config().seed_rate_file
    try:
        return RateTable.from_seed_file(seed_path)
    except (FileNotFoundError, ValidationError, RateError) as e:
        logger.error(f"Failed to load rates from {seed_path}: {e}")
        return None


def _parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 timestamp that carries a UTC offset."""
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        raise argparse.ArgumentTypeError(f"timestamp needs a UTC offset: {value}")
    try:
        dt.astimezone(UTC)
    except OverflowError as e:
        raise argparse.ArgumentTypeError(f"timestamp out of range: {value}") from e
    return dt


def cmd_show(args: argparse.Namespace) -> int:
    """Print the normalized rate table."""
    table = _load_table(args.seed)
    if table is None:
        return 1

    rows = [
        {"bucket": bucket, **asdict(rule)}
        for bucket, rules in table.snapshot().items()
        for rule in rules
    ]

    if args.format == "json":
        print(json.dumps(rows, indent=2))
        return 0

    widths = {col: len(col) for col in COLUMNS}
    for row in rows:
        for col in COLUMNS:
            widths[col] = max(widths[col], len(str(row[col])))

    header = " | ".join(col.ljust(widths[col]) for col in COLUMNS)
    print(header)
    print("-" * len(header))
    for row in rows:
        print(" | ".join(str(row[col]).ljust(widths[col]) for col in COLUMNS))
    return 0


def cmd_quote(args: argparse.Namespace) -> int:
    """Print the price for a parking window."""
    table = _load_table(args.seed)
    if table is None:
        return 1

    try:
        price = table.query(args.start, args.end)
    except RateError as e:
        logger.error(f"No rate for {args.start.isoformat()} - {args.end.isoformat()}: {e}")
        return 1

    print(price)
    return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Inspect parking rates and price parking windows",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument(
        "--seed", help="Rates JSON file (default: SEED_RATE_FILE or config/seed_rates.json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # show command
    show_parser = subparsers.add_parser("show", help="Show rates normalized to UTC")
    show_parser.add_argument(
        "--format", choices=["table", "json"], default="table", help="Output format"
    )
    show_parser.set_defaults(func=cmd_show)

    # quote command
    quote_parser = subparsers.add_parser("quote", help="Price a parking window")
    quote_parser.add_argument(
        "--start", type=_parse_instant, required=True, help="e.g. 2020-04-03T09:30:00-05:00"
    )
    quote_parser.add_argument(
        "--end", type=_parse_instant, required=True, help="e.g. 2020-04-03T14:30:00-05:00"
    )
    quote_parser.set_defaults(func=cmd_quote)

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
