"""Command line entry point."""
import argparse
import sys
from pathlib import Path
from typing import Optional

from statementflow.config import get_settings
from statementflow.parser import Aggregator, ParseSuccess, parse_statement_file
from statementflow.utils import ConfigError, get_logger


def _print_groups(result: ParseSuccess, tolerance: float) -> None:
    """Print grouped expenses and the total cross-check."""
    for group in result.data:
        print(f"\n{group.category}  ({group.count} transactions, {group.total_amount:,.2f})")
        print("-" * 70)
        for txn in group.transactions:
            print(f"{txn.date:<12} {txn.description[:44]:<44} {txn.amount:>12,.2f}")

    aggregator = Aggregator()
    print(f"\nParsed total: {aggregator.parsed_total(result.data):,.2f}")

    if result.statement_total is None:
        print("Statement total: not found")
        return

    comparison = aggregator.compare_with_statement_total(result.data, result.statement_total, tolerance)
    print(f"Statement total: {comparison.statement_total:,.2f}")
    if comparison.is_mismatch:
        print(f"! Totals differ by {comparison.difference:,.2f}")


def parse_command(path: Path, as_json: bool) -> int:
    """Parse one statement file and print the result."""
    result = parse_statement_file(path)

    if as_json:
        print(result.model_dump_json(indent=2))
    elif result.success:
        _print_groups(result, get_settings().total_mismatch_tolerance)
    else:
        print(f"✗ {result.error}")

    return 0 if result.success else 1


def _configured_log_level() -> Optional[str]:
    # A broken config is reported by the parse itself
    try:
        return get_settings().log_level
    except ConfigError:
        return None


def main(argv=None):
    """Main entry point for the StatementFlow CLI."""
    parser = argparse.ArgumentParser(description="StatementFlow statement parser")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Parse a statement PDF or text file")
    parse_parser.add_argument("file", type=Path, help="Statement file (.pdf or extracted text)")
    parse_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parse_parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override the configured log level"
    )

    args = parser.parse_args(argv)
    get_logger(args.log_level or _configured_log_level())

    if args.command == "parse":
        sys.exit(parse_command(args.file, args.json))


if __name__ == "__main__":
    main()
