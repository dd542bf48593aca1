"""CLI entry point for the statement parser."""

import argparse
import sys
from pathlib import Path

from loguru import logger

from statement_engine.engine import StatementEngine
from statement_engine.errors import StatementSourceError
from statement_engine.export import write_csv, write_json
from statement_engine.logging_config import DebugArtifacts, configure_logging
from statement_engine.models import Dialect, TransactionRecord, TransactionType


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(
        description="Extract transactions from bank statement PDFs or text dumps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse statements and write transactions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s statement.pdf -o transactions.csv
  %(prog)s sbi.pdf --dialect ledger -o sbi.json
  %(prog)s statements/*.pdf --debug
        """,
    )
    parse_parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="PDF or text file(s) to parse",
    )
    parse_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("transactions.csv"),
        help="Output file path (default: transactions.csv)",
    )
    parse_parser.add_argument(
        "--format",
        choices=["csv", "json"],
        default=None,
        help="Output format (default: from the output file extension, else csv)",
    )
    parse_parser.add_argument(
        "--dialect",
        choices=[d.value for d in Dialect],
        default=None,
        help="Statement layout (default: detect from text; ledger is never detected)",
    )
    parse_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parse_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output and save artifacts",
    )

    # Handle bare usage: "statement-engine file.pdf" means "parse file.pdf"
    if argv and not argv[0].startswith("-") and argv[0] not in subparsers.choices:
        argv = ["parse", *argv]

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def output_format(args: argparse.Namespace) -> str:
    if args.format:
        return args.format
    return "json" if args.output.suffix.lower() == ".json" else "csv"


def print_summary(records: list[TransactionRecord]) -> None:
    """Print counts and totals per transaction type."""
    counts = {t: 0 for t in TransactionType}
    totals = {t: 0.0 for t in TransactionType}
    for record in records:
        counts[record.type] += 1
        totals[record.type] += float(record.amount)

    print("\n" + "=" * 50)
    print("SUMMARY")
    print("=" * 50)
    print(f"Total transactions: {len(records)}")
    for tx_type in TransactionType:
        print(f"  {tx_type.value:10s} {counts[tx_type]:4d}  {totals[tx_type]:>12,.2f}")
    print("=" * 50)


def run_parse(args: argparse.Namespace) -> int:
    """Run the parse command over every input file."""
    paths: list[Path] = args.inputs
    for input_path in paths:
        if not input_path.exists():
            logger.error(f"File not found: {input_path}")
            return 1

    debug_artifacts = None
    if args.debug:
        debug_artifacts = DebugArtifacts(args.output.parent / "debug")

    engine = StatementEngine(debug_artifacts=debug_artifacts)
    records: list[TransactionRecord] = []
    try:
        for i, path in enumerate(paths):
            logger.info(f"[{i + 1}/{len(paths)}] {path.name}")
            try:
                records.extend(engine.parse_file(path, dialect=args.dialect))
            except StatementSourceError as e:
                logger.error(str(e))
                return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130

    if not records:
        print("No transactions found.")
        return 1

    if output_format(args) == "json":
        write_json(records, args.output)
    else:
        write_csv(records, args.output)

    if args.verbose or args.debug:
        print_summary(records)

    print(f"\nOutput written to: {args.output}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    verbose = getattr(args, "verbose", False)
    debug = getattr(args, "debug", False)
    configure_logging(verbose=verbose, debug=debug)

    if args.command == "parse":
        return run_parse(args)
    logger.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
