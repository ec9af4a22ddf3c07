"""CLI entry point for loading and previewing side hustle data.

Usage:
    python -m scripts.load_hustles --name side-hustles.csv [--source DIR_OR_URL] [--limit 5]
    python -m scripts.load_hustles --embedded --mode schema --analyze
"""

import argparse
import logging
import os

from hustles import (
    ParseMode,
    ParserConfig,
    RowPolicy,
    analyze_dataset,
    create_source,
    load_dataset,
    load_side_hustles,
    validate_record,
)
from hustles.query import sort_by, take
from hustles.schema import HUSTLE_NUMERIC_COLUMNS

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> ParserConfig:
    mode = ParseMode(args.mode)
    numeric = args.numeric if args.numeric else HUSTLE_NUMERIC_COLUMNS
    return ParserConfig(
        mode=mode,
        row_policy=RowPolicy(args.row_policy),
        numeric_columns=tuple(numeric) if mode is ParseMode.SCHEMA else (),
    )


def format_record(record: dict) -> str:
    return ", ".join(f"{key}={value!r}" for key, value in record.items())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load a CSV dataset and print a few records")
    parser.add_argument(
        "--source",
        default=os.environ.get("HUSTLES_SOURCE"),
        help="Directory or base URL to read from (default: $HUSTLES_SOURCE or the working dir)",
    )
    parser.add_argument("--name", help="CSV file name or URL path under the source")
    parser.add_argument("--embedded", action="store_true", help="Use the bundled sample data")
    parser.add_argument("--mode", choices=[m.value for m in ParseMode], default="infer")
    parser.add_argument("--row-policy", choices=[p.value for p in RowPolicy], default="pad")
    parser.add_argument("--numeric", nargs="+", help="Numeric columns in schema mode")
    parser.add_argument("--sort", help="Column to sort by before printing")
    parser.add_argument("--descending", action="store_true", help="Sort in descending order")
    parser.add_argument("--limit", type=int, default=5, help="Records to print")
    parser.add_argument("--require", nargs="+", default=[], help="Keys every record must have")
    parser.add_argument("--analyze", action="store_true", help="Print a structure summary")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not args.embedded and not args.name:
        parser.error("either --name or --embedded is required")

    config = build_config(args)
    if args.embedded:
        dataset = load_side_hustles(config)
    else:
        dataset = load_dataset(create_source(args.source), args.name, config)

    invalid = sum(1 for record in dataset if not validate_record(record, args.require))
    if invalid:
        logger.warning("%d of %d records failed validation", invalid, len(dataset))

    if args.sort:
        dataset = sort_by(dataset, args.sort, descending=args.descending)

    for record in take(dataset, args.limit):
        print(format_record(record))

    if args.analyze:
        summary = analyze_dataset(dataset)
        print(f"properties: {', '.join(summary.properties)}")
        for prop in summary.properties:
            print(f"  {prop}: {summary.types[prop]}")
        print(f"sampled: {summary.sample_count}")

    return 0 if dataset else 1


if __name__ == "__main__":
    raise SystemExit(main())
