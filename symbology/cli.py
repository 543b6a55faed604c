"""Command line interface for the symbology tools."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from symbology.config import INPUT_FORMATS, OUTPUT_FORMATS, AppConfig, ConfigError, load_config
from symbology.convert import convert_frame, convert_option
from symbology.errors import SymbologyError
from symbology.io import load_symbols_csv, save_csv
from symbology.isin import parse_isin


def _strict(args: argparse.Namespace, config: AppConfig) -> bool:
    if args.strict_calendar is None:
        return config.strict_calendar
    return args.strict_calendar


def check_isin(args: argparse.Namespace, config: AppConfig) -> int:
    failures = 0
    for code in args.codes:
        try:
            isin = parse_isin(code)
        except SymbologyError as exc:
            logging.error("Invalid ISIN %s: %s", code, exc)
            print(f"{code}\tINVALID")
            failures += 1
            continue
        logging.info(
            "Valid ISIN %s country=%s identifier=%s checksum=%s",
            isin,
            isin.country_code,
            isin.identifier,
            isin.checksum_digit,
        )
        print(f"{code}\tOK")
    return 1 if failures else 0


def convert_one(args: argparse.Namespace, config: AppConfig) -> int:
    try:
        result = convert_option(
            args.text,
            args.input_format or config.input_format,
            args.output_format or config.output_format,
            strict_calendar=_strict(args, config),
        )
    except SymbologyError as exc:
        logging.error("Could not convert %r: %s", args.text, exc)
        return 1
    print(result)
    return 0


def convert_csv(args: argparse.Namespace, config: AppConfig) -> int:
    column = args.column or config.symbol_column
    try:
        df = load_symbols_csv(Path(args.in_path), column)
    except (FileNotFoundError, ValueError) as exc:
        logging.error("Input error: %s", exc)
        return 1

    result = convert_frame(
        df,
        column,
        args.input_format or config.input_format,
        args.output_format or config.output_format,
        strict_calendar=_strict(args, config),
    )
    save_csv(result, Path(args.out_path))

    failed = int((result["error"] != "").sum())
    logging.info("Converted %s rows (%s failed) -> %s", len(result), failed, args.out_path)
    return 0


def _add_format_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--from", dest="input_format", choices=INPUT_FORMATS, default=None)
    parser.add_argument("--to", dest="output_format", choices=OUTPUT_FORMATS, default=None)
    parser.add_argument(
        "--strict-calendar",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reject expiration dates that do not exist in the calendar (overrides config)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ISIN and option symbol tools")
    parser.add_argument("--config", help="Path to YAML config file", default=None)
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    isin_parser = subparsers.add_parser("isin", help="Validate ISIN codes")
    isin_parser.add_argument("codes", nargs="+", help="ISIN codes to check")
    isin_parser.set_defaults(func=check_isin)

    option_parser = subparsers.add_parser("option", help="Convert one option symbol")
    option_parser.add_argument("text", help="Option symbol, quote it if it has spaces")
    _add_format_arguments(option_parser)
    option_parser.set_defaults(func=convert_one)

    csv_parser = subparsers.add_parser("convert-csv", help="Convert a CSV column of option symbols")
    csv_parser.add_argument("--in", dest="in_path", required=True, help="Input CSV")
    csv_parser.add_argument("--out", dest="out_path", required=True, help="Output CSV")
    csv_parser.add_argument("--column", default=None, help="Column holding the symbols")
    _add_format_arguments(csv_parser)
    csv_parser.set_defaults(func=convert_csv)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as exc:
        logging.error("Config error: %s", exc)
        return 1

    return args.func(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
