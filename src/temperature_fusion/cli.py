"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

from temperature_fusion import __version__
from temperature_fusion.config import get_settings
from temperature_fusion.errors import ConversionError
from temperature_fusion.flows.report import build_report
from temperature_fusion.fusion import fuse_many
from temperature_fusion.reference import load_sample_sources
from temperature_fusion.schemas import TemperatureUnit
from temperature_fusion.tables import LOCATION, MONTHS, TEMP, UNITS

UNIT_CHOICES = [u.value for u in TemperatureUnit]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="temperature-fusion",
        description="Combine temperature series reported in different units",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    fuse_parser = subparsers.add_parser("fuse", help="Fuse the sample sources and print the table")
    fuse_parser.add_argument(
        "--unit",
        type=str.lower,
        choices=UNIT_CHOICES,
        default=None,
        help="Target unit (default: target_unit from settings)",
    )

    report_parser = subparsers.add_parser("report", help="Build the HTML comparison report")
    report_parser.add_argument(
        "--unit",
        type=str.lower,
        choices=UNIT_CHOICES,
        default=None,
        help="Target unit (default: target_unit from settings)",
    )
    report_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: output_dir from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    """Send library logs to stderr; verbose only in debug mode."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Target unit: {settings.target_unit}")
    print(f"Output directory: {settings.output_dir}")
    return 0


def cmd_fuse(args: argparse.Namespace) -> int:
    """Handle the 'fuse' command: print the fused sample table."""
    unit = args.unit or get_settings().target_unit
    try:
        fused = fuse_many(load_sample_sources(), unit)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    with pd.option_context("display.max_rows", None):
        print(fused[[LOCATION, MONTHS, TEMP, UNITS]].to_string(index=False))
    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Handle the 'report' command: run the report flow."""
    try:
        result = build_report(target_unit=args.unit, output_dir=args.output)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {result['rows']} rows in {result['unit']} to {result['output']}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(getattr(args, "debug", False))

    commands = {
        "info": cmd_info,
        "fuse": cmd_fuse,
        "report": cmd_report,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
