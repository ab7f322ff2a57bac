"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys

from rottnest_birds import __version__
from rottnest_birds.config import get_settings
from rottnest_birds.datasources.birdata import BirdataError
from rottnest_birds.flows.analyze import analyze_all
from rottnest_birds.flows.extract import extract_all
from rottnest_birds.store import DataStore


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="rottnest-birds",
        description="Extract and summarise Rottnest Island bird survey data",
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
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("extract", help="Filter the regional export and merge sightings")
    subparsers.add_parser("analyze", help="Derive summary tables from the merged file")
    subparsers.add_parser("run", help="Extract then analyze")
    subparsers.add_parser("info", help="Show application info")

    return parser


def cmd_extract(args: argparse.Namespace) -> int:
    """Handle the 'extract' command."""
    settings = get_settings()
    if getattr(args, "debug", False):
        print(f"Debug mode enabled. Settings: {settings}")

    try:
        result = extract_all(
            surveys_path=settings.surveys_file,
            sightings_path=settings.sightings_file,
            merged_path=settings.merged_file,
        )
    except BirdataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Extracted {result['rows']} rows to {result['output']}")
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the 'analyze' command."""
    settings = get_settings()
    if getattr(args, "debug", False):
        print(f"Debug mode enabled. Settings: {settings}")

    try:
        result = analyze_all(
            merged_path=settings.merged_file,
            start_date_format=settings.start_date_format,
            start_date_dayfirst=settings.start_date_dayfirst,
            expected_survey_years=settings.expected_survey_years,
        )
    except BirdataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Analyzed {result['rows_analyzed']} rows; tables in {result['output']}")
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the 'run' command: extract then analyze."""
    exit_code = cmd_extract(args)
    if exit_code != 0:
        return exit_code
    return cmd_analyze(args)


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data directory: {settings.data_dir}")
    merged = DataStore(settings.data_dir).file_path(settings.merged_file)
    print(f"Merged observations: {merged or 'not extracted yet'}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "extract": cmd_extract,
        "analyze": cmd_analyze,
        "run": cmd_run,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
