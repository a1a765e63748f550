#!/usr/bin/env python3
"""Command-line interface for the Trello 1:1 report generator."""

import argparse
import logging
from pathlib import Path

from trello_report.config import DEFAULT_CONFIG_FILE
from trello_report.generator import run_report
from trello_report.logging_utils import setup_cli_logging
from trello_report.report import DEFAULT_REPORTS_DIR

log = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate a 1:1 report from the day's Trello card comments"
    )
    parser.add_argument(
        "date",
        nargs="?",
        default=None,
        help="Date to report on, as it appears in comments (default: today)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to the JSON configuration (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--reports-dir",
        type=Path,
        default=DEFAULT_REPORTS_DIR,
        help=f"Directory reports are written to (default: {DEFAULT_REPORTS_DIR})",
    )
    parser.add_argument(
        "--print",
        dest="print_report",
        action="store_true",
        help="Also print the generated report",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    setup_cli_logging(verbose=args.verbose)

    result = run_report(
        report_date=args.date,
        config_file=args.config,
        reports_dir=args.reports_dir,
    )

    if not result.ok:
        # Failures are reported but do not change the exit status
        log.error("%s", result.error)
        return

    log.debug("Report written to %s", result.path)
    if args.print_report:
        print(result.report, end="")


if __name__ == "__main__":
    main()
