"""Run the full fetch, parse and write pipeline for one report."""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

import requests

from trello_report.api_utils import fetch_board_data
from trello_report.comment_parser import (
    get_recent_comments,
    parse_comments,
    sort_comments,
)
from trello_report.config import Config, load_config, validate_config
from trello_report.exceptions import ReportError
from trello_report.report import format_report, write_report

log = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a report run: either a written file or an error."""

    report_date: Optional[str] = None
    path: Optional[Path] = None
    report: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Whether the report was generated and written."""
        return self.error is None


def default_report_date(date_format: str, today: Optional[date] = None) -> str:
    """Format today's date (or the given one) with the configured format."""
    return (today or date.today()).strftime(date_format)


def build_report(
    config: Config,
    report_date: str,
    session: Optional[requests.Session] = None,
) -> str:
    """Fetch the board and render the report text for a date.

    Raises:
        MissingConfiguration: If the board ID or credentials are missing
        DataUnavailable: If the board data cannot be retrieved

    """
    validate_config(config)

    data = fetch_board_data(config.board_id, config.auth, session=session)

    comments = get_recent_comments(data, report_date)
    parsed = parse_comments(comments, config.sections)
    ordered = sort_comments(parsed)

    log.info("Found %d report entries for %s", len(ordered), report_date)
    return format_report(report_date, ordered)


def run_report(
    report_date: Optional[str] = None,
    config_file: Optional[Path] = None,
    reports_dir: Optional[Path] = None,
    session: Optional[requests.Session] = None,
) -> RunResult:
    """Generate and write the report, returning the outcome.

    Args:
        report_date: Date to report on; defaults to today in ``dateFormat``
        config_file: Path to the JSON config (default: config.json)
        reports_dir: Directory reports are written to (default: reports)
        session: HTTP session for the board API

    Returns:
        A RunResult carrying the written path, or the error message

    """
    result = RunResult(report_date=report_date)

    try:
        config = load_config(config_file)
        if not result.report_date:
            result.report_date = default_report_date(config.date_format)

        result.report = build_report(config, result.report_date, session=session)
        result.path = write_report(result.report_date, result.report, reports_dir)

    except (ReportError, OSError) as e:
        result.error = str(e)
        return result

    log.info("Successfully generated report for %s", result.report_date)
    return result
