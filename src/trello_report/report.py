"""Rendering and writing of the plain-text report."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader

from trello_report.file_utils import clean_filename, write_text_file
from trello_report.models import ParsedComment

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
REPORT_TEMPLATE = "report.txt"
DEFAULT_REPORTS_DIR = Path("reports")

jinja_env = Environment(loader=FileSystemLoader(TEMPLATE_DIR))


def report_title(report_date: str) -> str:
    """Get the heading of the report for a date."""
    return f"1:1 Report for {report_date}"


def format_report(
    report_date: str, comments: Iterable[Optional[ParsedComment]]
) -> str:
    """Render ordered comments into the report document.

    Args:
        report_date: Date the report covers
        comments: Entries in report order; None entries are skipped

    Returns:
        The full report text

    """
    template = jinja_env.get_template(REPORT_TEMPLATE)
    return template.render(title=report_title(report_date), comments=list(comments))


def report_path(report_date: str, reports_dir: Optional[Path] = None) -> Path:
    """Get the file a report for the given date is written to."""
    if reports_dir is None:
        reports_dir = DEFAULT_REPORTS_DIR
    return Path(reports_dir) / f"{clean_filename(report_date)}.txt"


def write_report(
    report_date: str, report: str, reports_dir: Optional[Path] = None
) -> Path:
    """Write a report to disk, replacing any earlier one for the same date."""
    path = report_path(report_date, reports_dir)
    write_text_file(report, path, description=f"report for {report_date}")
    return path
