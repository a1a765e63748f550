"""Trello Report: 1:1 reports built from the day's Trello card comments.

This library fetches comment activity from a Trello board, keeps the
comments for a given date, parses them into titled lists ordered by the
configured report sections, and writes the result as a plain-text report.
"""

from .comment_parser import (
    filter_comments,
    get_recent_comments,
    humanize_link,
    parse_comment,
    parse_comments,
    resolve_section,
    sort_comments,
)
from .config import Config, load_config, validate_config
from .exceptions import DataUnavailable, MissingConfiguration, ReportError
from .generator import RunResult, run_report
from .models import Card, ParsedComment, RawComment, SectionConfig
from .report import format_report, write_report

__version__ = "0.1.0"

__all__ = [
    # Data models
    "Card",
    "ParsedComment",
    "RawComment",
    "SectionConfig",
    # Configuration
    "Config",
    "load_config",
    "validate_config",
    # Parsing
    "filter_comments",
    "get_recent_comments",
    "humanize_link",
    "parse_comment",
    "parse_comments",
    "resolve_section",
    "sort_comments",
    # Report
    "format_report",
    "write_report",
    "RunResult",
    "run_report",
    # Errors
    "DataUnavailable",
    "MissingConfiguration",
    "ReportError",
]
