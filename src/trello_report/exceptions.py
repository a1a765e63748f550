"""Custom exceptions for report generation."""


class ReportError(Exception):
    """Base exception for report generation errors."""


class MissingConfiguration(ReportError):
    """A required configuration value is absent."""


class DataUnavailable(ReportError):
    """The board API did not return the expected data."""
