#!/usr/bin/env python3
"""Tests for report rendering and writing."""

import tempfile
import unittest
from pathlib import Path

from trello_report.file_utils import clean_filename
from trello_report.models import ParsedComment
from trello_report.report import format_report, report_path, write_report


class TestFormatReport(unittest.TestCase):
    """Test rendering the report document."""

    def test_empty_report(self):
        """Test a report without entries is just the title."""
        self.assertEqual(
            format_report("2026-10-18", []), "1:1 Report for 2026-10-18\n\n"
        )

    def test_entries_are_separated_by_blank_lines(self):
        """Test each entry is followed by a blank line."""
        comments = [
            ParsedComment(order=1, text="Notes\n- Not yet started"),
            ParsedComment(order=2, text="Work\n- Task one\n- Task two"),
        ]
        self.assertEqual(
            format_report("2026-10-18", comments),
            "1:1 Report for 2026-10-18\n\n"
            "Notes\n- Not yet started\n\n"
            "Work\n- Task one\n- Task two\n\n",
        )

    def test_skips_absent_entries(self):
        """Test None entries contribute nothing."""
        comments = [None, ParsedComment(order=1, text="Notes\n- a"), None]
        self.assertEqual(
            format_report("10/18/2026", comments),
            "1:1 Report for 10/18/2026\n\nNotes\n- a\n\n",
        )

    def test_text_is_not_escaped(self):
        """Test comment text is written verbatim."""
        comments = [ParsedComment(order=1, text="Q&A <draft> {{ x }}\n- \"quoted\"")]
        report = format_report("2026-10-18", comments)
        self.assertIn("Q&A <draft> {{ x }}\n- \"quoted\"\n\n", report)

    def test_idempotent(self):
        """Test rendering twice gives identical output."""
        comments = [ParsedComment(order=1, text="Notes\n- a")]
        self.assertEqual(
            format_report("2026-10-18", comments), format_report("2026-10-18", comments)
        )


class TestWriteReport(unittest.TestCase):
    """Test writing reports to disk."""

    def setUp(self):
        """Set up a temporary reports directory."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.reports_dir = Path(self.temp_dir.name) / "reports"

    def tearDown(self):
        """Remove the temporary directory."""
        self.temp_dir.cleanup()

    def test_report_path(self):
        """Test reports are named after their date."""
        self.assertEqual(
            report_path("2026-10-18", self.reports_dir),
            self.reports_dir / "2026-10-18.txt",
        )
        self.assertEqual(
            report_path("10/18/2026", self.reports_dir),
            self.reports_dir / "10_18_2026.txt",
        )

    def test_write_creates_directory_and_overwrites(self):
        """Test writing creates the directory and replaces earlier reports."""
        path = write_report("2026-10-18", "first", self.reports_dir)
        self.assertEqual(path.read_text(encoding="utf-8"), "first")

        path = write_report("2026-10-18", "second", self.reports_dir)
        self.assertEqual(path.read_text(encoding="utf-8"), "second")


class TestCleanFilename(unittest.TestCase):
    """Test filename cleaning."""

    def test_unsafe_characters_replaced(self):
        """Test path separators and reserved characters are replaced."""
        self.assertEqual(clean_filename("a/b\\c:d"), "a_b_c_d")

    def test_empty_name(self):
        """Test blank names fall back to a placeholder."""
        self.assertEqual(clean_filename(" . "), "untitled")


if __name__ == "__main__":
    unittest.main()
