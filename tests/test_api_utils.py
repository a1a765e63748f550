#!/usr/bin/env python3
"""Tests for the Trello API client."""

import unittest
from unittest import mock

import requests

from trello_report.api_utils import build_board_params, fetch_board_data
from trello_report.config import AuthConfig
from trello_report.exceptions import DataUnavailable


def make_session(payload=None, status_error=None, json_error=None):
    """Build a mock session whose GET returns the given payload."""
    response = mock.Mock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload

    session = mock.Mock()
    session.get.return_value = response
    return session


class TestFetchBoardData(unittest.TestCase):
    """Test fetching board data."""

    def setUp(self):
        """Set up credentials."""
        self.auth = AuthConfig(key="key1", token="token1")

    def test_board_params(self):
        """Test comment actions are requested with credentials."""
        self.assertEqual(
            build_board_params(self.auth),
            {"actions": "commentCard", "fields": "", "key": "key1", "token": "token1"},
        )

    def test_fetch_returns_payload(self):
        """Test the decoded board is returned."""
        payload = {"actions": [{"data": {"text": "hi"}}]}
        session = make_session(payload)

        self.assertEqual(fetch_board_data("abc", self.auth, session=session), payload)
        session.get.assert_called_once_with(
            "https://trello.com/b/abc.json", params=build_board_params(self.auth)
        )

    def test_http_error(self):
        """Test HTTP errors become DataUnavailable."""
        session = make_session(status_error=requests.HTTPError("401 Unauthorized"))
        with self.assertRaises(DataUnavailable) as ctx:
            fetch_board_data("abc", self.auth, session=session)
        self.assertIn("401 Unauthorized", str(ctx.exception))

    def test_connection_error(self):
        """Test network failures become DataUnavailable."""
        session = mock.Mock()
        session.get.side_effect = requests.ConnectionError("no route")
        with self.assertRaises(DataUnavailable):
            fetch_board_data("abc", self.auth, session=session)

    def test_invalid_json(self):
        """Test non-JSON bodies become DataUnavailable."""
        session = make_session(json_error=ValueError("bad json"))
        with self.assertRaises(DataUnavailable):
            fetch_board_data("abc", self.auth, session=session)

    def test_non_object_body(self):
        """Test JSON that is not an object becomes DataUnavailable."""
        session = make_session(["not", "a", "board"])
        with self.assertRaises(DataUnavailable):
            fetch_board_data("abc", self.auth, session=session)


if __name__ == "__main__":
    unittest.main()
