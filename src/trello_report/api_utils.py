#!/usr/bin/env python3
"""Common API utilities for Trello board access."""

import logging
from typing import Dict, Optional

import requests

from trello_report.config import AuthConfig
from trello_report.exceptions import DataUnavailable

log = logging.getLogger(__name__)

BOARD_URL = "https://trello.com/b/{board_id}.json"


def build_board_params(auth: AuthConfig) -> Dict[str, str]:
    """Build query parameters requesting a board's comment actions.

    Args:
        auth: API credentials

    Returns:
        Dictionary of query parameters

    """
    return {
        "actions": "commentCard",
        "fields": "",
        "key": auth.key,
        "token": auth.token,
    }


def fetch_board_data(
    board_id: str,
    auth: AuthConfig,
    session: Optional[requests.Session] = None,
) -> Dict:
    """Fetch a board with its comment actions from the Trello API.

    Args:
        board_id: The board to fetch
        auth: API credentials
        session: Session to issue the request with (a new one if omitted)

    Returns:
        Decoded JSON payload of the board

    Raises:
        DataUnavailable: If the request fails or the body is not a JSON object

    """
    url = BOARD_URL.format(board_id=board_id)
    session = session or requests.Session()

    log.debug("Fetching board %s", board_id)

    try:
        response = session.get(url, params=build_board_params(auth))
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        raise DataUnavailable(f"API Error: Could not retrieve data ({e})") from e
    except ValueError as e:
        raise DataUnavailable(
            "API Error: Could not retrieve data (response was not JSON)"
        ) from e

    if not isinstance(data, dict):
        raise DataUnavailable("API Error: Could not retrieve data")

    log.debug("Received %d actions", len(data.get("actions") or []))
    return data
