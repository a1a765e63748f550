"""Loading and validation of the report configuration file."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from trello_report.exceptions import MissingConfiguration
from trello_report.models import SectionConfig

log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("config.json")
DEFAULT_DATE_FORMAT = "%Y-%m-%d"

# Environment variables that fill in blank config values
ENV_BOARD_ID = "TRELLO_BOARD_ID"
ENV_API_KEY = "TRELLO_API_KEY"
ENV_API_TOKEN = "TRELLO_API_TOKEN"


@dataclass
class AuthConfig:
    """Credentials for the board API."""

    key: str = ""
    token: str = ""


@dataclass
class Config:
    """Settings for a single report run."""

    board_id: str = ""
    auth: AuthConfig = field(default_factory=AuthConfig)
    date_format: str = DEFAULT_DATE_FORMAT
    sections: List[SectionConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "Config":
        """Build a config from parsed JSON, applying environment overrides."""
        auth_data = data.get("auth") or {}
        auth = AuthConfig(
            key=auth_data.get("key") or os.environ.get(ENV_API_KEY, ""),
            token=auth_data.get("token") or os.environ.get(ENV_API_TOKEN, ""),
        )
        sections = [SectionConfig.from_dict(s) for s in data.get("sections") or []]
        warn_duplicate_sections(sections)

        date_format = data.get("dateFormat") or DEFAULT_DATE_FORMAT
        if not isinstance(date_format, str):
            raise ValueError(f"dateFormat must be a string, got {date_format!r}")

        return cls(
            board_id=data.get("boardId") or os.environ.get(ENV_BOARD_ID, ""),
            auth=auth,
            date_format=date_format,
            sections=sections,
        )


def warn_duplicate_sections(sections: List[SectionConfig]) -> None:
    """Log a warning for every card ID configured more than once."""
    seen = set()
    for section in sections:
        if section.card_id in seen:
            log.warning(
                "Card ID %s is configured for more than one section; "
                "only the first entry is used",
                section.card_id,
            )
        seen.add(section.card_id)


def load_config(config_file: Optional[Path] = None) -> Config:
    """Load the report configuration from a JSON file.

    Args:
        config_file: Path to the config file. Defaults to "config.json"

    Returns:
        Parsed configuration

    Raises:
        MissingConfiguration: If the file cannot be read or parsed, or
            holds a value of the wrong type

    """
    if config_file is None:
        config_file = DEFAULT_CONFIG_FILE

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise MissingConfiguration(
            f"Missing Configuration: could not read {config_file} ({e})"
        ) from e

    if not isinstance(data, dict):
        raise MissingConfiguration(
            f"Missing Configuration: {config_file} must contain a JSON object"
        )

    try:
        config = Config.from_dict(data)
    except (AttributeError, TypeError, ValueError) as e:
        raise MissingConfiguration(
            f"Missing Configuration: invalid value in {config_file} ({e})"
        ) from e

    log.debug("Loaded configuration from %s", config_file)
    return config


def validate_config(config: Config) -> None:
    """Check that the values needed to reach the board API are present.

    Raises:
        MissingConfiguration: Naming the first missing value

    """
    if not config.board_id:
        raise MissingConfiguration("Missing Configuration: Trello Board ID")
    if not config.auth.key:
        raise MissingConfiguration("Missing Configuration: Trello API Key")
    if not config.auth.token:
        raise MissingConfiguration("Missing Configuration: Trello API Token")
