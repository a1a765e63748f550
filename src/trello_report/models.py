"""Data models for board comments, report sections and parsed entries."""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Card:
    """A card on the board that a comment is attached to."""

    id: str
    name: str


@dataclass(frozen=True)
class RawComment:
    """Represents a single comment action as returned by the board API."""

    text: Optional[str] = None
    card: Optional[Card] = None

    @classmethod
    def from_action(cls, action: Dict) -> "RawComment":
        """Build a comment from a raw ``commentCard`` action record.

        Records of the wrong shape yield a comment without text or card,
        which the date filter then drops.
        """
        data = action.get("data") if isinstance(action, dict) else None
        if not isinstance(data, dict):
            return cls()

        text = data.get("text")
        if not isinstance(text, str):
            text = None

        card = None
        card_data = data.get("card")
        if isinstance(card_data, dict):
            name = card_data.get("name")
            card = Card(
                id=str(card_data.get("id", "")),
                name=name if isinstance(name, str) else "",
            )

        return cls(text=text, card=card)


@dataclass(frozen=True)
class SectionConfig:
    """Maps a card to its position and title policy in the report."""

    card_id: str
    order: int
    has_numerical_prefix: bool = False
    prefix_delimiter: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "SectionConfig":
        """Build a section from its JSON configuration entry.

        Raises:
            ValueError: If a value has the wrong type
            TypeError: If ``order`` is not a number

        """
        has_numerical_prefix = data.get("hasNumericalPrefix", False)
        if not isinstance(has_numerical_prefix, bool):
            raise ValueError(
                f"hasNumericalPrefix must be true or false, got {has_numerical_prefix!r}"
            )

        prefix_delimiter = data.get("prefixDelimiter")
        if prefix_delimiter is not None and not isinstance(prefix_delimiter, str):
            raise ValueError(
                f"prefixDelimiter must be a string, got {prefix_delimiter!r}"
            )

        return cls(
            card_id=data.get("cardId", ""),
            order=int(data.get("order", 0)),
            has_numerical_prefix=has_numerical_prefix,
            prefix_delimiter=prefix_delimiter,
        )


@dataclass(frozen=True)
class ParsedComment:
    """A comment ready to be placed in the report."""

    order: int
    text: str

