"""Parse board comments into ordered report entries."""

import logging
from typing import Dict, Iterable, List, Optional

from trello_report.exceptions import DataUnavailable
from trello_report.models import Card, ParsedComment, RawComment, SectionConfig

log = logging.getLogger(__name__)

DESCRIPTION_SEPARATOR = "\n\n"
LIST_MARKER = "- "
NOT_STARTED = "Not yet started"
NUMERICAL_PREFIX_LENGTH = 3


def filter_comments(comments: Iterable[RawComment], report_date: str) -> List[RawComment]:
    """Keep the comments whose text mentions the report date, in input order."""
    return [c for c in comments if c.text and report_date in c.text]


def get_recent_comments(data: Dict, report_date: str) -> List[RawComment]:
    """Extract the comments for a report date from a board API payload.

    Args:
        data: Decoded board payload
        report_date: Date string the comment text must contain

    Returns:
        List of matching comments

    Raises:
        DataUnavailable: If the payload carries no action list at all

    """
    actions = data.get("actions") if isinstance(data, dict) else None
    if not isinstance(actions, list):
        raise DataUnavailable("API Error: Could not retrieve data")

    comments = [RawComment.from_action(action) for action in actions]
    recent = filter_comments(comments, report_date)
    log.debug("%d of %d comments mention %s", len(recent), len(comments), report_date)
    return recent


def resolve_section(
    card_id: str, sections: Iterable[SectionConfig]
) -> Optional[SectionConfig]:
    """Return the first section configured for a card, if any."""
    for section in sections:
        if section.card_id == card_id:
            return section
    return None


def comment_title(card: Card, section: SectionConfig) -> str:
    """Get the section title from the card name.

    Numbered card names lose their prefix: either everything up to and
    including ``prefix_delimiter``, or a fixed three characters ("1. ").
    """
    if not section.has_numerical_prefix:
        return card.name

    if section.prefix_delimiter:
        _, found, rest = card.name.partition(section.prefix_delimiter)
        return rest if found else card.name

    return card.name[NUMERICAL_PREFIX_LENGTH:]


def comment_description(text: str) -> str:
    """Get everything after the first blank line of a comment."""
    index = text.find(DESCRIPTION_SEPARATOR)
    if index < 0:
        return NOT_STARTED
    return text[index + len(DESCRIPTION_SEPARATOR):]


def humanize_link(list_item: str) -> str:
    """Turn a list item holding a card URL into readable text.

    The last path segment is split on hyphens, the leading short-id token
    is dropped and the first letter is capitalized, so
    ``https://trello.com/c/abc123/12-update-the-api-docs`` becomes
    ``Update the api docs``.
    """
    slug = list_item[list_item.rfind("/") + 1:]
    words = slug.split("-")[1:]
    text = " ".join(words)
    return text[:1].upper() + text[1:]


def format_list(description: str) -> str:
    """Re-emit a description as ``- `` prefixed items, humanizing links."""
    items = [item for item in description.split(LIST_MARKER) if item]
    return "".join(
        LIST_MARKER + (humanize_link(item) if "http" in item else item)
        for item in items
    )


def parse_comment(
    comment: RawComment, sections: List[SectionConfig]
) -> Optional[ParsedComment]:
    """Parse a single comment into a report entry.

    Args:
        comment: Comment from the board
        sections: Configured report sections

    Returns:
        The parsed entry, or None if the comment has no card or the card
        is not mapped to a section

    """
    card = comment.card
    if card is None:
        log.debug("Skipping comment without a card")
        return None

    section = resolve_section(card.id, sections)
    if section is None:
        log.debug("Skipping comment on unmapped card %s (%s)", card.id, card.name)
        return None

    title = comment_title(card, section)
    description = format_list(comment_description(comment.text or ""))

    return ParsedComment(order=section.order, text=f"{title}\n{description}")


def parse_comments(
    comments: Iterable[RawComment], sections: List[SectionConfig]
) -> List[Optional[ParsedComment]]:
    """Parse every comment, keeping None placeholders for skipped ones."""
    return [parse_comment(comment, sections) for comment in comments]


def sort_comments(
    comments: Iterable[Optional[ParsedComment]],
) -> List[ParsedComment]:
    """Drop skipped entries and stable-sort the rest by section order."""
    return sorted((c for c in comments if c is not None), key=lambda c: c.order)
