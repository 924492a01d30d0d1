"""Parser for the agenda page.

Event blocks are the innermost ``<div>`` elements whose text mentions one of
the event keywords; every field is then pattern-matched inside the block.
"""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from bs4 import Tag

from denuo.domain.entities import Event

from ..pages import SITE_ORIGIN
from ..text import first_match, first_text_run, normalize_text, resolve_url
from ..vocabulary import EVENT_BLOCK_KEYWORDS, EVENT_TYPES
from ._markup import first_link_href, parse_markup

_MIN_TITLE_LENGTH = 5
_MIN_DESCRIPTION_LENGTH = 20

_HEADING_RE = re.compile(r"^h[1-6]$")
_WORD_DATE_RE = re.compile(r"\b\d{1,2}\s+\w+\s+\d{4}\b")
_NUMERIC_DATE_RE = re.compile(r"\b\d{1,2}/\d{1,2}/\d{4}\b")
_TIME_RANGE_RE = re.compile(r"\b\d{1,2}[.:]\d{2}\s*-\s*\d{1,2}[.:]\d{2}\b")
_LOCATION_RE = re.compile(r"(?:locatie|venue|plaats)[^:<]*:\s*([^<]+)", re.IGNORECASE)
_PARAGRAPH_RE = re.compile(r"<p[^>]*>([\s\S]*?)</p>", re.IGNORECASE)

_BLOCK_KEYWORDS = tuple(keyword.lower() for keyword in EVENT_BLOCK_KEYWORDS)


def _block_text(element: Tag) -> str:
    return normalize_text(str(element), tag_replacement=" ")


def _qualifies(element: Tag) -> bool:
    lowered = _block_text(element).lower()
    return any(keyword in lowered for keyword in _BLOCK_KEYWORDS)


def find_event_blocks(html: str) -> List[Tag]:
    """Return the innermost qualifying ``<div>`` elements in document order."""

    soup = parse_markup(html)
    blocks: List[Tag] = []
    for div in soup.find_all("div"):
        if not _qualifies(div):
            continue
        if any(_qualifies(inner) for inner in div.find_all("div")):
            continue
        blocks.append(div)
    return blocks


def detect_event_type(text: str) -> Optional[str]:
    lowered = text.lower()
    for event_type in EVENT_TYPES:
        if event_type.lower() in lowered:
            return event_type
    return None


def split_location(raw: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split ``"Name, Street 1, City"`` into name and address."""

    location = normalize_text(raw)
    if not location:
        return None, None
    name, _, address = location.partition(",")
    return name.strip() or None, address.strip() or None


def _title(block: Tag) -> str:
    heading = block.find(_HEADING_RE)
    if heading is not None:
        title = normalize_text(str(heading), tag_replacement=" ")
        if title:
            return title
    return normalize_text(first_text_run(str(block)))


def parse_events(html: str, *, origin: str = SITE_ORIGIN) -> List[Event]:
    events: List[Event] = []
    for block in find_event_blocks(html):
        title = _title(block)
        if len(title) <= _MIN_TITLE_LENGTH:
            continue

        markup = str(block)
        text = _block_text(block)
        event_date = first_match(text, _WORD_DATE_RE) or first_match(text, _NUMERIC_DATE_RE)
        location_name, location_address = split_location(first_match(markup, _LOCATION_RE))
        description = normalize_text(first_match(markup, _PARAGRAPH_RE), tag_replacement=" ")
        href = first_link_href(block)

        events.append(
            Event(
                title=title,
                language="nl",
                description=description if len(description) > _MIN_DESCRIPTION_LENGTH else None,
                event_type=detect_event_type(text),
                event_date=event_date,
                event_time=first_match(text, _TIME_RANGE_RE),
                location_name=location_name,
                location_address=location_address,
                url=resolve_url(href, origin) if href else None,
            )
        )
    return events
