"""Parser for the standpunten page: PDF links carrying a title field."""
from __future__ import annotations

import re
from typing import List, Optional

from denuo.domain.entities import PositionPaper

from ..pages import SITE_ORIGIN
from ..text import dedupe, first_match, normalize_text, resolve_url
from ..vocabulary import DEFAULT_DOCUMENT_TYPE, DOCUMENT_TYPE_KEYWORDS
from ._markup import parse_markup

_MIN_TITLE_LENGTH = 5

_TITLE_FIELD_RE = re.compile(
    r'<div[^>]*class="[^"]*field--name-field-title[^"]*"[^>]*>([^<]+)</div>'
)
_YEAR_RE = re.compile(r"\((\d{4})\)")
_YEAR_SUFFIX_RE = re.compile(r"\s*\(\d{4}\)\s*")


def detect_document_type(title: str) -> str:
    """Return the label of the first keyword found in ``title``."""

    lowered = title.lower()
    for keyword, label in DOCUMENT_TYPE_KEYWORDS:
        if keyword in lowered:
            return label
    return DEFAULT_DOCUMENT_TYPE


def describe(document_type: str, year: Optional[str]) -> str:
    return f"{document_type} uit {year}" if year else document_type


def parse_position_papers(html: str, *, origin: str = SITE_ORIGIN) -> List[PositionPaper]:
    soup = parse_markup(html)
    papers: List[PositionPaper] = []
    for anchor in soup.find_all("a", href=True):
        href = str(anchor["href"]).strip()
        if not href.lower().endswith(".pdf") or "javascript:" in href:
            continue

        raw_title = first_match(anchor.decode_contents(), _TITLE_FIELD_RE)
        if raw_title is None:
            continue

        full_title = normalize_text(raw_title)
        year = first_match(full_title, _YEAR_RE)
        title = normalize_text(_YEAR_SUFFIX_RE.sub(" ", full_title, count=1))
        if len(title) <= _MIN_TITLE_LENGTH:
            continue

        document_type = detect_document_type(title)
        papers.append(
            PositionPaper(
                title=title,
                url=resolve_url(href, origin),
                language="nl",
                publication_year=year,
                document_type=document_type,
                description=describe(document_type, year),
            )
        )

    return dedupe(papers, key=lambda paper: paper.url)
