"""Parser for the "over Denuo" page: one section per heading."""
from __future__ import annotations

import re
from typing import List

from denuo.domain.entities import AboutSection
from denuo.domain.entities.about_section import SectionType

from ..text import normalize_text
from ..vocabulary import ABOUT_SECTION_KEYWORDS, DEFAULT_SECTION_TYPE
from ._markup import parse_markup

_MIN_CONTENT_LENGTH = 20

_HEADING_SPLIT_RE = re.compile(r"(?=<h[1-6][\s>])", re.IGNORECASE)
_HEADING_RE = re.compile(r"^<h([1-6])[^>]*>([\s\S]*?)</h\1\s*>", re.IGNORECASE)


def detect_section_type(heading: str) -> SectionType:
    lowered = heading.lower()
    for keyword, section_type in ABOUT_SECTION_KEYWORDS:
        if keyword in lowered:
            return section_type  # type: ignore[return-value]
    return DEFAULT_SECTION_TYPE  # type: ignore[return-value]


def parse_about_sections(html: str, page_url: str) -> List[AboutSection]:
    soup = parse_markup(html)
    main = soup.find("main")
    markup = main.decode_contents() if main is not None else str(soup)

    sections: List[AboutSection] = []
    for chunk in _HEADING_SPLIT_RE.split(markup):
        heading = _HEADING_RE.match(chunk)
        if heading is None:
            continue
        title = normalize_text(heading.group(2), tag_replacement=" ")
        content = normalize_text(chunk[heading.end():], tag_replacement=" ")
        if not title or len(content) <= _MIN_CONTENT_LENGTH:
            continue
        sections.append(
            AboutSection(
                section_title=title,
                content=content,
                section_type=detect_section_type(title),
                url=page_url,
            )
        )
    return sections
