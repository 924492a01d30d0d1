"""Candidate selection helpers shared by the content parsers."""
from __future__ import annotations

import re
from typing import Iterator, Tuple

from bs4 import BeautifulSoup, Tag

_CATEGORY_RE = re.compile(r"\[([^\]]+)\]")


def parse_markup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def is_content_href(href: str | None) -> bool:
    """Reject empty, ``mailto:`` and ``javascript:`` targets."""

    if not href:
        return False
    return not href.startswith("mailto:") and "javascript:" not in href


def iter_links(soup: BeautifulSoup) -> Iterator[Tuple[str, str]]:
    """Yield ``(href, anchor markup)`` for every anchor pointing at content."""

    for anchor in soup.find_all("a", href=True):
        href = str(anchor["href"]).strip()
        if is_content_href(href):
            yield href, str(anchor)


def extract_categories(fragment: str) -> Tuple[str, ...]:
    """Collect every ``[...]`` token in order, trimmed, skipping empty ones."""

    categories = []
    for token in _CATEGORY_RE.findall(fragment):
        category = token.strip()
        if category:
            categories.append(category)
    return tuple(categories)


def first_link_href(element: Tag) -> str | None:
    anchor = element.find("a", href=True)
    if anchor is None:
        return None
    href = str(anchor["href"]).strip()
    return href if is_content_href(href) else None
