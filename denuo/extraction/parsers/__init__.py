"""Content parsers, one per section, plus the page dispatcher."""
from __future__ import annotations

from typing import Any, List

from ..pages import (
    ABOUT,
    COMMITTEES,
    DOSSIERS,
    DOWNLOADS,
    EVENTS,
    NEWS,
    PRESS,
    SITE_ORIGIN,
    STANDPUNTEN,
    SitePage,
)
from .about import parse_about_sections
from .committees import parse_committees
from .dossiers import parse_dossiers
from .downloads import parse_downloads
from .events import parse_events
from .news import parse_news
from .position_papers import parse_position_papers
from .press_articles import parse_press_articles


def parse_page(page: SitePage, html: str, origin: str = SITE_ORIGIN) -> List[Any]:
    """Run the parser that matches the section of ``page``."""

    page_url = page.url_for(origin)
    if page.section == NEWS:
        language = "fr" if page.language == "fr" else "nl"
        return parse_news(html, language, origin=origin)
    if page.section == STANDPUNTEN:
        return parse_position_papers(html, origin=origin)
    if page.section == DOSSIERS:
        return parse_dossiers(html, origin=origin)
    if page.section == COMMITTEES:
        return parse_committees(html, page_url, origin=origin)
    if page.section == EVENTS:
        return parse_events(html, origin=origin)
    if page.section == DOWNLOADS:
        return parse_downloads(html, page_url, origin=origin)
    if page.section == ABOUT:
        return parse_about_sections(html, page_url)
    if page.section == PRESS:
        return parse_press_articles(html, origin=origin)
    raise ValueError(f"No parser for section '{page.section}'")


__all__ = [
    "parse_about_sections",
    "parse_committees",
    "parse_dossiers",
    "parse_downloads",
    "parse_events",
    "parse_news",
    "parse_page",
    "parse_position_papers",
    "parse_press_articles",
]
