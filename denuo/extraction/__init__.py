"""Turning denuo.be listing pages into domain records."""

from .pages import SECTIONS, SITE_ORIGIN, SITE_PAGES, SitePage, pages_for
from .parsers import parse_page
from .text import dedupe, normalize_text, resolve_url

__all__ = [
    "SECTIONS",
    "SITE_ORIGIN",
    "SITE_PAGES",
    "SitePage",
    "dedupe",
    "normalize_text",
    "pages_for",
    "parse_page",
    "resolve_url",
]
