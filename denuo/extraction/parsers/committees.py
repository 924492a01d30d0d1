"""Parser for the paritaire comités (joint committees) listing.

Each committee is announced by a text run such as ``PSC 1.1: Metalen``. The
title either follows the number in the same run or sits in the next text
run; the link is the enclosing anchor or the next anchor of the same block.
"""
from __future__ import annotations

import re
from typing import List, Optional

from bs4 import NavigableString
from bs4.element import PreformattedString

from denuo.domain.entities import Committee

from ..pages import SITE_ORIGIN
from ..text import dedupe, normalize_text, resolve_url
from ..vocabulary import COMMITTEE_SECTORS
from ._markup import is_content_href, parse_markup

PSC_RE = re.compile(r"PSC\s+(\d+\.\d+)")
_SKIPPED_PARENTS = frozenset({"script", "style"})
_BLOCK_TAGS = ["article", "dd", "div", "dt", "li", "p", "section", "td", "tr"]
_TITLE_SEPARATORS = " \t\r\n:-–"


def detect_sector(title: str) -> Optional[str]:
    lowered = title.lower()
    for sector in COMMITTEE_SECTORS:
        if sector in lowered:
            return sector
    return None


def _is_text_run(node: NavigableString) -> bool:
    if isinstance(node, PreformattedString):
        return False
    return node.parent is None or node.parent.name not in _SKIPPED_PARENTS


def _next_title(node: NavigableString) -> Optional[str]:
    for candidate in node.find_all_next(string=True):
        if not _is_text_run(candidate):
            continue
        text = normalize_text(str(candidate))
        if not text:
            continue
        if PSC_RE.search(text):
            return None
        return text
    return None


def _committee_href(node: NavigableString) -> Optional[str]:
    """Enclosing anchor first, then the next anchor of the same block."""

    enclosing = node.find_parent("a")
    if enclosing is not None and is_content_href(enclosing.get("href")):
        return str(enclosing["href"]).strip()

    block = node.find_parent(_BLOCK_TAGS) or node.parent
    if block is None:
        return None
    anchor = node.find_next("a", href=True)
    if anchor is not None and any(ancestor is block for ancestor in anchor.parents):
        href = str(anchor["href"]).strip()
        if is_content_href(href):
            return href
    return None


def parse_committees(
    html: str, page_url: str, *, origin: str = SITE_ORIGIN
) -> List[Committee]:
    soup = parse_markup(html)
    committees: List[Committee] = []
    for node in soup.find_all(string=PSC_RE):
        if not _is_text_run(node):
            continue
        text = normalize_text(str(node))
        match = PSC_RE.search(text)
        if match is None:
            continue

        title = normalize_text(text[match.end():].lstrip(_TITLE_SEPARATORS))
        if not title:
            title = _next_title(node) or ""
        if not title:
            continue

        href = _committee_href(node)
        committees.append(
            Committee(
                psc_number=f"PSC {match.group(1)}",
                title=title,
                url=resolve_url(href, origin) if href else page_url,
                sector=detect_sector(title),
            )
        )

    return dedupe(committees, key=lambda committee: committee.psc_number)
