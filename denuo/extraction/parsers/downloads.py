"""Parser for the downloads page."""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import urlsplit

from denuo.domain.entities import Download

from ..pages import SITE_ORIGIN
from ..text import dedupe, first_text_run, is_navigation_link, normalize_text, resolve_url
from ..vocabulary import FILE_TYPES
from ._markup import extract_categories, iter_links, parse_markup

_MIN_TITLE_LENGTH = 5


def detect_file_type(url: str) -> Optional[str]:
    """Map the extension of the URL path to a file type label."""

    last_segment = urlsplit(url).path.rsplit("/", 1)[-1]
    if "." not in last_segment:
        return None
    extension = last_segment.rsplit(".", 1)[-1].lower()
    return FILE_TYPES.get(extension)


def parse_downloads(
    html: str, page_url: str | None = None, *, origin: str = SITE_ORIGIN
) -> List[Download]:
    downloads: List[Download] = []
    for href, markup in iter_links(parse_markup(html)):
        title = normalize_text(first_text_run(markup))
        if len(title) <= _MIN_TITLE_LENGTH or is_navigation_link(title):
            continue
        download_url = resolve_url(href, origin)
        downloads.append(
            Download(
                title=title,
                download_url=download_url,
                page_url=page_url,
                categories=extract_categories(markup),
                file_type=detect_file_type(download_url),
            )
        )
    return dedupe(downloads, key=lambda download: download.download_url)
