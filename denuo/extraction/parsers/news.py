"""Parser for the news listings (``/nl/denuo-nieuws``, ``/fr/actualites-denuo``)."""
from __future__ import annotations

import re
from typing import List

from denuo.domain.entities import NewsItem, SiteLanguage

from ..pages import SITE_ORIGIN
from ..text import dedupe, first_match, is_navigation_link, normalize_text, resolve_url
from ..vocabulary import RESTRICTED_MARKERS, RESTRICTED_SUMMARY
from ._markup import parse_markup

_MIN_HREF_LENGTH = 5
_MIN_TITLE_LENGTH = 10

_TITLE_RE = re.compile(
    r'<span[^>]*class="[^"]*field--name-title[^"]*"[^>]*>([^<]+)</span>'
)
_ARTICLE_TYPE_RE = re.compile(
    r'<div[^>]*class="[^"]*field--name-field-article-type[^"]*"'
    r'[\s\S]*?<div[^>]*class="field__item">([^<]+)</div>'
)
_THEME_RE = re.compile(
    r'<div[^>]*class="[^"]*field--name-field-theme[^"]*"'
    r'[\s\S]*?<div[^>]*class="field__item">([^<]+)</div>'
)


def parse_news(
    html: str, language: SiteLanguage, *, origin: str = SITE_ORIGIN
) -> List[NewsItem]:
    """Build one ``NewsItem`` per ``<article about="...">`` teaser."""

    soup = parse_markup(html)
    news: List[NewsItem] = []
    for article in soup.select("article[about]"):
        href = str(article["about"]).strip()
        if len(href) < _MIN_HREF_LENGTH:
            continue

        markup = str(article)
        title = normalize_text(first_match(markup, _TITLE_RE))
        if len(title) <= _MIN_TITLE_LENGTH or is_navigation_link(title):
            continue

        category = normalize_text(first_match(markup, _ARTICLE_TYPE_RE))
        theme = normalize_text(first_match(markup, _THEME_RE))
        restricted = any(marker in markup for marker in RESTRICTED_MARKERS)

        news.append(
            NewsItem(
                title=title,
                url=resolve_url(href, origin),
                language=language,
                category=category or theme or None,
                summary=RESTRICTED_SUMMARY if restricted else None,
            )
        )

    return dedupe(news, key=lambda item: item.url)
