"""Parser for the "Denuo in de pers" page."""
from __future__ import annotations

from typing import List, Optional

from denuo.domain.entities import PressArticle

from ..pages import SITE_ORIGIN
from ..text import dedupe, first_text_run, is_navigation_link, normalize_text, resolve_url
from ..vocabulary import PRESS_OUTLETS
from ._markup import extract_categories, iter_links, parse_markup

_MIN_TITLE_LENGTH = 10


def detect_press_source(title: str) -> Optional[str]:
    for outlet in PRESS_OUTLETS:
        if outlet in title:
            return outlet
    return None


def parse_press_articles(html: str, *, origin: str = SITE_ORIGIN) -> List[PressArticle]:
    articles: List[PressArticle] = []
    for href, markup in iter_links(parse_markup(html)):
        title = normalize_text(first_text_run(markup))
        if len(title) <= _MIN_TITLE_LENGTH or is_navigation_link(title):
            continue
        articles.append(
            PressArticle(
                title=title,
                url=resolve_url(href, origin),
                language="nl",
                categories=extract_categories(markup),
                source=detect_press_source(title),
            )
        )
    return dedupe(articles, key=lambda article: article.url)
