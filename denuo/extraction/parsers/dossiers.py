"""Parser for the dossiers overview."""
from __future__ import annotations

from typing import List

from denuo.domain.entities import Dossier

from ..pages import SITE_ORIGIN
from ..text import dedupe, first_text_run, is_navigation_link, normalize_text, resolve_url
from ._markup import extract_categories, iter_links, parse_markup

_MIN_TITLE_LENGTH = 5


def parse_dossiers(html: str, *, origin: str = SITE_ORIGIN) -> List[Dossier]:
    dossiers: List[Dossier] = []
    for href, markup in iter_links(parse_markup(html)):
        title = normalize_text(first_text_run(markup))
        if len(title) <= _MIN_TITLE_LENGTH or is_navigation_link(title):
            continue
        dossiers.append(
            Dossier(
                title=title,
                url=resolve_url(href, origin),
                language="nl",
                categories=extract_categories(markup),
            )
        )
    return dedupe(dossiers, key=lambda dossier: dossier.url)
