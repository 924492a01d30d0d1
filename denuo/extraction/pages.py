"""Map of the denuo.be pages scraped for each content section."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from denuo.domain.entities import Language

from .text import resolve_url

SITE_ORIGIN = "https://denuo.be"

NEWS = "news"
STANDPUNTEN = "standpunten"
DOSSIERS = "dossiers"
COMMITTEES = "committees"
EVENTS = "events"
DOWNLOADS = "downloads"
ABOUT = "about"
PRESS = "press"

SECTIONS: Tuple[str, ...] = (
    NEWS,
    STANDPUNTEN,
    DOSSIERS,
    COMMITTEES,
    EVENTS,
    DOWNLOADS,
    ABOUT,
    PRESS,
)


@dataclass(frozen=True)
class SitePage:
    """One listing page: the section it feeds, its path and its language."""

    section: str
    path: str
    language: Language = "nl"

    def url_for(self, origin: str = SITE_ORIGIN) -> str:
        return resolve_url(self.path, origin)


# TODO: reconfirm these paths against the live site; older listings used
# /nl/nieuws instead of /nl/denuo-nieuws.
SITE_PAGES: Tuple[SitePage, ...] = (
    SitePage(NEWS, "/nl/denuo-nieuws", "nl"),
    SitePage(NEWS, "/fr/actualites-denuo", "fr"),
    SitePage(STANDPUNTEN, "/nl/standpunten"),
    SitePage(DOSSIERS, "/nl/dossiers"),
    SitePage(COMMITTEES, "/nl/paritaire-comites"),
    SitePage(EVENTS, "/nl/agenda"),
    SitePage(DOWNLOADS, "/nl/downloads"),
    SitePage(ABOUT, "/nl/over-denuo"),
    SitePage(PRESS, "/nl/denuo-de-pers-0"),
)


def pages_for(section: str) -> Tuple[SitePage, ...]:
    """Return the pages of ``section``; raises ``ValueError`` for unknown names."""

    if section not in SECTIONS:
        raise ValueError(f"Unknown section '{section}'")
    return tuple(page for page in SITE_PAGES if page.section == section)


__all__ = [
    "ABOUT",
    "COMMITTEES",
    "DOSSIERS",
    "DOWNLOADS",
    "EVENTS",
    "NEWS",
    "PRESS",
    "SECTIONS",
    "SITE_ORIGIN",
    "SITE_PAGES",
    "STANDPUNTEN",
    "SitePage",
    "pages_for",
]
