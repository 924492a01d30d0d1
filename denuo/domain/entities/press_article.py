"""Entidade que representa uma menção do portal na imprensa."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .common import SiteLanguage


@dataclass(frozen=True)
class PressArticle:
    """Artigo de imprensa listado na página "Denuo in de pers"."""

    title: str
    url: str
    language: SiteLanguage
    summary: Optional[str] = None
    content: Optional[str] = None
    categories: Tuple[str, ...] = field(default_factory=tuple)
    publication_date: Optional[str] = None
    #: Veículo de imprensa reconhecido no título, quando houver.
    source: Optional[str] = None
