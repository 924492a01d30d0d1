"""Entidade que representa um dossiê temático."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .common import SiteLanguage


@dataclass(frozen=True)
class Dossier:
    """Dossiê listado na página de dossiês com suas categorias."""

    title: str
    url: str
    language: SiteLanguage
    description: Optional[str] = None
    content: Optional[str] = None
    #: Categorias delimitadas por colchetes, na ordem em que aparecem.
    categories: Tuple[str, ...] = field(default_factory=tuple)
