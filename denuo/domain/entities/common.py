"""Tipos compartilhados pelas entidades de conteúdo."""
from __future__ import annotations

from typing import Literal

#: Idiomas em que as páginas do portal são solicitadas.
Language = Literal["nl", "fr", "en"]
#: Idiomas disponíveis para notícias, dossiês e eventos.
SiteLanguage = Literal["nl", "fr"]

__all__ = ["Language", "SiteLanguage"]
