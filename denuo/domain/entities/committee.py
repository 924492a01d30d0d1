"""Entidade que representa uma comissão paritária (PSC)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Committee:
    """Comissão paritária identificada pelo número ``PSC n.n``."""

    #: Número normalizado no formato ``PSC 1.1``; chave natural.
    psc_number: str
    title: str
    url: str
    description: Optional[str] = None
    content: Optional[str] = None
    #: Setor inferido por palavra-chave no título.
    sector: Optional[str] = None
