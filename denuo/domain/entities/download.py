"""Entidade que representa um arquivo disponível para download."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Download:
    """Link da página de downloads com o tipo de arquivo inferido."""

    title: str
    #: Endereço absoluto do arquivo; chave natural.
    download_url: str
    description: Optional[str] = None
    #: Rótulo derivado da extensão (PDF, Word, Excel, PowerPoint).
    file_type: Optional[str] = None
    #: Página de listagem onde o link foi encontrado.
    page_url: Optional[str] = None
    categories: Tuple[str, ...] = field(default_factory=tuple)
    languages_available: Optional[Tuple[str, ...]] = None

    @property
    def url(self) -> str:
        """Alias de ``download_url`` usado na deduplicação."""

        return self.download_url
