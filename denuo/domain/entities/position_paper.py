"""Entidade que representa um standpunt (documento de posição) em PDF."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common import Language


@dataclass(frozen=True)
class PositionPaper:
    """Documento de posição publicado como PDF na página de standpunten."""

    #: Título sem o ano entre parênteses.
    title: str
    #: Endereço absoluto do PDF, usado como chave natural.
    url: str
    #: Idioma da página de origem.
    language: Language
    #: Descrição sintetizada a partir do tipo de documento e do ano.
    description: Optional[str] = None
    content: Optional[str] = None
    #: Ano de publicação em texto livre, extraído do sufixo ``(YYYY)``.
    publication_year: Optional[str] = None
    #: Tipo inferido por palavras-chave presentes no título.
    document_type: Optional[str] = None
