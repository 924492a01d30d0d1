"""Entidade que representa uma notícia publicada no portal."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common import SiteLanguage


@dataclass(frozen=True)
class NewsItem:
    """Notícia extraída da listagem de notícias em um dos idiomas do portal."""

    #: Título exibido no bloco ``<article>`` da listagem.
    title: str
    #: Endereço absoluto da notícia, usado como chave natural.
    url: str
    #: Idioma da listagem em que a notícia foi encontrada.
    language: SiteLanguage
    #: Resumo opcional; notícias restritas recebem um aviso fixo.
    summary: Optional[str] = None
    #: Corpo da notícia quando disponível.
    content: Optional[str] = None
    #: Tipo de artigo ou, na falta dele, o tema associado.
    category: Optional[str] = None
    #: Data de publicação em texto livre, sem validação de calendário.
    publication_date: Optional[str] = None
