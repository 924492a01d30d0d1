"""Contrato de escrita para persistência do conteúdo coletado."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from denuo.domain.entities import (
    AboutSection,
    Committee,
    Download,
    Dossier,
    Event,
    NewsItem,
    PositionPaper,
    PressArticle,
    ScrapeStatus,
)


class ContentRepository(ABC):
    """Grava lotes por chave natural e registra o resultado de cada seção.

    Cada ``store_*`` é um no-op para lotes vazios; caso contrário insere ou
    substitui cada item e termina com ``update_scrape_metadata(..., "success")``.
    """

    @abstractmethod
    def store_news(self, items: Sequence[NewsItem]) -> None:
        """Gravar notícias usando a URL como chave."""

    @abstractmethod
    def store_position_papers(self, items: Sequence[PositionPaper]) -> None:
        """Gravar standpunten usando a URL do PDF como chave."""

    @abstractmethod
    def store_dossiers(self, items: Sequence[Dossier]) -> None:
        """Gravar dossiês usando a URL como chave."""

    @abstractmethod
    def store_committees(self, items: Sequence[Committee]) -> None:
        """Gravar comissões paritárias usando o número PSC como chave."""

    @abstractmethod
    def store_events(self, items: Sequence[Event]) -> None:
        """Gravar eventos da agenda."""

    @abstractmethod
    def store_downloads(self, items: Sequence[Download]) -> None:
        """Gravar downloads usando a URL do arquivo como chave."""

    @abstractmethod
    def store_about_sections(self, items: Sequence[AboutSection]) -> None:
        """Gravar as seções institucionais."""

    @abstractmethod
    def store_press_articles(self, items: Sequence[PressArticle]) -> None:
        """Gravar menções na imprensa usando a URL como chave."""

    @abstractmethod
    def update_scrape_metadata(
        self,
        section: str,
        status: ScrapeStatus,
        items_scraped: int = 0,
        error_message: str | None = None,
    ) -> None:
        """Inserir ou substituir a linha de metadados da seção."""
