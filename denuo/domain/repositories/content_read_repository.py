"""Contrato de leitura usado pelas ferramentas de consulta."""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from denuo.domain.entities import (
    AboutSection,
    Committee,
    Download,
    Dossier,
    Event,
    NewsItem,
    PositionPaper,
    PressArticle,
    ScrapeMetadata,
    SiteLanguage,
    Stored,
)


class ContentReadRepository(ABC):
    """Define buscas e listagens sobre o conteúdo já armazenado.

    As buscas fazem correspondência parcial, sem diferenciar maiúsculas, sobre
    os campos textuais de cada tipo e devolvem os registros mais recentes
    primeiro, limitados a ``limit``.
    """

    @abstractmethod
    def search_news(
        self,
        query: str,
        language: SiteLanguage | None = None,
        category: str | None = None,
        limit: int = 10,
    ) -> List[Stored[NewsItem]]:
        """Buscar notícias por texto com filtros opcionais."""

    @abstractmethod
    def get_recent_news(
        self, language: SiteLanguage | None = None, limit: int = 10
    ) -> List[Stored[NewsItem]]:
        """Listar as notícias mais recentes."""

    @abstractmethod
    def get_news_by_id(self, news_id: int) -> Optional[Stored[NewsItem]]:
        """Obter uma notícia pelo identificador atribuído no armazenamento."""

    @abstractmethod
    def search_position_papers(
        self, query: str, year: str | None = None, limit: int = 10
    ) -> List[Stored[PositionPaper]]:
        """Buscar standpunten por texto e ano."""

    @abstractmethod
    def get_all_position_papers(self, limit: int = 20) -> List[Stored[PositionPaper]]:
        """Listar standpunten, dos mais novos aos mais antigos."""

    @abstractmethod
    def search_dossiers(
        self,
        query: str,
        category: str | None = None,
        language: SiteLanguage | None = None,
        limit: int = 10,
    ) -> List[Stored[Dossier]]:
        """Buscar dossiês por texto, categoria e idioma."""

    @abstractmethod
    def get_all_dossiers(self, limit: int = 20) -> List[Stored[Dossier]]:
        """Listar dossiês na ordem de inserção."""

    @abstractmethod
    def get_all_committees(
        self, limit: int = 20, sector: str | None = None
    ) -> List[Stored[Committee]]:
        """Listar comissões paritárias ordenadas pelo número PSC."""

    @abstractmethod
    def get_upcoming_events(
        self, limit: int = 5, today: date | None = None
    ) -> List[Stored[Event]]:
        """Listar eventos com data reconhecida a partir de ``today``."""

    @abstractmethod
    def get_all_events(self, limit: int = 10) -> List[Stored[Event]]:
        """Listar todos os eventos, dos mais recentes aos mais antigos."""

    @abstractmethod
    def search_downloads(
        self, query: str, file_type: str | None = None, limit: int = 10
    ) -> List[Stored[Download]]:
        """Buscar downloads por texto e tipo de arquivo."""

    @abstractmethod
    def get_all_downloads(self, limit: int = 20) -> List[Stored[Download]]:
        """Listar downloads na ordem de inserção."""

    @abstractmethod
    def get_about_sections(
        self, section_type: str | None = None
    ) -> List[Stored[AboutSection]]:
        """Listar seções institucionais, opcionalmente por tipo."""

    @abstractmethod
    def search_press_articles(
        self,
        query: str,
        source: str | None = None,
        language: SiteLanguage | None = None,
        limit: int = 10,
    ) -> List[Stored[PressArticle]]:
        """Buscar menções na imprensa por texto, veículo e idioma."""

    @abstractmethod
    def get_recent_press_articles(self, limit: int = 10) -> List[Stored[PressArticle]]:
        """Listar as menções na imprensa mais recentes."""

    @abstractmethod
    def get_scrape_metadata(self) -> List[ScrapeMetadata]:
        """Listar o último resultado de coleta de cada seção."""
