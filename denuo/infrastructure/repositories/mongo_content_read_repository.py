"""Repositório somente leitura do conteúdo com backend MongoDB."""
from __future__ import annotations

import re
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pymongo.errors import PyMongoError

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
    Stored,
)
from denuo.domain.errors import StoreError
from denuo.domain.repositories import ContentReadRepository

from .content_collections import (
    ABOUT_SECTIONS,
    COMMITTEES,
    DOSSIERS,
    DOWNLOADS,
    EVENTS,
    METADATA_COLLECTION,
    NEWS,
    POSITION_PAPERS,
    PRESS_ARTICLES,
    ContentCollection,
    event_day_floor,
)

Sort = List[Tuple[str, int]]

_MOST_RECENT: Sort = [("publication_date", -1), ("updated_at", -1)]
_BY_ID: Sort = [("id", 1)]
_LATEST_FIRST: Sort = [("updated_at", -1), ("id", -1)]
_PROJECTION = {"_id": 0}


def _contains(value: str) -> Dict[str, str]:
    return {"$regex": re.escape(value), "$options": "i"}


def _text_criteria(query: str, text_fields: Sequence[str]) -> Dict[str, Any]:
    """Busca por substring, sem diferenciar maiúsculas, em qualquer campo."""

    return {"$or": [{field: _contains(query)} for field in text_fields]}


def _combine(*clauses: Dict[str, Any]) -> Dict[str, Any]:
    present = [clause for clause in clauses if clause]
    if not present:
        return {}
    if len(present) == 1:
        return present[0]
    return {"$and": present}


class MongoContentReadRepository(ContentReadRepository):
    """Consulta o conteúdo persistido no MongoDB sem permitir alterações."""

    def __init__(self, database: Any) -> None:
        self._database = database
        """Banco MongoDB do qual o conteúdo é consultado."""

    def search_news(
        self,
        query: str,
        language: str | None = None,
        category: str | None = None,
        limit: int = 10,
    ) -> List[Stored[NewsItem]]:
        criteria = _combine(
            _text_criteria(query, ("title", "summary", "content")),
            {"language": language} if language else {},
            {"category": category} if category else {},
        )
        return self._find(NEWS, criteria, _MOST_RECENT, limit)

    def get_recent_news(
        self, language: str | None = None, limit: int = 10
    ) -> List[Stored[NewsItem]]:
        criteria = {"language": language} if language else {}
        return self._find(NEWS, criteria, _MOST_RECENT, limit)

    def get_news_by_id(self, news_id: int) -> Optional[Stored[NewsItem]]:
        try:
            document = self._database[NEWS.name].find_one({"id": news_id}, _PROJECTION)
        except PyMongoError as exc:
            raise StoreError(f"Failed to read news {news_id}: {exc}") from exc
        return NEWS.from_document(document) if document else None

    def search_position_papers(
        self, query: str, year: str | None = None, limit: int = 10
    ) -> List[Stored[PositionPaper]]:
        criteria = _combine(
            _text_criteria(query, ("title", "description", "content")),
            {"publication_year": year} if year else {},
        )
        return self._find(POSITION_PAPERS, criteria, [("publication_year", -1)], limit)

    def get_all_position_papers(self, limit: int = 20) -> List[Stored[PositionPaper]]:
        return self._find(POSITION_PAPERS, {}, [("publication_year", -1)], limit)

    def search_dossiers(
        self,
        query: str,
        category: str | None = None,
        language: str | None = None,
        limit: int = 10,
    ) -> List[Stored[Dossier]]:
        criteria = _combine(
            _text_criteria(query, ("title", "description", "content")),
            {"categories": category} if category else {},
            {"language": language} if language else {},
        )
        return self._find(DOSSIERS, criteria, _LATEST_FIRST, limit)

    def get_all_dossiers(self, limit: int = 20) -> List[Stored[Dossier]]:
        return self._find(DOSSIERS, {}, _BY_ID, limit)

    def get_all_committees(
        self, limit: int = 20, sector: str | None = None
    ) -> List[Stored[Committee]]:
        criteria = {"sector": sector} if sector else {}
        return self._find(COMMITTEES, criteria, [("psc_number", 1)], limit)

    def get_upcoming_events(
        self, limit: int = 5, today: date | None = None
    ) -> List[Stored[Event]]:
        """Eventos cuja data interpretada é hoje ou posterior."""

        criteria = {"event_day": {"$gte": event_day_floor(today)}}
        return self._find(EVENTS, criteria, [("event_day", 1)], limit)

    def get_all_events(self, limit: int = 10) -> List[Stored[Event]]:
        """Todos os eventos, dos mais distantes aos mais antigos; sem data por último."""

        return self._find(EVENTS, {}, [("event_day", -1), ("id", -1)], limit)

    def search_downloads(
        self, query: str, file_type: str | None = None, limit: int = 10
    ) -> List[Stored[Download]]:
        criteria = _combine(
            _text_criteria(query, ("title", "description")),
            {"file_type": {"$regex": f"^{re.escape(file_type)}$", "$options": "i"}}
            if file_type
            else {},
        )
        return self._find(DOWNLOADS, criteria, _LATEST_FIRST, limit)

    def get_all_downloads(self, limit: int = 20) -> List[Stored[Download]]:
        return self._find(DOWNLOADS, {}, _BY_ID, limit)

    def get_about_sections(
        self, section_type: str | None = None
    ) -> List[Stored[AboutSection]]:
        criteria = {"section_type": section_type} if section_type else {}
        return self._find(ABOUT_SECTIONS, criteria, _BY_ID, None)

    def search_press_articles(
        self,
        query: str,
        source: str | None = None,
        language: str | None = None,
        limit: int = 10,
    ) -> List[Stored[PressArticle]]:
        criteria = _combine(
            _text_criteria(query, ("title", "summary", "content")),
            {"source": _contains(source)} if source else {},
            {"language": language} if language else {},
        )
        return self._find(PRESS_ARTICLES, criteria, _MOST_RECENT, limit)

    def get_recent_press_articles(self, limit: int = 10) -> List[Stored[PressArticle]]:
        return self._find(PRESS_ARTICLES, {}, _MOST_RECENT, limit)

    def get_scrape_metadata(self) -> List[ScrapeMetadata]:
        try:
            cursor = self._database[METADATA_COLLECTION].find({}, _PROJECTION).sort(
                [("section", 1)]
            )
            documents = list(cursor)
        except PyMongoError as exc:
            raise StoreError(f"Failed to read scrape metadata: {exc}") from exc
        return [
            ScrapeMetadata(
                section=document["section"],
                last_scraped=document["last_scraped"],
                status=document["status"],
                items_scraped=document.get("items_scraped", 0),
                error_message=document.get("error_message"),
            )
            for document in documents
        ]

    def _find(
        self,
        collection: ContentCollection[Any],
        criteria: Dict[str, Any],
        sort: Sort,
        limit: int | None,
    ) -> List[Stored[Any]]:
        try:
            cursor = self._database[collection.name].find(criteria, _PROJECTION).sort(sort)
            if limit:
                cursor = cursor.limit(limit)
            documents = list(cursor)
        except PyMongoError as exc:
            raise StoreError(f"Failed to read {collection.name}: {exc}") from exc
        return [collection.from_document(document) for document in documents]


__all__ = ["MongoContentReadRepository"]
