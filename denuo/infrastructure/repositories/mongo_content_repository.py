"""Repositório de conteúdo com persistência em MongoDB."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Sequence

from pymongo import ReturnDocument
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
    ScrapeStatus,
)
from denuo.domain.errors import StoreError
from denuo.domain.repositories import ContentRepository

from .content_collections import (
    ABOUT_SECTIONS,
    COMMITTEES,
    COUNTERS_COLLECTION,
    DOSSIERS,
    DOWNLOADS,
    EVENTS,
    METADATA_COLLECTION,
    NEWS,
    POSITION_PAPERS,
    PRESS_ARTICLES,
    ContentCollection,
)
from .content_indexes import ensure_content_indexes


class MongoContentRepository(ContentRepository):
    """Grava o conteúdo coletado em uma coleção por tipo de registro."""

    def __init__(
        self,
        database: Any,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Configura índices e guarda o banco utilizado pelo repositório."""

        self._database = database
        """Banco MongoDB que contém as coleções de conteúdo."""

        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._log = logging.getLogger("denuo.store")
        ensure_content_indexes(database)

    def store_news(self, items: Sequence[NewsItem]) -> None:
        self._store(NEWS, items)

    def store_position_papers(self, items: Sequence[PositionPaper]) -> None:
        self._store(POSITION_PAPERS, items)

    def store_dossiers(self, items: Sequence[Dossier]) -> None:
        self._store(DOSSIERS, items)

    def store_committees(self, items: Sequence[Committee]) -> None:
        self._store(COMMITTEES, items)

    def store_events(self, items: Sequence[Event]) -> None:
        self._store(EVENTS, items)

    def store_downloads(self, items: Sequence[Download]) -> None:
        self._store(DOWNLOADS, items)

    def store_about_sections(self, items: Sequence[AboutSection]) -> None:
        self._store(ABOUT_SECTIONS, items)

    def store_press_articles(self, items: Sequence[PressArticle]) -> None:
        self._store(PRESS_ARTICLES, items)

    def update_scrape_metadata(
        self,
        section: str,
        status: ScrapeStatus,
        items_scraped: int = 0,
        error_message: str | None = None,
    ) -> None:
        """Substitui a linha da seção, criando-a quando ainda não existe."""

        document = {
            "section": section,
            "last_scraped": self._clock(),
            "status": status,
            "items_scraped": items_scraped,
            "error_message": error_message,
        }
        try:
            self._database[METADATA_COLLECTION].replace_one(
                {"section": section}, document, upsert=True
            )
        except PyMongoError as exc:
            raise StoreError(f"Failed to update metadata for '{section}': {exc}") from exc

    def _store(self, collection: ContentCollection[Any], items: Sequence[Any]) -> None:
        """Upsert de cada item pela chave natural seguido do metadado de sucesso."""

        if not items:
            return
        try:
            for item in items:
                self._upsert(collection, collection.to_document(item))
        except PyMongoError as exc:
            raise StoreError(f"Failed to store {collection.section}: {exc}") from exc
        self._log.info("%d registros gravados em %s", len(items), collection.name)
        self.update_scrape_metadata(collection.section, "success", len(items))

    def _upsert(self, collection: ContentCollection[Any], document: dict) -> None:
        target = self._database[collection.name]
        key = collection.key_for(document)
        now = self._clock()
        existing = target.find_one(key, {"id": 1})
        if existing is not None:
            target.update_one(key, {"$set": {**document, "updated_at": now}})
            return
        target.update_one(
            key,
            {
                "$set": {**document, "updated_at": now},
                "$setOnInsert": {
                    "id": self._next_id(collection.name),
                    "scraped_at": now,
                },
            },
            upsert=True,
        )

    def _next_id(self, name: str) -> int:
        counter = self._database[COUNTERS_COLLECTION].find_one_and_update(
            {"_id": name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter["seq"])


__all__ = ["MongoContentRepository"]
