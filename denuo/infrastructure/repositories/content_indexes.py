"""Utilitários para criação de índices das coleções de conteúdo."""
from __future__ import annotations

from typing import Any

from pymongo.errors import PyMongoError

from denuo.domain.errors import StoreError

from .content_collections import (
    CONTENT_COLLECTIONS,
    EVENTS,
    METADATA_COLLECTION,
    NEWS,
    POSITION_PAPERS,
    PRESS_ARTICLES,
)


def ensure_content_indexes(database: Any) -> None:
    """Garante a unicidade das chaves naturais e os índices de ordenação.

    Um servidor inacessível ou que recusa os índices vira :class:`StoreError`.
    """

    try:
        _create_indexes(database)
    except PyMongoError as exc:
        raise StoreError(f"Failed to create content indexes: {exc}") from exc


def _create_indexes(database: Any) -> None:
    for collection in CONTENT_COLLECTIONS:
        database[collection.name].create_index(
            [(field, 1) for field in collection.key_fields],
            name=f"{collection.name}_natural_key",
            unique=True,
            background=True,
        )
        database[collection.name].create_index(
            [("id", 1)], name=f"{collection.name}_id", unique=True, background=True
        )

    definitions: tuple[tuple[str, list[tuple[str, int]], dict[str, object]], ...] = (
        (
            NEWS.name,
            [("publication_date", -1), ("updated_at", -1)],
            {"name": "news_recent", "background": True},
        ),
        (
            PRESS_ARTICLES.name,
            [("publication_date", -1), ("updated_at", -1)],
            {"name": "press_articles_recent", "background": True},
        ),
        (
            POSITION_PAPERS.name,
            [("publication_year", -1)],
            {"name": "standpunten_year", "background": True},
        ),
        (
            EVENTS.name,
            [("event_day", 1)],
            {"name": "events_day", "background": True},
        ),
        (
            METADATA_COLLECTION,
            [("section", 1)],
            {"name": "scrape_metadata_section", "unique": True, "background": True},
        ),
    )
    for name, keys, options in definitions:
        database[name].create_index(keys, **options)


__all__ = ["ensure_content_indexes"]
