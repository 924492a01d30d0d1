"""Mapeamento entre entidades, coleções MongoDB e chaves naturais."""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from datetime import date
from typing import Any, Dict, Generic, Optional, Tuple, Type, TypeVar

from denuo.domain.entities import (
    AboutSection,
    Committee,
    Download,
    Dossier,
    Event,
    NewsItem,
    PositionPaper,
    PressArticle,
    Stored,
)
from denuo.extraction.dates import parse_event_day

T = TypeVar("T")

#: Campos que o repositório acrescenta aos documentos de conteúdo.
RESERVED_FIELDS = ("id", "scraped_at", "updated_at", "event_day")

METADATA_COLLECTION = "scrape_metadata"
COUNTERS_COLLECTION = "counters"


@dataclass(frozen=True)
class ContentCollection(Generic[T]):
    """Descreve onde e como uma entidade é persistida."""

    #: Chave da seção gravada em ``scrape_metadata``.
    section: str
    #: Nome da coleção MongoDB.
    name: str
    entity: Type[T]
    #: Campos que formam a chave natural usada no upsert.
    key_fields: Tuple[str, ...]

    def to_document(self, record: T) -> Dict[str, Any]:
        """Serializa ``record`` convertendo tuplas em listas."""

        document = {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in asdict(record).items()
        }
        if self.entity is Event:
            day = parse_event_day(document.get("event_date"))
            document["event_day"] = day.isoformat() if day else None
        return document

    def key_for(self, document: Dict[str, Any]) -> Dict[str, Any]:
        return {field: document.get(field) for field in self.key_fields}

    def from_document(self, document: Dict[str, Any]) -> Stored[T]:
        """Reconstrói o registro ignorando campos desconhecidos."""

        values: Dict[str, Any] = {}
        for field in fields(self.entity):
            if field.name not in document:
                continue
            value = document[field.name]
            if isinstance(value, list):
                value = tuple(value)
            values[field.name] = value
        return Stored(
            id=int(document["id"]),
            record=self.entity(**values),
            scraped_at=document.get("scraped_at"),
            updated_at=document.get("updated_at"),
        )


NEWS = ContentCollection("news", "news", NewsItem, ("url",))
POSITION_PAPERS = ContentCollection("standpunten", "standpunten", PositionPaper, ("url",))
DOSSIERS = ContentCollection("dossiers", "dossiers", Dossier, ("url",))
COMMITTEES = ContentCollection("committees", "committees", Committee, ("psc_number",))
EVENTS = ContentCollection("events", "events", Event, ("title", "event_date", "language"))
DOWNLOADS = ContentCollection("downloads", "downloads", Download, ("download_url",))
ABOUT_SECTIONS = ContentCollection(
    "about", "about_info", AboutSection, ("section_title", "url")
)
PRESS_ARTICLES = ContentCollection("press", "press_articles", PressArticle, ("url",))

CONTENT_COLLECTIONS: Tuple[ContentCollection[Any], ...] = (
    NEWS,
    POSITION_PAPERS,
    DOSSIERS,
    COMMITTEES,
    EVENTS,
    DOWNLOADS,
    ABOUT_SECTIONS,
    PRESS_ARTICLES,
)


def event_day_floor(today: Optional[date]) -> str:
    return (today or date.today()).isoformat()


__all__ = [
    "ABOUT_SECTIONS",
    "COMMITTEES",
    "CONTENT_COLLECTIONS",
    "COUNTERS_COLLECTION",
    "DOSSIERS",
    "DOWNLOADS",
    "EVENTS",
    "METADATA_COLLECTION",
    "NEWS",
    "POSITION_PAPERS",
    "PRESS_ARTICLES",
    "RESERVED_FIELDS",
    "ContentCollection",
    "event_day_floor",
]
