"""API pública do domínio do projeto Denuo.

O módulo centraliza as entidades, portas e repositórios mais utilizados
para que possam ser importados diretamente de ``denuo.domain``.
"""

from .entities import (
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
from .errors import FetchError, StoreError, StoreUnavailableError
from .ports import PageFetcher
from .repositories import ContentReadRepository, ContentRepository

__all__ = [
    "AboutSection",
    "Committee",
    "Download",
    "Dossier",
    "Event",
    "NewsItem",
    "PositionPaper",
    "PressArticle",
    "ScrapeMetadata",
    "Stored",
    "FetchError",
    "StoreError",
    "StoreUnavailableError",
    "PageFetcher",
    "ContentRepository",
    "ContentReadRepository",
]
