"""Infrastructure public API for Denuo.

Exposes concrete implementations and helpers so consumers can import from
``denuo.infrastructure`` directly.
"""

from .database import MongoClientFactory, MongoSettings
from .fetcher import HttpxPageFetcher
from .repositories import (
    MongoContentReadRepository,
    MongoContentRepository,
    ensure_content_indexes,
)

__all__ = [
    "MongoSettings",
    "MongoClientFactory",
    "MongoContentRepository",
    "MongoContentReadRepository",
    "HttpxPageFetcher",
    "ensure_content_indexes",
]
