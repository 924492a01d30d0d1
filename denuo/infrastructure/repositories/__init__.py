"""Implementações de repositórios baseadas em MongoDB."""

from .content_indexes import ensure_content_indexes
from .mongo_content_read_repository import MongoContentReadRepository
from .mongo_content_repository import MongoContentRepository

__all__ = [
    "MongoContentRepository",
    "MongoContentReadRepository",
    "ensure_content_indexes",
]
