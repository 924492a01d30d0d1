"""Interfaces de repositório utilizadas pela camada de domínio."""
from .content_read_repository import ContentReadRepository
from .content_repository import ContentRepository

__all__ = ["ContentRepository", "ContentReadRepository"]
