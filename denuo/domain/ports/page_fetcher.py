"""Porta de entrada responsável por obter o HTML das páginas do portal."""
from __future__ import annotations

from abc import ABC, abstractmethod


class PageFetcher(ABC):
    """Define como uma página é baixada como texto."""

    @abstractmethod
    async def fetch(self, url: str) -> str:
        """Baixar ``url`` e devolver o corpo; levanta ``FetchError`` em falhas."""
