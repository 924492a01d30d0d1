"""Resultado registrado para cada seção em uma execução de coleta."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

ScrapeStatus = Literal["success", "failed"]


@dataclass(frozen=True)
class ScrapeMetadata:
    """Linha de ``scrape_metadata``; sobrescrita a cada execução."""

    section: str
    last_scraped: datetime
    status: ScrapeStatus
    items_scraped: int = 0
    error_message: Optional[str] = None
