"""Envelope devolvido pelas consultas ao armazenamento."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Stored(Generic[T]):
    """Registro persistido acompanhado do identificador e dos carimbos de tempo."""

    #: Identificador inteiro atribuído na primeira inserção.
    id: int
    record: T
    scraped_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
