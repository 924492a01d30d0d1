"""Entidade que representa um evento da agenda."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common import SiteLanguage


@dataclass(frozen=True)
class Event:
    """Evento encontrado na agenda (workshop, netwerkevent, training)."""

    title: str
    language: SiteLanguage
    description: Optional[str] = None
    event_type: Optional[str] = None
    #: Data em texto livre, por exemplo ``12 maart 2025`` ou ``12/03/2025``.
    event_date: Optional[str] = None
    #: Intervalo de horário, por exemplo ``09:00 - 12:30``.
    event_time: Optional[str] = None
    location_name: Optional[str] = None
    location_address: Optional[str] = None
    url: Optional[str] = None
