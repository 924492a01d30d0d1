"""Entidade que representa uma seção da página institucional."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

SectionType = Literal["mission", "team", "contact", "governance", "general"]


@dataclass(frozen=True)
class AboutSection:
    """Trecho da página "over Denuo" delimitado por um cabeçalho."""

    section_title: str
    content: str
    section_type: SectionType = "general"
    url: Optional[str] = None
