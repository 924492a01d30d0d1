"""Serviço de orquestração da coleta do portal denuo.be."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from denuo.domain.errors import FetchError
from denuo.domain.ports import PageFetcher
from denuo.domain.repositories import ContentRepository
from denuo.extraction.pages import (
    ABOUT,
    COMMITTEES,
    DOSSIERS,
    DOWNLOADS,
    EVENTS,
    NEWS,
    PRESS,
    SECTIONS,
    SITE_ORIGIN,
    STANDPUNTEN,
    SitePage,
    pages_for,
)
from denuo.extraction.parsers import parse_page

#: Método do repositório responsável por gravar cada seção.
STORE_METHODS: Dict[str, str] = {
    NEWS: "store_news",
    STANDPUNTEN: "store_position_papers",
    DOSSIERS: "store_dossiers",
    COMMITTEES: "store_committees",
    EVENTS: "store_events",
    DOWNLOADS: "store_downloads",
    ABOUT: "store_about_sections",
    PRESS: "store_press_articles",
}


@dataclass(slots=True)
class SectionOutcome:
    """Resultado de uma seção dentro de uma execução."""

    section: str
    #: Quantidade de registros efetivamente gravados.
    items: int = 0
    #: Mensagens de erro de busca, interpretação ou gravação.
    errors: List[str] = field(default_factory=list)

    @property
    def status(self) -> str:
        return "failed" if self.errors else "success"

    @property
    def error_message(self) -> Optional[str]:
        return "; ".join(self.errors) if self.errors else None


@dataclass(slots=True)
class ScrapeRunResult:
    """Resumo de uma execução completa ou de uma única seção."""

    started_at: datetime
    finished_at: datetime
    outcomes: List[SectionOutcome]

    @property
    def total_items(self) -> int:
        return sum(outcome.items for outcome in self.outcomes)

    @property
    def failed_sections(self) -> Tuple[str, ...]:
        return tuple(outcome.section for outcome in self.outcomes if outcome.errors)

    @property
    def succeeded(self) -> bool:
        return not self.failed_sections


@dataclass(slots=True)
class _FetchedPage:
    page: SitePage
    html: Optional[str] = None
    error: Optional[str] = None


class ScrapeService:
    """Busca todas as páginas em paralelo, interpreta e grava cada seção.

    Uma falha de busca ou de gravação fica restrita à seção afetada: as
    demais seções seguem normalmente e a seção com erro recebe uma linha
    ``failed`` em ``scrape_metadata``.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        repository: ContentRepository,
        *,
        origin: str = SITE_ORIGIN,
    ) -> None:
        # Baixa o HTML de cada página listada em ``SITE_PAGES``.
        self._fetcher = fetcher
        # Recebe os lotes interpretados e as linhas de metadados.
        self._repository = repository
        self._origin = origin.rstrip("/")
        self._log = logging.getLogger("denuo.scraper")

    async def run(self) -> ScrapeRunResult:
        """Executa a coleta de todas as seções; nunca propaga exceções."""

        started_at = datetime.now(timezone.utc)
        try:
            outcomes = await self._scrape(SECTIONS)
        except Exception:
            self._log.exception("Coleta interrompida por erro inesperado")
            outcomes = [
                SectionOutcome(section, errors=["scrape run aborted"])
                for section in SECTIONS
            ]
        return ScrapeRunResult(
            started_at=started_at,
            finished_at=datetime.now(timezone.utc),
            outcomes=outcomes,
        )

    async def scrape_section(self, name: str) -> ScrapeRunResult:
        """Executa a mesma coleta para uma única seção.

        Raises:
            ValueError: quando ``name`` não é uma seção conhecida.
        """

        pages_for(name)
        started_at = datetime.now(timezone.utc)
        outcomes = await self._scrape((name,))
        return ScrapeRunResult(
            started_at=started_at,
            finished_at=datetime.now(timezone.utc),
            outcomes=outcomes,
        )

    async def _scrape(self, sections: Sequence[str]) -> List[SectionOutcome]:
        pages = [page for section in sections for page in pages_for(section)]
        fetched = await asyncio.gather(*(self._fetch(page) for page in pages))

        outcomes = {section: SectionOutcome(section) for section in sections}
        batches: Dict[str, List[Any]] = {section: [] for section in sections}
        for result in fetched:
            outcome = outcomes[result.page.section]
            if result.error is not None:
                outcome.errors.append(result.error)
                continue
            try:
                batches[result.page.section].extend(
                    parse_page(result.page, result.html or "", self._origin)
                )
            except Exception as exc:
                self._log.exception("Falha ao interpretar %s", result.page.path)
                outcome.errors.append(f"Failed to parse {result.page.path}: {exc}")

        await self._store_batches(batches, outcomes)
        await self._record_failures(outcome for outcome in outcomes.values() if outcome.errors)

        for outcome in outcomes.values():
            self._log.info(
                "%s: %d itens (%s)", outcome.section, outcome.items, outcome.status
            )
        self._log.info(
            "Coleta concluída: %d itens em %d seções",
            sum(outcome.items for outcome in outcomes.values()),
            len(outcomes),
        )
        return list(outcomes.values())

    async def _fetch(self, page: SitePage) -> _FetchedPage:
        url = page.url_for(self._origin)
        try:
            html = await self._fetcher.fetch(url)
        except FetchError as exc:
            self._log.warning("%s", exc)
            return _FetchedPage(page, error=str(exc))
        except Exception as exc:
            self._log.exception("Falha inesperada ao buscar %s", url)
            return _FetchedPage(page, error=f"Failed to fetch {url}: {exc}")
        return _FetchedPage(page, html=html)

    async def _store_batches(
        self, batches: Dict[str, List[Any]], outcomes: Dict[str, SectionOutcome]
    ) -> None:
        pending = [(section, items) for section, items in batches.items() if items]
        results = await asyncio.gather(
            *(
                asyncio.to_thread(getattr(self._repository, STORE_METHODS[section]), items)
                for section, items in pending
            ),
            return_exceptions=True,
        )
        for (section, items), result in zip(pending, results):
            if isinstance(result, BaseException):
                self._log.error("Falha ao gravar %s: %s", section, result)
                outcomes[section].errors.append(f"Failed to store {section}: {result}")
                continue
            outcomes[section].items = len(items)

    async def _record_failures(self, failed: Iterable[SectionOutcome]) -> None:
        for outcome in failed:
            try:
                await asyncio.to_thread(
                    self._repository.update_scrape_metadata,
                    outcome.section,
                    "failed",
                    outcome.items,
                    outcome.error_message,
                )
            except Exception as exc:
                self._log.error(
                    "Falha ao registrar metadados de %s: %s", outcome.section, exc
                )


__all__ = ["ScrapeRunResult", "ScrapeService", "SectionOutcome", "STORE_METHODS"]
