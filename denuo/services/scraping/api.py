"""Rotas FastAPI que disparam e acompanham a coleta."""
from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, BackgroundTasks, FastAPI, HTTPException, status
from pydantic import BaseModel

from denuo.domain.errors import StoreError

from .container import ScrapingContainer

DATABASE_UNAVAILABLE = "Database not available"


class ScrapeTriggerResponse(BaseModel):
    """Confirmação de que a coleta foi agendada em segundo plano."""

    status: str


class ScrapeMetadataResponse(BaseModel):
    """Linha de ``scrape_metadata`` exposta pela API."""

    #: Seção coletada (``news``, ``standpunten``...).
    section: str
    #: Instante da última gravação em ISO 8601.
    last_scraped: datetime
    #: ``success`` ou ``failed``.
    status: str
    items_scraped: int = 0
    error_message: str | None = None


class HealthResponse(BaseModel):
    status: str
    database: str


def include_routes(
    app: FastAPI, container: ScrapingContainer | None, *, prefix: str = ""
) -> None:
    """Registra as rotas de coleta na aplicação informada.

    ``container`` é ``None`` quando nenhum banco foi configurado; nesse caso as
    rotas que dependem do banco respondem ``503``.
    """

    router = APIRouter(prefix=prefix, tags=["Coleta"])

    def require_container() -> ScrapingContainer:
        if container is None:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=DATABASE_UNAVAILABLE,
            )
        return container

    @router.post(
        "/scrape",
        response_model=ScrapeTriggerResponse,
        status_code=status.HTTP_202_ACCEPTED,
    )
    async def trigger_scrape(background_tasks: BackgroundTasks) -> ScrapeTriggerResponse:
        """Agenda uma execução completa da coleta e responde imediatamente."""

        active = require_container()
        background_tasks.add_task(active.scrape_service.run)
        return ScrapeTriggerResponse(status="Scraping started")

    @router.get("/scrape/status", response_model=list[ScrapeMetadataResponse])
    def scrape_status() -> list[ScrapeMetadataResponse]:
        """Lista o resultado mais recente de cada seção."""

        active = require_container()
        try:
            rows = active.read_repository.get_scrape_metadata()
        except StoreError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return [
            ScrapeMetadataResponse(
                section=row.section,
                last_scraped=row.last_scraped,
                status=row.status,
                items_scraped=row.items_scraped,
                error_message=row.error_message,
            )
            for row in rows
        ]

    @router.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(
            status="ok",
            database="available" if container is not None else "unavailable",
        )

    app.include_router(router)


__all__ = [
    "DATABASE_UNAVAILABLE",
    "HealthResponse",
    "ScrapeMetadataResponse",
    "ScrapeTriggerResponse",
    "include_routes",
]
