"""Ponto de entrada REST que dispara e acompanha a coleta do denuo.be."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from denuo.domain.errors import StoreError
from denuo.services.scraping import (
    ScrapeScheduler,
    ScrapingContainer,
    build_scraping_container,
)
from denuo.services.scraping.api import include_routes as include_scraping_routes
from denuo.settings import get_api_bind_host, get_api_port, get_scrape_interval_hours


def configure_cors(app: FastAPI) -> None:
    """Aplica a configuração padrão de CORS utilizada pelos serviços."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def create_app(
    container: ScrapingContainer | None = None,
    *,
    interval_hours: float | None = None,
) -> FastAPI:
    """Cria a aplicação FastAPI com as rotas de coleta e o agendador.

    Sem ``container`` a aplicação tenta montar um a partir do ambiente; se não
    houver banco configurado, as rotas respondem ``503`` e o agendador apenas
    registra o erro a cada execução.
    """

    log = logging.getLogger("denuo.api")
    owns_container = container is None
    if container is None:
        try:
            container = build_scraping_container()
        except StoreError as exc:
            log.error("Database not available: %s", exc)

    active = container
    scheduler = ScrapeScheduler(
        lambda: active.scrape_service if active is not None else None,
        get_scrape_interval_hours() if interval_hours is None else interval_hours,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        scheduler.start()
        try:
            yield
        finally:
            await scheduler.stop()
            if owns_container and active is not None:
                await active.aclose()

    app = FastAPI(
        title="Denuo Scraper API",
        version="1.0.0",
        description=(
            "Dispara a coleta do portal denuo.be e expõe o estado da última "
            "execução de cada seção."
        ),
        lifespan=lifespan,
    )
    app.state.scheduler = scheduler
    configure_cors(app)
    include_scraping_routes(app, active)
    return app


def run() -> None:
    """Executa a API utilizando o Uvicorn."""

    load_dotenv()
    uvicorn.run(
        "denuo.api:create_app",
        host=get_api_bind_host(),
        port=get_api_port(),
        factory=True,
    )


__all__ = ["configure_cors", "create_app", "run"]
