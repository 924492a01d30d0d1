"""Dependency container for the scraping service."""
from __future__ import annotations

from dataclasses import dataclass

from denuo.application import ScrapeService
from denuo.domain.errors import StoreError
from denuo.infrastructure.database import MongoClientFactory, MongoSettings
from denuo.infrastructure.fetcher import HttpxPageFetcher
from denuo.infrastructure.repositories import (
    MongoContentReadRepository,
    MongoContentRepository,
)
from denuo.settings import get_base_url, get_fetch_timeout


@dataclass
class ScrapingContainer:
    """Container exposing scraping service dependencies."""

    client_factory: MongoClientFactory
    repository: MongoContentRepository
    read_repository: MongoContentReadRepository
    fetcher: HttpxPageFetcher
    scrape_service: ScrapeService

    async def aclose(self) -> None:
        await self.fetcher.aclose()
        self.client_factory.close()


def build_scraping_container(
    *,
    settings: MongoSettings | None = None,
    client_factory: MongoClientFactory | None = None,
    fetcher: HttpxPageFetcher | None = None,
) -> ScrapingContainer:
    """Build the scraping container.

    Raises :class:`~denuo.domain.errors.StoreUnavailableError` when no Mongo
    connection is configured and :class:`~denuo.domain.errors.StoreError` when
    the configured server cannot prepare the collections.
    """

    client_factory = client_factory or MongoClientFactory(settings)
    database = client_factory.get_database()
    try:
        repository = MongoContentRepository(database)
    except StoreError:
        client_factory.close()
        raise
    read_repository = MongoContentReadRepository(database)
    fetcher = fetcher or HttpxPageFetcher(timeout=get_fetch_timeout())

    return ScrapingContainer(
        client_factory=client_factory,
        repository=repository,
        read_repository=read_repository,
        fetcher=fetcher,
        scrape_service=ScrapeService(fetcher, repository, origin=get_base_url()),
    )
