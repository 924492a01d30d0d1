"""Dependency container for the agent tool surface."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from denuo.domain.errors import StoreUnavailableError
from denuo.infrastructure.database import MongoClientFactory, MongoSettings
from denuo.infrastructure.repositories import MongoContentReadRepository

from .toolkit import ContentToolkit


@dataclass
class ToolsContainer:
    """Container exposing the toolkit and the client backing it."""

    toolkit: ContentToolkit
    client_factory: MongoClientFactory | None = None

    def close(self) -> None:
        if self.client_factory is not None:
            self.client_factory.close()


def build_tools_container(
    *,
    settings: MongoSettings | None = None,
    client_factory: MongoClientFactory | None = None,
) -> ToolsContainer:
    """Build the tools container.

    A missing Mongo configuration is not fatal here: the toolkit is created
    without a repository and every tool answers "Database not available".
    """

    try:
        client_factory = client_factory or MongoClientFactory(settings)
    except StoreUnavailableError as exc:
        logging.getLogger("denuo.tools").error("%s", exc)
        return ToolsContainer(toolkit=ContentToolkit(None))

    repository = MongoContentReadRepository(client_factory.get_database())
    return ToolsContainer(
        toolkit=ContentToolkit(repository), client_factory=client_factory
    )
