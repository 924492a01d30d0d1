"""Testes da montagem do container de coleta."""
from __future__ import annotations

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from denuo.domain.errors import StoreError
from denuo.services.scraping import build_scraping_container


class _UnreachableCollection:
    def create_index(self, keys, **options) -> None:
        raise ServerSelectionTimeoutError("127.0.0.1:1: connection refused")


class _UnreachableDatabase:
    def __getitem__(self, name: str) -> _UnreachableCollection:
        return _UnreachableCollection()


class _ClientFactory:
    def __init__(self) -> None:
        self.closed = False

    def get_database(self) -> _UnreachableDatabase:
        return _UnreachableDatabase()

    def close(self) -> None:
        self.closed = True


def test_unreachable_server_closes_client_and_raises_store_error() -> None:
    factory = _ClientFactory()

    with pytest.raises(StoreError):
        build_scraping_container(client_factory=factory)

    assert factory.closed
