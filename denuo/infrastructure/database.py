"""Mongo database utilities."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from pymongo import MongoClient

from denuo.domain.errors import StoreUnavailableError


def get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None:
        raise StoreUnavailableError(f"Environment variable '{name}' is not set")
    return value


@dataclass
class MongoSettings:
    uri: str
    database: str

    @classmethod
    def from_env(cls) -> "MongoSettings":
        """Read ``MONGO_URI`` and ``MONGO_DATABASE``.

        Unlike the database name, the URI has no default: without it the
        store is considered unavailable.
        """

        uri = os.getenv("MONGO_URI", "").strip()
        if not uri:
            raise StoreUnavailableError("Environment variable 'MONGO_URI' is not set")
        database = get_env("MONGO_DATABASE", "denuo")
        return cls(uri=uri, database=database)


class MongoClientFactory:
    """Creates Mongo clients following the dependency inversion principle."""

    def __init__(self, settings: MongoSettings | None = None) -> None:
        self._settings = settings or MongoSettings.from_env()
        self._client: MongoClient | None = None

    def create_client(self) -> MongoClient:
        if not self._client:
            self._client = MongoClient(
                self._settings.uri, serverSelectionTimeoutMS=5000, tz_aware=True
            )
        return self._client

    def get_database(self) -> Any:
        client = self.create_client()
        return client[self._settings.database]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
