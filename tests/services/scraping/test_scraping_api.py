"""Testes das rotas FastAPI de disparo e acompanhamento da coleta."""
from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from denuo.api import create_app
from denuo.domain.entities import ScrapeMetadata
from denuo.domain.errors import StoreError
from denuo.services.scraping.api import include_routes


class _FakeScrapeService:
    def __init__(self) -> None:
        self.runs = 0

    async def run(self):
        self.runs += 1


class _FakeReader:
    def __init__(self, rows=None, error: Exception | None = None) -> None:
        self._rows = rows or []
        self._error = error

    def get_scrape_metadata(self):
        if self._error is not None:
            raise self._error
        return self._rows


def _container(reader: _FakeReader | None = None) -> SimpleNamespace:
    return SimpleNamespace(
        scrape_service=_FakeScrapeService(),
        read_repository=reader or _FakeReader(),
    )


def _client(container) -> TestClient:
    app = FastAPI()
    include_routes(app, container)
    return TestClient(app)


def test_trigger_scrape_runs_in_background() -> None:
    container = _container()

    response = _client(container).post("/scrape")

    assert response.status_code == 202
    assert response.json() == {"status": "Scraping started"}
    assert container.scrape_service.runs == 1


def test_trigger_scrape_without_database_returns_503() -> None:
    response = _client(None).post("/scrape")

    assert response.status_code == 503
    assert response.json() == {"detail": "Database not available"}


def test_scrape_status_lists_metadata_rows() -> None:
    row = ScrapeMetadata(
        section="events",
        last_scraped=datetime(2025, 3, 1, 6, 0, tzinfo=timezone.utc),
        status="failed",
        items_scraped=0,
        error_message="HTTP 500",
    )

    response = _client(_container(_FakeReader([row]))).get("/scrape/status")

    assert response.status_code == 200
    payload = response.json()
    assert payload[0]["section"] == "events"
    assert payload[0]["status"] == "failed"
    assert payload[0]["error_message"] == "HTTP 500"
    assert payload[0]["last_scraped"].startswith("2025-03-01T06:00:00")


def test_scrape_status_reports_store_errors() -> None:
    container = _container(_FakeReader(error=StoreError("primary down")))

    response = _client(container).get("/scrape/status")

    assert response.status_code == 500
    assert response.json() == {"detail": "primary down"}


def test_health_reports_database_availability() -> None:
    assert _client(_container()).get("/health").json() == {
        "status": "ok",
        "database": "available",
    }
    assert _client(None).get("/health").json()["database"] == "unavailable"


def test_create_app_without_mongo_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MONGO_URI", raising=False)

    app = create_app(interval_hours=0)

    with TestClient(app) as client:
        assert client.post("/scrape").status_code == 503
    assert app.state.scheduler.enabled is False


def test_create_app_degrades_when_store_is_unreachable(monkeypatch: pytest.MonkeyPatch) -> None:
    def unreachable():
        raise StoreError("Failed to create content indexes: connection refused")

    monkeypatch.setattr("denuo.api.build_scraping_container", unreachable)

    app = create_app(interval_hours=0)

    with TestClient(app) as client:
        assert client.post("/scrape").json() == {"detail": "Database not available"}
        assert client.get("/health").json()["database"] == "unavailable"


def test_create_app_uses_given_container() -> None:
    container = _container()

    with TestClient(create_app(container, interval_hours=0)) as client:
        assert client.post("/scrape").status_code == 202

    assert container.scrape_service.runs == 1
