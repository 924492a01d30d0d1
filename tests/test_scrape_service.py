"""Testes da orquestração da coleta e do isolamento de falhas por seção."""
from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Sequence, Tuple

import pytest

from denuo.application import ScrapeService
from denuo.domain.errors import FetchError, StoreError
from denuo.domain.repositories import ContentRepository

_ORIGIN = "https://denuo.be"

_PAGES: Dict[str, str] = {
    "/nl/denuo-nieuws": (
        '<article about="/nl/nieuws/akkoord">'
        '<span class="field--name-title">Sectorakkoord 2024 afgerond</span></article>'
    ),
    "/fr/actualites-denuo": (
        '<article about="/fr/actualites/accord">'
        '<span class="field--name-title">Accord sectoriel conclu</span></article>'
    ),
    "/nl/standpunten": (
        '<a href="/files/memorandum.pdf">'
        '<div class="field--name-field-title">Memorandum werkbaar werk (2021)</div></a>'
    ),
    "/nl/dossiers": '<a href="/nl/dossiers/energie">Energietransitie</a>',
    "/nl/paritaire-comites": "<p>PSC 142.01 - Metalen recuperatie</p>",
    "/nl/agenda": (
        '<div class="event"><h3>Workshop circulaire bouw</h3>'
        "<span>12 maart 2025</span></div>"
    ),
    "/nl/downloads": '<a href="/files/jaarverslag.pdf">Jaarverslag 2023</a>',
    "/nl/over-denuo": (
        "<main><h1>Over Denuo</h1>"
        "<p>Denuo is de federatie van de circulaire economie.</p></main>"
    ),
    "/nl/denuo-de-pers-0": (
        '<a href="https://www.standaard.be/a">De Standaard: Denuo over recyclage</a>'
    ),
}


class _FakeFetcher:
    def __init__(
        self,
        failing: Sequence[str] = (),
        crash: bool = False,
        crashing: Sequence[str] = (),
    ) -> None:
        self._failing = set(failing)
        self._crash = crash
        self._crashing = set(crashing)
        self.calls: List[str] = []

    async def fetch(self, url: str) -> str:
        self.calls.append(url)
        path = url[len(_ORIGIN):]
        if self._crash or path in self._crashing:
            raise RuntimeError("unexpected")
        if path in self._failing:
            raise FetchError(url, "HTTP 500 Internal Server Error")
        return _PAGES[path]


class _RecordingRepository(ContentRepository):
    def __init__(self, failing_stores: Sequence[str] = ()) -> None:
        self.stored: Dict[str, List[Any]] = {}
        self.metadata: List[Tuple[str, str, int, str | None]] = []
        self._failing_stores = set(failing_stores)

    def _record(self, name: str, items: Sequence[Any]) -> None:
        if name in self._failing_stores:
            raise StoreError(f"{name} rejected")
        self.stored[name] = list(items)

    def store_news(self, items):
        self._record("news", items)

    def store_position_papers(self, items):
        self._record("standpunten", items)

    def store_dossiers(self, items):
        self._record("dossiers", items)

    def store_committees(self, items):
        self._record("committees", items)

    def store_events(self, items):
        self._record("events", items)

    def store_downloads(self, items):
        self._record("downloads", items)

    def store_about_sections(self, items):
        self._record("about", items)

    def store_press_articles(self, items):
        self._record("press", items)

    def update_scrape_metadata(self, section, status, items_scraped=0, error_message=None):
        self.metadata.append((section, status, items_scraped, error_message))


def test_run_stores_every_section() -> None:
    fetcher = _FakeFetcher()
    repository = _RecordingRepository()

    result = asyncio.run(ScrapeService(fetcher, repository).run())

    assert len(fetcher.calls) == 9
    assert set(repository.stored) == {
        "news",
        "standpunten",
        "dossiers",
        "committees",
        "events",
        "downloads",
        "about",
        "press",
    }
    assert [item.language for item in repository.stored["news"]] == ["nl", "fr"]
    assert repository.metadata == []
    assert result.succeeded
    assert result.total_items == 9


def test_failed_section_is_isolated_and_marked_failed() -> None:
    repository = _RecordingRepository()
    service = ScrapeService(_FakeFetcher(failing=["/nl/agenda"]), repository)

    result = asyncio.run(service.run())

    assert "events" not in repository.stored
    assert len(repository.stored) == 7
    assert all(repository.stored.values())
    assert len(repository.metadata) == 1
    section, status, items, error = repository.metadata[0]
    assert (section, status, items) == ("events", "failed", 0)
    assert "HTTP 500" in error
    assert result.failed_sections == ("events",)


def test_partially_failed_section_keeps_successful_pages() -> None:
    repository = _RecordingRepository()
    service = ScrapeService(_FakeFetcher(failing=["/fr/actualites-denuo"]), repository)

    result = asyncio.run(service.scrape_section("news"))

    assert [item.language for item in repository.stored["news"]] == ["nl"]
    assert repository.metadata == [
        (
            "news",
            "failed",
            1,
            "Failed to fetch https://denuo.be/fr/actualites-denuo: HTTP 500 Internal Server Error",
        )
    ]
    assert [outcome.section for outcome in result.outcomes] == ["news"]


def test_store_failure_marks_only_that_section() -> None:
    repository = _RecordingRepository(failing_stores=["dossiers"])

    result = asyncio.run(ScrapeService(_FakeFetcher(), repository).run())

    assert "dossiers" not in repository.stored
    assert len(repository.stored) == 7
    assert repository.metadata == [
        ("dossiers", "failed", 0, "Failed to store dossiers: dossiers rejected")
    ]
    assert result.failed_sections == ("dossiers",)


def test_run_never_raises() -> None:
    repository = _RecordingRepository()

    result = asyncio.run(ScrapeService(_FakeFetcher(crash=True), repository).run())

    assert not result.succeeded
    assert repository.stored == {}
    assert {row[0] for row in repository.metadata} == {
        "news",
        "standpunten",
        "dossiers",
        "committees",
        "events",
        "downloads",
        "about",
        "press",
    }
    assert all(row[1] == "failed" for row in repository.metadata)


def test_unexpected_fetch_error_only_fails_its_page() -> None:
    repository = _RecordingRepository()
    service = ScrapeService(_FakeFetcher(crashing=["/nl/dossiers"]), repository)

    result = asyncio.run(service.run())

    assert "dossiers" not in repository.stored
    assert len(repository.stored) == 7
    assert [row[:3] for row in repository.metadata] == [("dossiers", "failed", 0)]
    assert "unexpected" in repository.metadata[0][3]
    assert result.failed_sections == ("dossiers",)


def test_scrape_section_rejects_unknown_names() -> None:
    service = ScrapeService(_FakeFetcher(), _RecordingRepository())

    with pytest.raises(ValueError):
        asyncio.run(service.scrape_section("blog"))
