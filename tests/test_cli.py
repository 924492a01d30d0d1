"""Testes da interface de linha de comando."""
from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from denuo import cli
from denuo.application import ScrapeRunResult, SectionOutcome
from denuo.domain.entities import ScrapeMetadata
from denuo.domain.errors import StoreError, StoreUnavailableError

_NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


class _FakeScrapeService:
    def __init__(self, outcomes) -> None:
        self._outcomes = outcomes
        self.sections: list[str | None] = []

    async def run(self) -> ScrapeRunResult:
        self.sections.append(None)
        return ScrapeRunResult(_NOW, _NOW, list(self._outcomes))

    async def scrape_section(self, name: str) -> ScrapeRunResult:
        self.sections.append(name)
        return ScrapeRunResult(_NOW, _NOW, list(self._outcomes))


class _FakeContainer:
    def __init__(self, outcomes=(), rows=()) -> None:
        self.scrape_service = _FakeScrapeService(outcomes)
        self.read_repository = SimpleNamespace(get_scrape_metadata=lambda: list(rows))
        self.client_factory = SimpleNamespace(close=lambda: None)
        self.closed = False

    async def aclose(self) -> None:
        self.closed = True


def test_scrape_single_section(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    container = _FakeContainer([SectionOutcome("news", items=4)])
    monkeypatch.setattr(cli, "build_scraping_container", lambda: container)

    cli.main(["scrape", "--section", "news"])

    assert container.scrape_service.sections == ["news"]
    assert container.closed
    assert "4 itens gravados no total" in capsys.readouterr().out


def test_scrape_exits_with_error_when_a_section_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    outcomes = [SectionOutcome("news", items=2), SectionOutcome("events", errors=["HTTP 500"])]
    container = _FakeContainer(outcomes)
    monkeypatch.setattr(cli, "build_scraping_container", lambda: container)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["scrape"])

    assert excinfo.value.code == 1
    assert container.scrape_service.sections == [None]


def test_scrape_without_database(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    def fail():
        raise StoreUnavailableError("Environment variable 'MONGO_URI' is not set")

    monkeypatch.setattr(cli, "build_scraping_container", fail)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["scrape"])

    assert excinfo.value.code == 1
    assert "Database not available" in capsys.readouterr().out


def test_unreachable_store_exits_with_error(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    def unreachable():
        raise StoreError("Failed to create content indexes: connection refused")

    monkeypatch.setattr(cli, "build_scraping_container", unreachable)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["status"])

    assert excinfo.value.code == 1
    assert "Database not available" in capsys.readouterr().out


def test_status_prints_metadata(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    rows = [ScrapeMetadata(section="news", last_scraped=_NOW, status="success", items_scraped=12)]
    monkeypatch.setattr(cli, "build_scraping_container", lambda: _FakeContainer(rows=rows))

    cli.main(["status"])

    output = capsys.readouterr().out
    assert "news" in output
    assert "success" in output


def test_search_prints_toolkit_text(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    calls = []

    def search_news(query: str, limit: int = 10) -> str:
        calls.append((query, limit))
        return "Found 1 news articles"

    tools = SimpleNamespace(toolkit=SimpleNamespace(search_news=search_news), close=lambda: None)
    monkeypatch.setattr(cli, "build_tools_container", lambda: tools)

    cli.main(["search", "news", "afval", "--limit", "3"])

    assert calls == [("afval", 3)]
    assert "Found 1 news articles" in capsys.readouterr().out


def test_unknown_section_is_rejected_by_argparse() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args(["scrape", "--section", "blog"])
