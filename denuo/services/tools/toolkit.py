"""Text rendering of the read operations offered to agent tools.

Every public method returns a string: results are rendered as Markdown-ish
blocks joined by a separator, and failures (no store, invalid parameters,
store errors) are rendered as messages instead of being raised.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence

from denuo.domain.entities import (
    AboutSection,
    Committee,
    Download,
    Dossier,
    Event,
    NewsItem,
    PositionPaper,
    PressArticle,
    ScrapeMetadata,
    Stored,
)
from denuo.domain.repositories import ContentReadRepository

DATABASE_UNAVAILABLE = "Database not available"
RECORD_SEPARATOR = "\n---\n\n"
MIN_LIMIT = 1
MAX_LIMIT = 100
LANGUAGES = ("nl", "fr")


def clamp_limit(limit: int | None, default: int) -> int:
    if limit is None:
        return default
    return max(MIN_LIMIT, min(MAX_LIMIT, int(limit)))


def require_query(query: str | None) -> str:
    cleaned = (query or "").strip()
    if not cleaned:
        raise ValueError("query must not be empty")
    return cleaned


def check_language(language: str | None) -> Optional[str]:
    if language is None or language == "":
        return None
    if language not in LANGUAGES:
        raise ValueError(f"language must be one of {', '.join(LANGUAGES)}")
    return language


def _join(values: Iterable[str]) -> str:
    return ", ".join(values) or "None"


def _timestamp(value: datetime | None) -> str:
    return value.isoformat() if value else "Unknown"


def format_news(item: Stored[NewsItem]) -> str:
    news = item.record
    return (
        f"**{news.title}** ({news.language.upper()})\n"
        f"{news.summary or 'No summary available'}\n"
        f"Category: {news.category or 'Uncategorized'}\n"
        f"Date: {news.publication_date or 'Unknown'}\n"
        f"ID: {item.id}\n"
        f"URL: {news.url}\n"
    )


def format_news_details(item: Stored[NewsItem]) -> str:
    news = item.record
    return (
        f"**{news.title}** ({news.language.upper()})\n\n"
        f"{news.content or news.summary or 'No content available'}\n\n"
        f"---\n"
        f"Category: {news.category or 'Uncategorized'}\n"
        f"Published: {news.publication_date or 'Unknown'}\n"
        f"URL: {news.url}\n"
        f"Last scraped: {_timestamp(item.scraped_at)}"
    )


def format_position_paper(item: Stored[PositionPaper], *, detailed: bool = True) -> str:
    paper = item.record
    lines = [f"**{paper.title}**\n"]
    if detailed:
        lines.append(f"{paper.description or 'No description available'}\n")
    lines.append(f"Year: {paper.publication_year or 'Unknown'}\n")
    lines.append(f"Type: {paper.document_type or 'Document'}\n")
    if detailed:
        lines.append(f"Language: {paper.language.upper()}\n")
    lines.append(f"URL: {paper.url}\n")
    return "".join(lines)


def format_dossier(item: Stored[Dossier], *, detailed: bool = True) -> str:
    dossier = item.record
    lines = [f"**{dossier.title}**\n"]
    if detailed:
        lines.append(f"{dossier.description or 'No description available'}\n")
    lines.append(f"Categories: {_join(dossier.categories)}\n")
    lines.append(f"Language: {dossier.language.upper()}\n")
    lines.append(f"URL: {dossier.url}\n")
    return "".join(lines)


def format_committee(item: Stored[Committee]) -> str:
    committee = item.record
    return (
        f"**{committee.psc_number}: {committee.title}**\n"
        f"{committee.description or 'No description available'}\n"
        f"Sector: {committee.sector or 'Not specified'}\n"
        f"URL: {committee.url}\n"
    )


def format_event(item: Stored[Event]) -> str:
    event = item.record
    text = (
        f"**{event.title}**\n"
        f"{event.description or 'No description available'}\n"
        f"Type: {event.event_type or 'Event'}\n"
        f"Date: {event.event_date or 'TBD'}\n"
        f"Time: {event.event_time or 'TBD'}\n"
        f"Location: {event.location_name or 'TBD'}\n"
    )
    if event.location_address:
        text += f"Address: {event.location_address}\n"
    if event.url:
        text += f"URL: {event.url}\n"
    return text


def format_download(item: Stored[Download], *, detailed: bool = True) -> str:
    download = item.record
    lines = [f"**{download.title}**\n"]
    if detailed:
        lines.append(f"{download.description or 'No description available'}\n")
    lines.append(f"File Type: {download.file_type or 'Unknown'}\n")
    lines.append(f"Categories: {_join(download.categories)}\n")
    if detailed:
        languages = ", ".join(download.languages_available or ()) or "Not specified"
        lines.append(f"Languages: {languages}\n")
    lines.append(f"Download: {download.download_url}\n")
    return "".join(lines)


def format_about_section(item: Stored[AboutSection]) -> str:
    section = item.record
    text = (
        f"**{section.section_title}**\n"
        f"{section.content}\n"
        f"Section Type: {section.section_type or 'General'}\n"
    )
    if section.url:
        text += f"URL: {section.url}\n"
    return text


def format_press_article(item: Stored[PressArticle], *, detailed: bool = True) -> str:
    article = item.record
    lines = [
        f"**{article.title}** ({article.language.upper()})\n",
        f"{article.summary or 'No summary available'}\n",
        f"Source: {article.source or 'Unknown'}\n",
    ]
    if detailed:
        lines.append(f"Categories: {_join(article.categories)}\n")
    lines.append(f"Date: {article.publication_date or 'Unknown'}\n")
    lines.append(f"URL: {article.url}\n")
    return "".join(lines)


def format_scrape_metadata(row: ScrapeMetadata) -> str:
    text = (
        f"**{row.section}**: {row.status}\n"
        f"Items: {row.items_scraped}\n"
        f"Last scraped: {_timestamp(row.last_scraped)}\n"
    )
    if row.error_message:
        text += f"Error: {row.error_message}\n"
    return text


def render(heading: str, blocks: Sequence[str]) -> str:
    return f"{heading}:\n\n{RECORD_SEPARATOR.join(blocks)}"


class ContentToolkit:
    """One method per agent tool, each returning the text shown to the agent."""

    def __init__(self, repository: ContentReadRepository | None) -> None:
        self._repository = repository
        self._log = logging.getLogger("denuo.tools")

    @property
    def available(self) -> bool:
        return self._repository is not None

    def _guarded(
        self, failure: str, action: Callable[[ContentReadRepository], str]
    ) -> str:
        if self._repository is None:
            return DATABASE_UNAVAILABLE
        try:
            return action(self._repository)
        except Exception as exc:
            self._log.warning("%s: %s", failure, exc)
            return f"{failure}: {exc}"

    def search_news(
        self,
        query: str,
        language: str | None = None,
        category: str | None = None,
        limit: int = 10,
    ) -> str:
        def action(repository: ContentReadRepository) -> str:
            cleaned = require_query(query)
            results = repository.search_news(
                cleaned, check_language(language), category or None, clamp_limit(limit, 10)
            )
            if not results:
                return f'No news found for query: "{cleaned}"'
            return render(
                f"Found {len(results)} news articles", [format_news(item) for item in results]
            )

        return self._guarded("Error searching news", action)

    def get_recent_news(self, language: str | None = None, limit: int = 10) -> str:
        def action(repository: ContentReadRepository) -> str:
            results = repository.get_recent_news(
                check_language(language), clamp_limit(limit, 10)
            )
            if not results:
                return "No recent news found"
            return render("Recent news", [format_news(item) for item in results])

        return self._guarded("Error getting recent news", action)

    def get_news_details(self, news_id: int) -> str:
        def action(repository: ContentReadRepository) -> str:
            item = repository.get_news_by_id(int(news_id))
            if item is None:
                return f"Article with ID {news_id} not found"
            return format_news_details(item)

        return self._guarded("Error getting article details", action)

    def search_position_papers(
        self, query: str, year: str | None = None, limit: int = 10
    ) -> str:
        def action(repository: ContentReadRepository) -> str:
            cleaned = require_query(query)
            results = repository.search_position_papers(
                cleaned, year or None, clamp_limit(limit, 10)
            )
            if not results:
                return f'No standpunten found for query: "{cleaned}"'
            return render(
                f"Found {len(results)} standpunten",
                [format_position_paper(item) for item in results],
            )

        return self._guarded("Error searching standpunten", action)

    def get_all_position_papers(self, limit: int = 20) -> str:
        def action(repository: ContentReadRepository) -> str:
            results = repository.get_all_position_papers(clamp_limit(limit, 20))
            if not results:
                return "No standpunten found"
            return render(
                "All standpunten",
                [format_position_paper(item, detailed=False) for item in results],
            )

        return self._guarded("Error getting standpunten", action)

    def search_dossiers(
        self,
        query: str,
        category: str | None = None,
        language: str | None = None,
        limit: int = 10,
    ) -> str:
        def action(repository: ContentReadRepository) -> str:
            cleaned = require_query(query)
            results = repository.search_dossiers(
                cleaned, category or None, check_language(language), clamp_limit(limit, 10)
            )
            if not results:
                return f'No dossiers found for query: "{cleaned}"'
            return render(
                f"Found {len(results)} dossiers", [format_dossier(item) for item in results]
            )

        return self._guarded("Error searching dossiers", action)

    def get_all_dossiers(self, limit: int = 20) -> str:
        def action(repository: ContentReadRepository) -> str:
            results = repository.get_all_dossiers(clamp_limit(limit, 20))
            if not results:
                return "No dossiers found"
            return render(
                "All dossiers", [format_dossier(item, detailed=False) for item in results]
            )

        return self._guarded("Error getting dossiers", action)

    def get_committees(self, limit: int = 20, sector: str | None = None) -> str:
        def action(repository: ContentReadRepository) -> str:
            results = repository.get_all_committees(clamp_limit(limit, 20), sector or None)
            if not results:
                return "No committees found"
            return render(
                "Paritaire Comités", [format_committee(item) for item in results]
            )

        return self._guarded("Error getting committees", action)

    def get_events(
        self, upcoming_only: bool = True, limit: int = 5, today: date | None = None
    ) -> str:
        def action(repository: ContentReadRepository) -> str:
            bounded = clamp_limit(limit, 5)
            if upcoming_only:
                results = repository.get_upcoming_events(bounded, today)
            else:
                results = repository.get_all_events(bounded)
            if not results:
                return "No upcoming events found" if upcoming_only else "No events found"
            heading = "Upcoming events" if upcoming_only else "All events"
            return render(heading, [format_event(item) for item in results])

        return self._guarded("Error getting events", action)

    def search_downloads(
        self, query: str, file_type: str | None = None, limit: int = 10
    ) -> str:
        def action(repository: ContentReadRepository) -> str:
            cleaned = require_query(query)
            results = repository.search_downloads(
                cleaned, file_type or None, clamp_limit(limit, 10)
            )
            if not results:
                return f'No downloads found for query: "{cleaned}"'
            return render(
                f"Found {len(results)} downloads",
                [format_download(item) for item in results],
            )

        return self._guarded("Error searching downloads", action)

    def get_all_downloads(self, limit: int = 20) -> str:
        def action(repository: ContentReadRepository) -> str:
            results = repository.get_all_downloads(clamp_limit(limit, 20))
            if not results:
                return "No downloads found"
            return render(
                "All downloads", [format_download(item, detailed=False) for item in results]
            )

        return self._guarded("Error getting downloads", action)

    def get_about_info(self, section_type: str | None = None) -> str:
        def action(repository: ContentReadRepository) -> str:
            results = repository.get_about_sections(section_type or None)
            if not results:
                if section_type:
                    return f'No about info found for section: "{section_type}"'
                return "No about info found"
            return render("About Denuo", [format_about_section(item) for item in results])

        return self._guarded("Error getting about info", action)

    def search_press_articles(
        self,
        query: str,
        source: str | None = None,
        language: str | None = None,
        limit: int = 10,
    ) -> str:
        def action(repository: ContentReadRepository) -> str:
            cleaned = require_query(query)
            results = repository.search_press_articles(
                cleaned, source or None, check_language(language), clamp_limit(limit, 10)
            )
            if not results:
                return f'No press articles found for query: "{cleaned}"'
            return render(
                f"Found {len(results)} press articles",
                [format_press_article(item) for item in results],
            )

        return self._guarded("Error searching press articles", action)

    def get_recent_press_articles(self, limit: int = 10) -> str:
        def action(repository: ContentReadRepository) -> str:
            results = repository.get_recent_press_articles(clamp_limit(limit, 10))
            if not results:
                return "No recent press articles found"
            return render(
                "Recent press articles",
                [format_press_article(item, detailed=False) for item in results],
            )

        return self._guarded("Error getting recent press articles", action)

    def get_scrape_status(self) -> str:
        def action(repository: ContentReadRepository) -> str:
            rows = repository.get_scrape_metadata()
            if not rows:
                return "No scrape runs recorded"
            return render("Scrape status", [format_scrape_metadata(row) for row in rows])

        return self._guarded("Error getting scrape status", action)


__all__ = [
    "DATABASE_UNAVAILABLE",
    "RECORD_SEPARATOR",
    "ContentToolkit",
    "clamp_limit",
]
