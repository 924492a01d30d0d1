"""Casos de uso da aplicação."""

from .scrape_service import ScrapeRunResult, ScrapeService, SectionOutcome

__all__ = ["ScrapeRunResult", "ScrapeService", "SectionOutcome"]
