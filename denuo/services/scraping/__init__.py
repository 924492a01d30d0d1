"""Scraping service dependency container and scheduler."""

from .container import ScrapingContainer, build_scraping_container
from .scheduler import ScrapeScheduler

__all__ = ["ScrapeScheduler", "ScrapingContainer", "build_scraping_container"]
