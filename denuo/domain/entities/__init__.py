"""Entidades de domínio produzidas pela coleta do portal Denuo."""
from .about_section import AboutSection, SectionType
from .committee import Committee
from .common import Language, SiteLanguage
from .download import Download
from .dossier import Dossier
from .event import Event
from .news_item import NewsItem
from .position_paper import PositionPaper
from .press_article import PressArticle
from .scrape_metadata import ScrapeMetadata, ScrapeStatus
from .stored import Stored

__all__ = [
    "AboutSection",
    "Committee",
    "Download",
    "Dossier",
    "Event",
    "Language",
    "NewsItem",
    "PositionPaper",
    "PressArticle",
    "ScrapeMetadata",
    "ScrapeStatus",
    "SectionType",
    "SiteLanguage",
    "Stored",
]
