"""Fixed keyword tables tuned to the markup and wording of denuo.be.

Every table is immutable and loaded once at import time; order matters
wherever the first hit wins.
"""
from __future__ import annotations

from types import MappingProxyType

# Generic link texts that never name a content record.
NAVIGATION_WORDS: tuple[str, ...] = (
    "home",
    "contact",
    "over ons",
    "menu",
    "search",
    "zoeken",
    "next",
    "previous",
    "volgende",
    "vorige",
)
MIN_NAVIGATION_TEXT_LENGTH = 3

RESTRICTED_MARKERS: tuple[str, ...] = ("is-restricted", "image-lock")
RESTRICTED_SUMMARY = "Restricted content - Login required"

# (keyword in lowercase title, document type label), highest priority first.
DOCUMENT_TYPE_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("standpuntnota", "Standpuntnota"),
    ("memorandum", "Memorandum"),
    ("best practice", "Best Practice Guide"),
    ("voorstellen", "Voorstellen"),
    ("acties", "Actieplan"),
)
DEFAULT_DOCUMENT_TYPE = "Document"

COMMITTEE_SECTORS: tuple[str, ...] = ("metalen", "lompen", "papier", "textiel")

EVENT_BLOCK_KEYWORDS: tuple[str, ...] = ("Workshop", "Netwerkevent", "Training")
EVENT_TYPES: tuple[str, ...] = ("Workshop", "Netwerkevent", "Training", "Vergadering")

FILE_TYPES = MappingProxyType(
    {
        "pdf": "PDF",
        "doc": "Word",
        "docx": "Word",
        "xls": "Excel",
        "xlsx": "Excel",
        "ppt": "PowerPoint",
        "pptx": "PowerPoint",
    }
)

# (keyword in lowercase heading, section type), first hit wins.
ABOUT_SECTION_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("mission", "mission"),
    ("visie", "mission"),
    ("team", "team"),
    ("medewerkers", "team"),
    ("contact", "contact"),
    ("adres", "contact"),
    ("governance", "governance"),
    ("bestuur", "governance"),
)
DEFAULT_SECTION_TYPE = "general"

PRESS_OUTLETS: tuple[str, ...] = (
    "De Morgen",
    "Het Nieuwsblad",
    "De Standaard",
    "VRT",
    "RTBF",
)

# Month names seen in Dutch, French and English agenda pages.
MONTHS = MappingProxyType(
    {
        "januari": 1,
        "janvier": 1,
        "january": 1,
        "jan": 1,
        "februari": 2,
        "février": 2,
        "fevrier": 2,
        "february": 2,
        "feb": 2,
        "maart": 3,
        "mars": 3,
        "march": 3,
        "mrt": 3,
        "april": 4,
        "avril": 4,
        "apr": 4,
        "mei": 5,
        "mai": 5,
        "may": 5,
        "juni": 6,
        "juin": 6,
        "june": 6,
        "jun": 6,
        "juli": 7,
        "juillet": 7,
        "july": 7,
        "jul": 7,
        "augustus": 8,
        "août": 8,
        "aout": 8,
        "august": 8,
        "aug": 8,
        "september": 9,
        "septembre": 9,
        "sep": 9,
        "sept": 9,
        "oktober": 10,
        "octobre": 10,
        "october": 10,
        "okt": 10,
        "oct": 10,
        "november": 11,
        "novembre": 11,
        "nov": 11,
        "december": 12,
        "décembre": 12,
        "decembre": 12,
        "dec": 12,
    }
)
