"""Testes do mapa de páginas e do despacho para os parsers."""
from __future__ import annotations

import pytest

from denuo.extraction.pages import SECTIONS, SITE_PAGES, SitePage, pages_for
from denuo.extraction.parsers import parse_page


def test_every_section_has_at_least_one_page() -> None:
    assert {page.section for page in SITE_PAGES} == set(SECTIONS)
    assert [page.language for page in pages_for("news")] == ["nl", "fr"]


def test_pages_for_rejects_unknown_sections() -> None:
    with pytest.raises(ValueError):
        pages_for("blog")


def test_site_page_url_uses_origin() -> None:
    page = SitePage("standpunten", "/nl/standpunten")

    assert page.url_for() == "https://denuo.be/nl/standpunten"
    assert page.url_for("https://staging.denuo.be/") == "https://staging.denuo.be/nl/standpunten"


def test_parse_page_dispatches_by_section() -> None:
    french_news = SitePage("news", "/fr/actualites-denuo", "fr")
    html = (
        '<article about="/fr/actualites/accord">'
        '<span class="field--name-title">Accord sectoriel conclu</span></article>'
    )

    news = parse_page(french_news, html)

    assert [(item.title, item.language) for item in news] == [
        ("Accord sectoriel conclu", "fr")
    ]


def test_parse_page_passes_page_url_to_committees() -> None:
    page = SitePage("committees", "/nl/paritaire-comites")

    committees = parse_page(page, "<p>PSC 142.03: Papier en karton</p>", "https://denuo.be")

    assert committees[0].url == "https://denuo.be/nl/paritaire-comites"
