"""Testes dos parsers baseados em links: dossiês, downloads e imprensa."""
from __future__ import annotations

from denuo.extraction.parsers import (
    parse_dossiers,
    parse_downloads,
    parse_press_articles,
)
from denuo.extraction.parsers.downloads import detect_file_type
from denuo.extraction.parsers.press_articles import detect_press_source

_DOSSIERS = """
<nav><a href="/nl">Home</a><a href="/nl/zoeken">Zoeken</a></nav>
<a href="/nl/dossiers/energie"><span class="title">Energietransitie</span>
  <span class="tags">[Energie] [ Klimaat ] [ ]</span></a>
<a href="mailto:info@denuo.be">Mail ons via info</a>
<a href="javascript:void(0)">Open het overzicht</a>
<a href="https://denuo.be/nl/dossiers/energie">Energietransitie dubbel</a>
<a href="/nl/dossiers/circulair"><span>  </span><span>Circulaire economie</span></a>
<a href="">Lege link zonder doel</a>
"""

_DOWNLOADS = """
<a href="/sites/default/files/jaarverslag-2023.pdf">Jaarverslag 2023 [Publicaties]</a>
<a href="/files/tarieven.XLSX?versie=2">Tarievenoverzicht</a>
<a href="/files/presentatie.pptx">Presentatie congres</a>
<a href="/nl/downloads/overzicht">Alle documenten</a>
<a href="/sites/default/files/jaarverslag-2023.pdf">Jaarverslag kopie</a>
<a href="/nl/contact">Contacteer ons</a>
"""

_PRESS = """
<a href="https://www.standaard.be/artikel-1">De Standaard: Denuo vraagt sneller vergunningsbeleid</a>
<a href="https://www.vrt.be/nws/2">Reportage VRT NWS over recyclage [Televisie]</a>
<a href="/nl/pers/3">Interview met de gedelegeerd bestuurder</a>
<a href="/nl/pers/kort">Kort stuk</a>
<a href="https://www.standaard.be/artikel-1">Dubbele vermelding van hetzelfde artikel</a>
"""


def test_parse_dossiers_filters_navigation_and_reads_categories() -> None:
    dossiers = parse_dossiers(_DOSSIERS)

    assert [dossier.url for dossier in dossiers] == [
        "https://denuo.be/nl/dossiers/energie",
        "https://denuo.be/nl/dossiers/circulair",
    ]
    energy, circular = dossiers
    assert energy.title == "Energietransitie"
    assert energy.categories == ("Energie", "Klimaat")
    assert energy.language == "nl"
    assert circular.title == "Circulaire economie"
    assert circular.categories == ()


def test_parse_downloads_detects_file_types() -> None:
    page_url = "https://denuo.be/nl/downloads"

    downloads = parse_downloads(_DOWNLOADS, page_url)

    assert [(item.title, item.file_type) for item in downloads] == [
        ("Jaarverslag 2023 [Publicaties]", "PDF"),
        ("Tarievenoverzicht", "Excel"),
        ("Presentatie congres", "PowerPoint"),
        ("Alle documenten", None),
    ]
    first = downloads[0]
    assert first.download_url == "https://denuo.be/sites/default/files/jaarverslag-2023.pdf"
    assert first.url == first.download_url
    assert first.page_url == page_url
    assert first.categories == ("Publicaties",)


def test_detect_file_type_uses_path_extension() -> None:
    assert detect_file_type("https://denuo.be/a/b.docx") == "Word"
    assert detect_file_type("https://denuo.be/a/b.DOC#pagina=2") == "Word"
    assert detect_file_type("https://denuo.be/a.pdf/overzicht") is None
    assert detect_file_type("https://denuo.be/a/b.zip") is None


def test_parse_press_articles_detects_outlets() -> None:
    articles = parse_press_articles(_PRESS)

    assert [(article.url, article.source) for article in articles] == [
        ("https://www.standaard.be/artikel-1", "De Standaard"),
        ("https://www.vrt.be/nws/2", "VRT"),
        ("https://denuo.be/nl/pers/3", None),
    ]
    assert articles[1].categories == ("Televisie",)
    assert {article.language for article in articles} == {"nl"}


def test_detect_press_source_is_case_sensitive() -> None:
    assert detect_press_source("Gesprek op RTBF over afval") == "RTBF"
    assert detect_press_source("gesprek op vrt") is None


def test_link_parsers_return_empty_lists_without_candidates() -> None:
    assert parse_dossiers("<p>Geen links</p>") == []
    assert parse_downloads("<p>Geen links</p>", "https://denuo.be/nl/downloads") == []
    assert parse_press_articles("") == []
