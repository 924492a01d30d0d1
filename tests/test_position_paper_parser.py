"""Testes do parser de standpunten (documentos PDF)."""
from __future__ import annotations

import pytest

from denuo.extraction.parsers import parse_position_papers
from denuo.extraction.parsers.position_papers import describe, detect_document_type

_PAGE = """
<div class="view-content">
  <a href="/sites/default/files/memorandum-werkbaar-werk.pdf">
    <div class="field field--name-field-title">Memorandum werkbaar werk (2021)</div>
  </a>
  <a href="/files/standpuntnota-afval.PDF">
    <div class="field--name-field-title">Standpuntnota afvalbeleid</div>
  </a>
  <a href="/files/kort.pdf"><div class="field--name-field-title">Kort (2020)</div></a>
  <a href="/files/zonder-titelveld.pdf">Zonder titelveld</a>
  <a href="/nl/standpunten/pagina"><div class="field--name-field-title">Geen pdf link hier</div></a>
  <a href="/sites/default/files/memorandum-werkbaar-werk.pdf">
    <div class="field--name-field-title">Memorandum werkbaar werk (2021)</div>
  </a>
</div>
"""


def test_parse_position_papers_reads_title_year_and_type() -> None:
    papers = parse_position_papers(_PAGE)

    assert len(papers) == 2
    memorandum, nota = papers
    assert memorandum.title == "Memorandum werkbaar werk"
    assert memorandum.publication_year == "2021"
    assert memorandum.document_type == "Memorandum"
    assert memorandum.description == "Memorandum uit 2021"
    assert memorandum.url == "https://denuo.be/sites/default/files/memorandum-werkbaar-werk.pdf"
    assert memorandum.language == "nl"

    assert nota.title == "Standpuntnota afvalbeleid"
    assert nota.publication_year is None
    assert nota.document_type == "Standpuntnota"
    assert nota.description == "Standpuntnota"


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Standpuntnota over memorandum", "Standpuntnota"),
        ("Memorandum verkiezingen", "Memorandum"),
        ("Best practice voor sorteren", "Best Practice Guide"),
        ("Voorstellen voor de regering", "Voorstellen"),
        ("Concrete acties 2030", "Actieplan"),
        ("Jaarverslag", "Document"),
    ],
)
def test_detect_document_type_uses_priority_order(title: str, expected: str) -> None:
    assert detect_document_type(title) == expected


def test_describe_omits_missing_year() -> None:
    assert describe("Document", None) == "Document"
    assert describe("Actieplan", "2019") == "Actieplan uit 2019"
