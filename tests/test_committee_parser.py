"""Testes do parser de comissões paritárias."""
from __future__ import annotations

from denuo.extraction.parsers import parse_committees
from denuo.extraction.parsers.committees import detect_sector

_PAGE_URL = "https://denuo.be/nl/paritaire-comites"

_PAGE = """
<div class="committees">
  <p><a href="/nl/psc-142-01">PSC 142.01 - Metalen recuperatie</a></p>
  <div class="item">
    <strong>PSC 142.02</strong>
    <span>Recuperatie van lompen</span>
    <a href="/nl/psc-142-02">Meer info</a>
  </div>
  <p>PSC 142.03: Papier en karton</p>
  <p>PSC 142.01 dubbel item</p>
  <!-- PSC 500.1 verborgen commentaar -->
  <script>var label = "PSC 600.1 script";</script>
  <p>PSC 999.9</p>
  <p>PSC 998.1 Ander comité</p>
</div>
"""


def test_parse_committees_reads_numbers_titles_and_links() -> None:
    committees = parse_committees(_PAGE, _PAGE_URL)

    assert [
        (committee.psc_number, committee.title, committee.url, committee.sector)
        for committee in committees
    ] == [
        ("PSC 142.01", "Metalen recuperatie", "https://denuo.be/nl/psc-142-01", "metalen"),
        ("PSC 142.02", "Recuperatie van lompen", "https://denuo.be/nl/psc-142-02", "lompen"),
        ("PSC 142.03", "Papier en karton", _PAGE_URL, "papier"),
        ("PSC 998.1", "Ander comité", _PAGE_URL, None),
    ]


def test_parse_committees_returns_empty_list_without_psc_runs() -> None:
    assert parse_committees("<p>Geen comités</p>", _PAGE_URL) == []


def test_detect_sector() -> None:
    assert detect_sector("Metalen recuperatie") == "metalen"
    assert detect_sector("Textiel en lompen") == "lompen"
    assert detect_sector("Afvalbeheer") is None
