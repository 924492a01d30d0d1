"""Testes do parser da agenda de eventos."""
from __future__ import annotations

from denuo.extraction.parsers import parse_events
from denuo.extraction.parsers.events import detect_event_type, split_location

_AGENDA = """
<div class="agenda">
  <div class="event">
    <h3>Workshop circulaire bouwmaterialen</h3>
    <p>Praktische sessie over hergebruik van bouwmaterialen voor leden.</p>
    <span>12 maart 2025</span> <span>09:30 - 12:00</span>
    <div class="loc">Locatie: Denuo huis, Brusselsesteenweg 1, 1000 Brussel</div>
    <a href="/nl/agenda/workshop-bouw">Inschrijven</a>
  </div>
  <div class="event">
    <strong>Netwerkevent voorjaar</strong>
    <span>Datum: 05/06/2025</span>
  </div>
  <div class="event"><h4>Kort</h4><p>Training</p></div>
  <div class="event"><h4>Algemene info zonder type</h4></div>
</div>
"""


def test_parse_events_uses_innermost_blocks() -> None:
    events = parse_events(_AGENDA)

    assert [event.title for event in events] == [
        "Workshop circulaire bouwmaterialen",
        "Netwerkevent voorjaar",
    ]


def test_parse_events_extracts_fields() -> None:
    workshop, network = parse_events(_AGENDA)

    assert workshop.event_type == "Workshop"
    assert workshop.event_date == "12 maart 2025"
    assert workshop.event_time == "09:30 - 12:00"
    assert workshop.location_name == "Denuo huis"
    assert workshop.location_address == "Brusselsesteenweg 1, 1000 Brussel"
    assert workshop.description == "Praktische sessie over hergebruik van bouwmaterialen voor leden."
    assert workshop.url == "https://denuo.be/nl/agenda/workshop-bouw"
    assert workshop.language == "nl"

    assert network.event_type == "Netwerkevent"
    assert network.event_date == "05/06/2025"
    assert network.event_time is None
    assert network.location_name is None
    assert network.description is None
    assert network.url is None


def test_detect_event_type_is_case_insensitive() -> None:
    assert detect_event_type("Algemene VERGADERING van leden") == "Vergadering"
    assert detect_event_type("Receptie") is None


def test_split_location() -> None:
    assert split_location("  Zaal A ") == ("Zaal A", None)
    assert split_location("Zaal A, Straat 1") == ("Zaal A", "Straat 1")
    assert split_location(None) == (None, None)
