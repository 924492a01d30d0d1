"""Testes da interpretação de datas livres da agenda."""
from __future__ import annotations

from datetime import date

import pytest

from denuo.extraction.dates import parse_event_day


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("12 maart 2025", date(2025, 3, 12)),
        ("3 août 2024", date(2024, 8, 3)),
        ("1 okt. 2024", date(2024, 10, 1)),
        ("05/06/2025", date(2025, 6, 5)),
        ("Donderdag 7 November 2024", date(2024, 11, 7)),
    ],
)
def test_parse_event_day_understands_common_formats(value: str, expected: date) -> None:
    assert parse_event_day(value) == expected


@pytest.mark.parametrize("value", [None, "", "binnenkort", "12 foo 2025", "31/02/2025"])
def test_parse_event_day_returns_none_for_unknown_values(value: str | None) -> None:
    assert parse_event_day(value) is None
