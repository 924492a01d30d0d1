"""Best-effort conversion of free-form agenda dates into calendar days."""
from __future__ import annotations

import re
from datetime import date
from typing import Optional

from .vocabulary import MONTHS

_WORD_DATE_RE = re.compile(r"(\d{1,2})\s+([^\W\d_]+)\.?\s+(\d{4})", re.UNICODE)
_NUMERIC_DATE_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")


def parse_event_day(value: str | None) -> Optional[date]:
    """Interpret ``12 maart 2025`` or ``12/03/2025`` (day first) as a ``date``.

    Returns ``None`` when the text holds no recognizable date; the original
    string is never replaced by this value.
    """

    if not value:
        return None

    numeric = _NUMERIC_DATE_RE.search(value)
    if numeric:
        day, month, year = map(int, numeric.groups())
        return _safe_date(year, month, day)

    worded = _WORD_DATE_RE.search(value)
    if worded:
        month = MONTHS.get(worded.group(2).lower())
        if month is None:
            return None
        return _safe_date(int(worded.group(3)), month, int(worded.group(1)))
    return None


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


__all__ = ["parse_event_day"]
