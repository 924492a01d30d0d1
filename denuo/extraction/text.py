"""Text helpers shared by every content parser.

The helpers work on raw markup fragments: they never build a tree and are
pure functions of their input.
"""
from __future__ import annotations

import re
from typing import Callable, Hashable, Iterable, List, Optional, Pattern, TypeVar, Union
from urllib.parse import urlsplit

from .vocabulary import MIN_NAVIGATION_TEXT_LENGTH, NAVIGATION_WORDS

T = TypeVar("T")

# Only real tags, comments and declarations; a bare "<" in text survives.
_TAG_RE = re.compile(r"<[A-Za-z/!?][^>]*>")
_COLLAPSE_WHITESPACE_RE = re.compile(r"\s+", re.UNICODE)
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
_INNER_TEXT_RE = re.compile(r">([^<]+)<")
_TEXT_RUN_RE = re.compile(r">\s*([^<\s][^<]*)<")

# Only the entities the site actually emits; ``&amp;`` goes first.
_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&nbsp;", " "),
)

PatternLike = Union[str, Pattern[str]]


def _normalize_once(text: str, tag_replacement: str) -> str:
    text = _TAG_RE.sub(tag_replacement, text)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    text = _TAG_RE.sub(tag_replacement, text)
    return _COLLAPSE_WHITESPACE_RE.sub(" ", text).strip()


def normalize_text(fragment: str | None, *, tag_replacement: str = "") -> str:
    """Strip markup, decode entities and collapse whitespace.

    The pass is repeated until the text no longer changes, so the result is
    always a fixed point: ``normalize_text(normalize_text(x)) == normalize_text(x)``.
    ``tag_replacement`` lets callers keep words from adjacent elements apart.
    """

    if not fragment:
        return ""
    current = fragment
    while True:
        cleaned = _normalize_once(current, tag_replacement)
        if cleaned == current:
            return cleaned
        current = cleaned


def resolve_url(ref: str, origin: str) -> str:
    """Make ``ref`` absolute against the site ``origin``.

    References with a scheme are returned unchanged; protocol-relative ones
    borrow the origin's scheme. No percent-encoding or query normalization.
    """

    base = origin.rstrip("/")
    if _SCHEME_RE.match(ref):
        return ref
    if ref.startswith("//"):
        scheme = urlsplit(base).scheme or "https"
        return f"{scheme}:{ref}"
    if ref.startswith("/"):
        return base + ref
    return f"{base}/{ref}"


def _compile(pattern: PatternLike) -> Pattern[str]:
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


def first_match(fragment: str, pattern: PatternLike) -> Optional[str]:
    """Return the first capture group of the first match (whole match if none)."""

    match = _compile(pattern).search(fragment)
    if not match:
        return None
    return match.group(1) if match.re.groups else match.group(0)


def all_matches(fragment: str, pattern: PatternLike) -> List[str]:
    """Return the inner text of every match, in order.

    The inner text of a match is its first ``>text<`` run; matches without one
    are skipped.
    """

    texts: List[str] = []
    for match in _compile(pattern).finditer(fragment):
        inner = _INNER_TEXT_RE.search(match.group(0))
        if inner:
            texts.append(inner.group(1))
    return texts


def first_text_run(fragment: str) -> Optional[str]:
    """Return the first non-blank text run found between two tags."""

    return first_match(fragment, _TEXT_RUN_RE)


def is_navigation_link(text: str) -> bool:
    """Tell whether a link text is generic navigation rather than content."""

    if len(text) < MIN_NAVIGATION_TEXT_LENGTH:
        return True
    lowered = text.lower()
    return any(word in lowered for word in NAVIGATION_WORDS)


def dedupe(records: Iterable[T], key: Callable[[T], Hashable]) -> List[T]:
    """Keep the first record for each natural key, preserving input order."""

    seen: set[Hashable] = set()
    unique: List[T] = []
    for record in records:
        natural_key = key(record)
        if natural_key in seen:
            continue
        seen.add(natural_key)
        unique.append(record)
    return unique


__all__ = [
    "all_matches",
    "dedupe",
    "first_match",
    "first_text_run",
    "is_navigation_link",
    "normalize_text",
    "resolve_url",
]
