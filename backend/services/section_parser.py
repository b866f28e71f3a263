"""JD text normalization and heading-delimited section lookup."""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

logger = logging.getLogger(__name__)

StartStrategy = Literal["document_order", "synonym_order"]

_LINE_BREAK_RE = re.compile(r"\r\n?")
_NEXT_LINE_RE = re.compile(r"\s*(\S.*)")


def normalize_text(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF. Nothing else changes."""
    return _LINE_BREAK_RE.sub("\n", text)


def non_empty_lines(text: str) -> list[str]:
    """Trimmed lines of ``text`` with blank lines dropped."""
    return [line.strip() for line in normalize_text(text).split("\n") if line.strip()]


@dataclass(frozen=True)
class SectionSpec:
    """Where a section starts and where it may end.

    start_headers: synonyms for the section heading, or None to start at the
        top of the document.
    end_headers: synonyms for headings that close the section. ``None``
        entries are placeholders and never match. The closest match wins.
    start_strategy: "document_order" picks the earliest start heading in the
        text (ties go to list order); "synonym_order" picks the first synonym
        in list order that occurs anywhere.
    require_end: when True the section only exists if an end heading is
        found; otherwise a missing end heading means "until end of text".
    """
    start_headers: tuple[str, ...] | None
    end_headers: tuple[str | None, ...] = ()
    start_strategy: StartStrategy = "document_order"
    require_end: bool = False


# Header text is literal; matching is case-insensitive and anchored at line start.
@lru_cache(maxsize=256)
def _start_pattern(header: str) -> re.Pattern:
    return re.compile(rf"^{re.escape(header)}\s*", re.IGNORECASE | re.MULTILINE)


@lru_cache(maxsize=256)
def _end_pattern(header: str) -> re.Pattern:
    return re.compile(rf"^{re.escape(header)}", re.IGNORECASE | re.MULTILINE)


@lru_cache(maxsize=256)
def _label_pattern(label: str) -> re.Pattern:
    return re.compile(rf"^{re.escape(label)}[ \t]*[:\-]?[ \t]*(.*)$", re.IGNORECASE | re.MULTILINE)


def _find_start(text: str, headers: tuple[str, ...], strategy: StartStrategy) -> int | None:
    """Offset just past the chosen start heading and its trailing whitespace."""
    best: re.Match | None = None
    for header in headers:
        match = _start_pattern(header).search(text)
        if match is None:
            continue
        if strategy == "synonym_order":
            return match.end()
        if best is None or match.start() < best.start():
            best = match
    return best.end() if best is not None else None


def _find_end(text: str, headers: tuple[str | None, ...], start: int) -> int | None:
    """Offset of the nearest end heading strictly after ``start``."""
    end: int | None = None
    for header in headers:
        if header is None:
            continue
        match = _end_pattern(header).search(text, start + 1)
        if match is not None and (end is None or match.start() < end):
            end = match.start()
    return end


def find_section(text: str, spec: SectionSpec) -> str | None:
    """Return the trimmed text between a start heading and the next end heading.

    Returns None when start headings are given but none occurs, or when the
    span is empty after trimming. Without start headings the span begins at
    offset 0. Without a matching end heading it runs to the end of ``text``.
    """
    if spec.start_headers is not None:
        start = _find_start(text, spec.start_headers, spec.start_strategy)
        if start is None:
            return None
    else:
        start = 0

    end = _find_end(text, spec.end_headers, start)
    if end is None:
        if spec.require_end:
            return None
        end = len(text)
    section = text[start:end].strip()
    return section or None


def find_field_value(text: str, labels: tuple[str, ...]) -> str | None:
    """Value following the first line that starts with one of ``labels``.

    Labels are tried in order. The value is the rest of that line after an
    optional ``:`` or ``-``, trimmed. A label alone on its line (as in a
    two-column table converted cell by cell) takes the next non-blank line.
    """
    for label in labels:
        match = _label_pattern(label).search(text)
        if match is None:
            continue
        value = match.group(1).strip()
        if not value:
            following = _NEXT_LINE_RE.match(text, match.end())
            value = following.group(1).strip() if following else ""
        if value:
            return value
    return None
