"""
THEOLOGOS - Prose Reference Detector

Finds inline citations in free-form text, e.g. while importing a book:

    "As we see in Romans 8:28 and 1 John 3:16-17, ..."
        -> ["Romans 8:28", "1 John 3:16-17"]

Handles an optional lead-in ("see", "cf.", "compare", "cp."), numeric or
Roman ordinal prefixes ("1", "1st", "II"), multi-word names ("Song of
Solomon"), verse ranges and comma lists, and a closing parenthesis.

A candidate is kept only if its book part resolves through the shared
alias table, which filters out incidental "Word 3:15" patterns such as
clock times or ratios. References split across a sentence ("in Romans
... verse 28 of chapter 8") are not detected.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional

from observability.logging import get_logger
from scripture.canon import BibleIndex, get_bible_index

logger = get_logger("theologos.scripture.detector")

_PROSE_REFERENCE_RE = re.compile(
    r"\b(?:(?i:see|cf\.|compare|cp\.)\s+)?"
    r"\(?"
    r"(?P<ordinal>[1-3](?:st|nd|rd)?\s+|I{1,3}\s+)?"
    r"(?P<book>[A-Z][a-z]+(?:\s+of\s+[A-Z][a-z]+)?\.?)"
    r"\s+(?P<chapter>\d+)"
    r":(?P<verses>\d+(?:-\d+)?(?:\s*,\s*\d+(?:-\d+)?)*)"
    r"\)?"
)

# Ordinal prefixes are rewritten as digits so the reconstructed
# reference always re-parses.
_ORDINALS: Dict[str, str] = {
    "1st": "1", "2nd": "2", "3rd": "3",
    "I": "1", "II": "2", "III": "3",
}


def _ordinal_digit(ordinal: Optional[str]) -> str:
    if not ordinal:
        return ""
    token = ordinal.strip()
    return _ORDINALS.get(token, token[0])


def detect_references(text: str, index: Optional[BibleIndex] = None) -> List[str]:
    """
    Scan text for citations whose book name resolves.

    Returns:
        Reconstructed "Book Chapter:Verses" strings, in document order
    """
    index = index or get_bible_index()
    references: List[str] = []

    for match in _PROSE_REFERENCE_RE.finditer(text):
        book_part = f"{_ordinal_digit(match.group('ordinal'))} {match.group('book').strip()}".strip()

        if index.normalize_book_name(book_part) is None:
            logger.debug("Rejected citation-shaped text", candidate=match.group(0))
            continue

        references.append(f"{book_part} {match.group('chapter')}:{match.group('verses')}")

    return references


class ProseReferences:
    """Free-form text viewed as a source of traditional-notation citations."""

    def __init__(self, text: str, index: Optional[BibleIndex] = None):
        self.text = text
        self.index = index

    def traditional_references(self) -> List[str]:
        return detect_references(self.text, self.index)
