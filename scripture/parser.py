"""
THEOLOGOS - Traditional-Notation Reference Parser

Parses human scripture citations into structured references:

    "Romans 8:28"                -> Romans 8 [28]
    "Romans 8:28-30"             -> Romans 8 [28, 29, 30]
    "Romans 8:28, 30"            -> Romans 8 [28, 30]
    "Romans 8:28; 1 Cor 13:4-7"  -> Romans 8 [28], 1 Corinthians 13 [4, 5, 6, 7]

Malformed input is dropped, never raised: an expression with an unknown
book, a non-numeric or zero chapter, or no usable verse contributes
nothing; a bad item inside a verse list is skipped on its own.

This is the only place book tokens are normalized. Machine codes and
prose mentions are turned into traditional-notation strings first and
then funnelled through parse_source().
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from core.types import ParsedReferenceDict
from observability.logging import get_logger
from scripture.canon import BibleIndex, get_bible_index

logger = get_logger("theologos.scripture.parser")

_EXPRESSION_RE = re.compile(r"(.+?)\s+(\d+):(.+)")
# longer digit runs read as non-numeric
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d{1,9})(?!\d)")
# ranges spanning more verses are dropped; no chapter exceeds 176
MAX_RANGE_LENGTH = 1000


@dataclass(frozen=True)
class ParsedReference:
    """A citation of one chapter: canonical book, chapter, expanded verses."""

    book_name: str
    chapter: int
    verses: Tuple[int, ...]

    @property
    def descriptor(self) -> str:
        """Compact "Book Chapter:Verse[,Verse...]" form."""
        return f"{self.book_name} {self.chapter}:{','.join(str(v) for v in self.verses)}"

    def to_dict(self) -> ParsedReferenceDict:
        return {
            "book_name": self.book_name,
            "chapter": self.chapter,
            "verses": list(self.verses),
        }


@runtime_checkable
class TraditionalReferenceSource(Protocol):
    """Anything that yields citations already written in traditional notation."""

    def traditional_references(self) -> List[str]:
        ...


def leading_int(text: str) -> Optional[int]:
    """
    Read an integer field leniently: optional sign and leading digits,
    trailing characters ignored ("28." -> 28). None if no digits lead
    or the leading digit run is longer than nine digits.
    """
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else None


def _parse_verse_item(item: str) -> List[int]:
    if "-" in item:
        pieces = [piece.strip() for piece in item.split("-")]
        start = leading_int(pieces[0])
        end = leading_int(pieces[1])
        if start is None or end is None or start < 1 or end < start:
            logger.debug("Dropped verse range", item=item)
            return []
        if end - start >= MAX_RANGE_LENGTH:
            logger.debug("Dropped oversized verse range", item=item, length=end - start + 1)
            return []
        return list(range(start, end + 1))

    verse = leading_int(item)
    if verse is None or verse < 1:
        logger.debug("Dropped verse", item=item)
        return []
    return [verse]


def parse_reference(expression: str, index: Optional[BibleIndex] = None) -> Optional[ParsedReference]:
    """
    Parse one "Book Chapter:VerseList" expression.

    Returns:
        The parsed reference, or None when the expression is dropped
    """
    index = index or get_bible_index()
    match = _EXPRESSION_RE.fullmatch(expression.strip())
    if not match:
        if expression.strip():
            logger.debug("Dropped unparseable expression", expression=expression)
        return None

    raw_book, chapter_str, verses_str = match.groups()

    book_name = index.normalize_book_name(raw_book)
    if book_name is None:
        logger.debug("Dropped expression with unknown book", book=raw_book)
        return None

    chapter = leading_int(chapter_str)
    if chapter is None or chapter < 1:
        logger.debug("Dropped expression with invalid chapter", expression=expression)
        return None

    verses: List[int] = []
    for item in verses_str.split(","):
        verses.extend(_parse_verse_item(item.strip()))

    if not verses:
        logger.debug("Dropped expression without verses", expression=expression)
        return None

    return ParsedReference(book_name=book_name, chapter=chapter, verses=tuple(verses))


def parse_references(text: str, index: Optional[BibleIndex] = None) -> List[ParsedReference]:
    """Parse a ';'-separated sequence of citations, keeping input order."""
    results: List[ParsedReference] = []
    for part in text.split(";"):
        parsed = parse_reference(part, index)
        if parsed is not None:
            results.append(parsed)
    return results


def parse_all(references: Iterable[str], index: Optional[BibleIndex] = None) -> List[ParsedReference]:
    """Parse many traditional-notation strings and concatenate the results."""
    results: List[ParsedReference] = []
    for reference in references:
        results.extend(parse_references(reference, index))
    return results


def parse_source(source: TraditionalReferenceSource, index: Optional[BibleIndex] = None) -> List[ParsedReference]:
    """Parse everything a reference source produces."""
    return parse_all(source.traditional_references(), index)


def format_reference(book_name: str, chapter: int, verse: int) -> str:
    """Render a single verse as "Book Chapter:Verse"."""
    return f"{book_name} {chapter}:{verse}"
