"""
THEOLOGOS - Machine-Code (OSIS-style) Reference Adapter

Converts dotted proof-text codes, as found in the Creeds.json dataset,
into traditional notation and hands them to the shared parser:

    "Isa.44.6"                  -> "Isa 44:6"
    "Ps.73.25-Ps.73.26"         -> "Ps 73:25-26"
    "Eph.1.4,Eph.1.11"          -> "Eph 1:4", "Eph 1:11"
    "Gen.3.6-Gen.3.8,Gen.3.13"  -> "Gen 3:6-8", "Gen 3:13"
    "Gen.1.31-Gen.2.3"          -> "Gen 1:31", "Gen 2:3"
    "Ps.83"                     -> (dropped: chapter-only)

Proof texts are verse-level, so chapter-only codes are always dropped,
and a range crossing a chapter or book boundary is never synthesized:
its two endpoints are kept as separate single verses.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from observability.logging import get_logger
from scripture.canon import BibleIndex
from scripture.parser import ParsedReference, leading_int, parse_source

logger = get_logger("theologos.scripture.osis")

_RANGE_RE = re.compile(r"(.+\.\d+\.\d+)-(.+\.\d+\.\d+)")


@dataclass(frozen=True)
class MachineCode:
    """One dotted code: book token as written, chapter, verse."""

    book: str
    chapter: int
    verse: int

    def to_traditional(self) -> str:
        return f"{self.book} {self.chapter}:{self.verse}"


def parse_machine_code(token: str) -> Optional[MachineCode]:
    """Parse "Book.Chapter.Verse"; anything but exactly three parts is None."""
    parts = token.split(".")
    if len(parts) != 3:
        return None

    book, chapter_str, verse_str = parts
    chapter = leading_int(chapter_str)
    verse = leading_int(verse_str)
    if chapter is None or verse is None:
        return None

    return MachineCode(book=book, chapter=chapter, verse=verse)


def machine_code_to_traditional(token: str) -> List[str]:
    """Convert one code or two-code range into traditional-notation strings."""
    token = token.strip()

    range_match = _RANGE_RE.fullmatch(token)
    if range_match:
        start = parse_machine_code(range_match.group(1))
        end = parse_machine_code(range_match.group(2))
        if start is None or end is None:
            logger.debug("Dropped machine-code range", token=token)
            return []

        if start.book == end.book and start.chapter == end.chapter:
            return [f"{start.book} {start.chapter}:{start.verse}-{end.verse}"]
        return [start.to_traditional(), end.to_traditional()]

    single = parse_machine_code(token)
    if single is None:
        logger.debug("Dropped machine code", token=token)
        return []
    return [single.to_traditional()]


class MachineCodeGroups:
    """Raw machine-code groups viewed as a source of traditional-notation citations."""

    def __init__(self, groups: Iterable[str]):
        self.groups = list(groups)

    def traditional_references(self) -> List[str]:
        traditionals: List[str] = []
        for group in self.groups:
            for token in group.split(","):
                traditionals.extend(machine_code_to_traditional(token))
        return traditionals


def convert_machine_code_groups(
    groups: Iterable[str],
    index: Optional[BibleIndex] = None,
) -> List[ParsedReference]:
    """
    Convert raw machine-code groups into parsed references.

    Args:
        groups: Raw strings, each one or more comma-separated codes or ranges
        index: Canonical index used by the parser (process-wide by default)
    """
    return parse_source(MachineCodeGroups(groups), index)


def proofs_to_references(
    proofs: Iterable[Mapping[str, Any]],
    index: Optional[BibleIndex] = None,
) -> List[ParsedReference]:
    """
    Convert Creeds.json proof records into parsed references.

    Each record carries its groups under "References", e.g.
    {"Id": 1, "References": ["Eph.1.4,Eph.1.11", "Ps.83"]}.
    """
    groups: List[str] = []
    for proof in proofs:
        groups.extend(proof.get("References") or [])
    return convert_machine_code_groups(groups, index)
