"""
THEOLOGOS - Reference Resolver

Resolves parsed citations against the canonical store, walking the
book -> chapter -> verse hierarchy one point lookup at a time.

Missing data is never an error:
    - book or chapter not in the store: one unresolved descriptor for the
      whole citation ("Romans 99:1,2")
    - verse not in the store: one descriptor for that verse only
      ("Romans 8:40"); the citation's other verses still resolve

Store failures (CanonicalStoreError or whatever the backend raises)
propagate to the caller untouched.

Usage:
    from db.store import CanonicalStoreClient
    from scripture.resolver import ReferenceResolver

    resolver = ReferenceResolver(CanonicalStoreClient())
    result = resolver.parse_and_resolve("Romans 8:28-30; 1 Cor 13:4")
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from core.types import DetectionResultDict, ResolutionResultDict, ResolvedReferenceDict
from db.interfaces import ICanonicalStore
from observability.logging import get_logger
from observability.tracing import create_span
from scripture.canon import BibleIndex, get_bible_index
from scripture.detector import ProseReferences
from scripture.parser import ParsedReference, format_reference, parse_all, parse_references

logger = get_logger("theologos.scripture.resolver")


@dataclass(frozen=True)
class ResolvedReference:
    """A verse found in the canonical store, with its citation echoed back."""

    verse_id: str
    book_name: str
    chapter: int
    verse: int

    @property
    def display_text(self) -> str:
        return format_reference(self.book_name, self.chapter, self.verse)

    def to_dict(self) -> ResolvedReferenceDict:
        return {
            "verse_id": self.verse_id,
            "book_name": self.book_name,
            "chapter": self.chapter,
            "verse": self.verse,
        }


@dataclass(frozen=True)
class ResolutionResult:
    """Resolved verses and descriptors for everything the store lacked."""

    resolved: Tuple[ResolvedReference, ...] = ()
    unresolved: Tuple[str, ...] = ()

    @property
    def resolved_count(self) -> int:
        return len(self.resolved)

    @property
    def unresolved_count(self) -> int:
        return len(self.unresolved)

    def to_dict(self) -> ResolutionResultDict:
        return {
            "resolved": [ref.to_dict() for ref in self.resolved],
            "unresolved": list(self.unresolved),
        }


@dataclass(frozen=True)
class DetectionResult(ResolutionResult):
    """Resolution of prose text; detected_count counts accepted matches before parsing."""

    detected_count: int = 0

    def to_dict(self) -> DetectionResultDict:
        return {
            "resolved": [ref.to_dict() for ref in self.resolved],
            "unresolved": list(self.unresolved),
            "detected_count": self.detected_count,
        }


class ReferenceResolver:
    """
    Resolves citations against an ICanonicalStore.

    Lookups are sequential; resolution order follows citation order and
    verse order within each citation.
    """

    def __init__(self, store: ICanonicalStore, index: Optional[BibleIndex] = None):
        self.store = store
        self.index = index or get_bible_index()

    def _resolve_one(
        self,
        parsed: ParsedReference,
        resolved: List[ResolvedReference],
        unresolved: List[str],
    ) -> None:
        book = self.store.find_book_by_canonical_name(parsed.book_name)
        if book is None:
            logger.debug("Book not in store", descriptor=parsed.descriptor)
            unresolved.append(parsed.descriptor)
            return

        chapter = self.store.find_chapter(book.id, parsed.chapter)
        if chapter is None:
            logger.debug("Chapter not in store", descriptor=parsed.descriptor)
            unresolved.append(parsed.descriptor)
            return

        for verse_number in parsed.verses:
            verse = self.store.find_verse(chapter.id, verse_number)
            if verse is None:
                descriptor = format_reference(parsed.book_name, parsed.chapter, verse_number)
                logger.debug("Verse not in store", descriptor=descriptor)
                unresolved.append(descriptor)
                continue

            resolved.append(
                ResolvedReference(
                    verse_id=verse.id,
                    book_name=parsed.book_name,
                    chapter=parsed.chapter,
                    verse=verse_number,
                )
            )

    def resolve_references(self, parsed: Iterable[ParsedReference]) -> ResolutionResult:
        """
        Resolve parsed citations.

        Args:
            parsed: Citations from the parser or the machine-code adapter

        Returns:
            ResolutionResult with resolved verses and unresolved descriptors
        """
        citations = list(parsed)
        resolved: List[ResolvedReference] = []
        unresolved: List[str] = []

        with create_span(
            "scripture.resolve",
            attributes={"scripture.citation_count": len(citations)},
        ) as span:
            for citation in citations:
                self._resolve_one(citation, resolved, unresolved)

            span.set_attribute("scripture.resolved_count", len(resolved))
            span.set_attribute("scripture.unresolved_count", len(unresolved))

        logger.info(
            "Resolved scripture references",
            citations=len(citations),
            resolved=len(resolved),
            unresolved=len(unresolved),
        )
        return ResolutionResult(resolved=tuple(resolved), unresolved=tuple(unresolved))

    def parse_and_resolve(self, text: str) -> ResolutionResult:
        """Parse a traditional-notation string and resolve it."""
        return self.resolve_references(parse_references(text, self.index))

    def detect_and_resolve(self, text: str) -> DetectionResult:
        """Detect citations in prose, parse each match, and resolve them."""
        detected = ProseReferences(text, self.index).traditional_references()
        result = self.resolve_references(parse_all(detected, self.index))
        return DetectionResult(
            resolved=result.resolved,
            unresolved=result.unresolved,
            detected_count=len(detected),
        )


def resolve_references(parsed: Iterable[ParsedReference], store: ICanonicalStore) -> ResolutionResult:
    """Resolve parsed citations against a store."""
    return ReferenceResolver(store).resolve_references(parsed)


def parse_and_resolve(text: str, store: ICanonicalStore) -> ResolutionResult:
    """Parse and resolve a traditional-notation string."""
    return ReferenceResolver(store).parse_and_resolve(text)


def detect_and_resolve(text: str, store: ICanonicalStore) -> DetectionResult:
    """Detect, parse and resolve citations in free-form text."""
    return ReferenceResolver(store).detect_and_resolve(text)
