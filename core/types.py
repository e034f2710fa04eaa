"""
THEOLOGOS - Centralized Type Definitions

Type aliases and TypedDicts shared by the scripture reference subsystem
and the layers that serialize its results (CLI, API responses).

Usage:
    from core.types import VerseIdentity, ResolvedReferenceDict

    def render(ref: ResolvedReferenceDict) -> str:
        ...
"""
from __future__ import annotations

from typing import List, Literal, TypedDict

# =============================================================================
# TYPE ALIASES - Simple type shortcuts
# =============================================================================

# Opaque verse identity as issued by the canonical store
VerseIdentity = str
# Canonical book name (e.g., "1 Corinthians")
BookName = str
# Compact "Book Chapter:Verse[,Verse...]" string for citations the store could not satisfy
UnresolvedDescriptor = str

TestamentLiteral = Literal["OT", "NT"]


# =============================================================================
# TYPED DICTS - Structured dictionaries with type hints
# =============================================================================


class CanonicalBookDict(TypedDict):
    """Dictionary representation of a canonical book."""
    canonical_name: str
    abbreviation: str
    testament: TestamentLiteral
    canonical_order: int


class ParsedReferenceDict(TypedDict):
    """Dictionary representation of a parsed citation."""
    book_name: str
    chapter: int
    verses: List[int]


class ResolvedReferenceDict(TypedDict):
    """Dictionary representation of a resolved verse."""
    verse_id: str
    book_name: str
    chapter: int
    verse: int


class ResolutionResultDict(TypedDict):
    """Dictionary representation of a resolver result."""
    resolved: List[ResolvedReferenceDict]
    unresolved: List[str]


class DetectionResultDict(ResolutionResultDict):
    """Resolver result for free-form text, with the raw detection count."""
    detected_count: int


class ProofGroupDict(TypedDict):
    """Dictionary representation of a display group of proof texts."""
    display_text: str
    references: List[ResolvedReferenceDict]
