"""
THEOLOGOS - Canonical Store Interfaces

The reference resolver talks to storage only through three point
lookups walking the book -> chapter -> verse hierarchy. Any backend that
satisfies ICanonicalStore can serve it: the SQLAlchemy client in
db.store, or an in-memory fake in tests.

Contract:
    - A lookup that finds nothing returns None.
    - A lookup that cannot be answered (connection lost, corrupt data)
      raises; the resolver lets that propagate to its caller.

Usage:
    from db.interfaces import ICanonicalStore

    class ProofTextImporter:
        def __init__(self, store: ICanonicalStore):
            self._store = store
"""
from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


class IEntity(Protocol):
    """
    Protocol for stored entities.

    All entities must have an identity that distinguishes them.
    """

    @property
    def id(self) -> Any:
        """Unique identifier for this entity."""
        ...


@runtime_checkable
class ICanonicalStore(Protocol):
    """Point-lookup contract over the canonical grid."""

    def find_book_by_canonical_name(self, name: str) -> Optional[IEntity]:
        """Find a book by exact canonical name."""
        ...

    def find_chapter(self, book_id: Any, chapter_number: int) -> Optional[IEntity]:
        """Find a chapter by (book, chapter number)."""
        ...

    def find_verse(self, chapter_id: Any, verse_number: int) -> Optional[IEntity]:
        """Find a verse by (chapter, verse number)."""
        ...
