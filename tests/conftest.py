"""
THEOLOGOS - Test Configuration

Pytest fixtures and configuration for all tests.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

import pytest

from db.seed import seed_grid
from db.store import CanonicalStoreClient
from scripture.canon import BibleIndex, get_bible_index


@dataclass(frozen=True)
class StoredRow:
    """Entity returned by the in-memory store."""
    id: str


class InMemoryCanonicalStore:
    """
    Dictionary-backed ICanonicalStore.

    Verse ids read "Book Chapter:Verse" so assertions stay legible.
    Every lookup is recorded in `calls`.
    """

    def __init__(self):
        self.books: Dict[str, StoredRow] = {}
        self.chapters: Dict[Tuple[str, int], StoredRow] = {}
        self.verses: Dict[Tuple[str, int], StoredRow] = {}
        self.calls: list = []

    def add(self, book: str, chapter: int, verses: Iterable[int]) -> "InMemoryCanonicalStore":
        self.books.setdefault(book, StoredRow(id=book))
        chapter_id = f"{book} {chapter}"
        self.chapters[(book, chapter)] = StoredRow(id=chapter_id)
        for verse in verses:
            self.verses[(chapter_id, verse)] = StoredRow(id=f"{book} {chapter}:{verse}")
        return self

    def find_book_by_canonical_name(self, name: str) -> Optional[StoredRow]:
        self.calls.append(("book", name))
        return self.books.get(name)

    def find_chapter(self, book_id: str, chapter_number: int) -> Optional[StoredRow]:
        self.calls.append(("chapter", book_id, chapter_number))
        return self.chapters.get((book_id, chapter_number))

    def find_verse(self, chapter_id: str, verse_number: int) -> Optional[StoredRow]:
        self.calls.append(("verse", chapter_id, verse_number))
        return self.verses.get((chapter_id, verse_number))


@pytest.fixture
def bible_index() -> BibleIndex:
    """Process-wide canonical index."""
    return get_bible_index()


@pytest.fixture
def memory_store() -> InMemoryCanonicalStore:
    """In-memory store holding Romans 8, 1 Corinthians 13, Job 32, Psalms 23 and 1 John 3."""
    return (
        InMemoryCanonicalStore()
        .add("Romans", 8, range(1, 40))
        .add("1 Corinthians", 13, range(1, 14))
        .add("Job", 32, range(1, 23))
        .add("Psalms", 23, range(1, 7))
        .add("1 John", 3, range(1, 25))
    )


# Verse counts per chapter for the SQLite grid
GRID_CHAPTERS = {
    "Genesis": [31, 25, 24],
    "Job": [22] * 32,
    "Psalms": [6] * 23,
    "Romans": [32, 29, 31, 25, 21, 23, 25, 39],
}


@pytest.fixture
def sqlite_store():
    """In-memory SQLite canonical store seeded with a partial grid."""
    store = CanonicalStoreClient("sqlite://", echo=False)
    store.create_tables()
    with store.session() as session:
        seed_grid(session, GRID_CHAPTERS)
    yield store
    store.close()


@pytest.fixture
def sample_proofs() -> list:
    """Proof records shaped like the Creeds.json dataset."""
    return [
        {"Id": 1, "References": ["Isa.44.6", "Ps.83"]},
        {"Id": 2, "References": ["Gen.3.6-Gen.3.8,Gen.3.13"]},
        {"Id": 3},
    ]
