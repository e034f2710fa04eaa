"""
THEOLOGOS - Canonical Grid Seeding

Loads the 66 canonical books from the Bible index and appends chapters
and verses with running canonical order indices. Verse text is not part
of the grid; importers attach it separately.
"""
from typing import Dict, Mapping, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from db.models import BibleBook, BibleChapter, BibleVerse
from observability.logging import get_logger
from scripture.canon import BibleIndex, get_bible_index

logger = get_logger("theologos.db.seed")


def seed_canonical_books(session: Session, index: Optional[BibleIndex] = None) -> Dict[str, BibleBook]:
    """
    Insert any canonical book not yet in the store.

    Returns:
        All canonical books keyed by canonical name
    """
    index = index or get_bible_index()
    existing = {book.canonical_name: book for book in session.scalars(select(BibleBook))}

    added = 0
    for canonical in index:
        if canonical.canonical_name in existing:
            continue
        book = BibleBook(
            canonical_name=canonical.canonical_name,
            abbreviation=canonical.abbreviation,
            testament=canonical.testament.value,
            canonical_order=canonical.canonical_order,
        )
        session.add(book)
        existing[canonical.canonical_name] = book
        added += 1

    session.flush()
    logger.info("Seeded canonical books", added=added, total=len(existing))
    return existing


def _next_index(session: Session, column) -> int:
    current = session.scalar(select(func.max(column)))
    return (current or 0) + 1


def add_chapter(session: Session, book: BibleBook, chapter_number: int, verse_count: int) -> BibleChapter:
    """Append one chapter with verses 1..verse_count to the end of the grid."""
    chapter = BibleChapter(
        book=book,
        chapter_number=chapter_number,
        canonical_order_index=_next_index(session, BibleChapter.canonical_order_index),
    )
    session.add(chapter)

    first_verse_index = _next_index(session, BibleVerse.canonical_order_index)
    for offset, verse_number in enumerate(range(1, verse_count + 1)):
        session.add(
            BibleVerse(
                chapter=chapter,
                verse_number=verse_number,
                canonical_order_index=first_verse_index + offset,
            )
        )

    session.flush()
    return chapter


def seed_grid(
    session: Session,
    chapters: Mapping[str, Sequence[int]],
    index: Optional[BibleIndex] = None,
) -> int:
    """
    Seed books, then chapters and verses in canonical book order.

    Args:
        chapters: Canonical book name -> verse counts per chapter, e.g.
            {"Job": [22, 13, ...]}; a book may list only its first chapters

    Returns:
        Number of verses added
    """
    index = index or get_bible_index()
    books = seed_canonical_books(session, index)

    added = 0
    for canonical in index:
        for chapter_number, verse_count in enumerate(chapters.get(canonical.canonical_name, ()), start=1):
            add_chapter(session, books[canonical.canonical_name], chapter_number, verse_count)
            added += verse_count

    unknown = set(chapters) - set(books)
    if unknown:
        logger.warning("Skipped books outside the canon", books=sorted(unknown))

    logger.info("Seeded canonical grid", verses=added)
    return added
