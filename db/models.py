"""
THEOLOGOS - SQLAlchemy ORM Models

The canonical grid: books, chapters and verses. Translations and text
live elsewhere; these tables only give every verse a stable identity and
a canonical ordering.
"""
import uuid
from datetime import datetime
from typing import List

from sqlalchemy import DateTime, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func


def _new_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class BibleBook(Base):
    """Canonical book."""
    __tablename__ = "bible_books"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    canonical_name: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    abbreviation: Mapped[str] = mapped_column(String(10))
    testament: Mapped[str] = mapped_column(String(2), index=True)  # OT, NT
    canonical_order: Mapped[int] = mapped_column(index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    chapters: Mapped[List["BibleChapter"]] = relationship(
        back_populates="book",
        order_by="BibleChapter.chapter_number",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<BibleBook {self.canonical_order}: {self.canonical_name}>"


class BibleChapter(Base):
    """Chapter of a canonical book."""
    __tablename__ = "bible_chapters"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    book_id: Mapped[str] = mapped_column(ForeignKey("bible_books.id", ondelete="CASCADE"))
    chapter_number: Mapped[int] = mapped_column()
    canonical_order_index: Mapped[int] = mapped_column(index=True)

    book: Mapped["BibleBook"] = relationship(back_populates="chapters")
    verses: Mapped[List["BibleVerse"]] = relationship(
        back_populates="chapter",
        order_by="BibleVerse.verse_number",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("book_id", "chapter_number", name="uq_bible_chapters_book_chapter"),
    )

    def __repr__(self) -> str:
        return f"<BibleChapter {self.book_id}:{self.chapter_number}>"


class BibleVerse(Base):
    """Verse of a chapter. Its id is the verse identity handed to callers."""
    __tablename__ = "bible_verses"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    chapter_id: Mapped[str] = mapped_column(ForeignKey("bible_chapters.id", ondelete="CASCADE"))
    verse_number: Mapped[int] = mapped_column()
    canonical_order_index: Mapped[int] = mapped_column()

    chapter: Mapped["BibleChapter"] = relationship(back_populates="verses")

    __table_args__ = (
        UniqueConstraint("chapter_id", "verse_number", name="uq_bible_verses_chapter_verse"),
        Index("ix_bible_verses_canonical_order", "canonical_order_index"),
    )

    def __repr__(self) -> str:
        return f"<BibleVerse {self.chapter_id}:{self.verse_number}>"
