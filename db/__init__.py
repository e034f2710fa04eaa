"""
THEOLOGOS - Database Layer

The canonical grid (books, chapters, verses) and the store the
reference resolver looks citations up in.

The resolver depends only on the ICanonicalStore protocol; the
SQLAlchemy client here is one implementation of it.

Usage:
    from db import CanonicalStoreClient, seed_grid

    store = CanonicalStoreClient("sqlite:///./theologos.db")
    store.create_tables()
    with store.session() as session:
        seed_grid(session, {"Job": [22, 13, 26]})
"""
from db.interfaces import ICanonicalStore, IEntity
from db.models import Base, BibleBook, BibleChapter, BibleVerse
from db.store import CanonicalStoreClient
from db.seed import add_chapter, seed_canonical_books, seed_grid

__all__ = [
    # Interfaces
    "ICanonicalStore",
    "IEntity",
    # Models
    "Base",
    "BibleBook",
    "BibleChapter",
    "BibleVerse",
    # Client
    "CanonicalStoreClient",
    # Seeding
    "add_chapter",
    "seed_canonical_books",
    "seed_grid",
]
