"""
THEOLOGOS - SQL Canonical Store Client

Synchronous SQLAlchemy 2.0 implementation of ICanonicalStore. Each
lookup is one point query in its own short session; the resolver calls
them one at a time.
"""
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy import Select, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config import get_config
from core.errors import CanonicalStoreError
from db.models import Base, BibleBook, BibleChapter, BibleVerse
from observability.logging import get_logger

logger = get_logger("theologos.db.store")

# SQL INTEGER columns are signed 64-bit
_INTEGER_MIN = -(2**63)
_INTEGER_MAX = 2**63 - 1


class CanonicalStoreClient:
    """
    SQL-backed canonical store.

    Features:
    - Lazy engine creation from DATABASE_URL
    - Session context manager with commit/rollback
    - SQLAlchemy failures surfaced as CanonicalStoreError
    - Chapter and verse numbers outside the INTEGER range are not found
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        echo: Optional[bool] = None,
        pool_size: Optional[int] = None,
        pool_timeout: Optional[int] = None,
    ):
        db_config = get_config().database
        self.database_url = database_url or db_config.database_url
        self.echo = db_config.echo if echo is None else echo
        self.pool_size = pool_size or db_config.pool_size
        self.pool_timeout = pool_timeout or db_config.pool_timeout

        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def initialize(self) -> None:
        """Create the engine and session factory."""
        if self._engine is not None:
            return

        kwargs: dict[str, Any] = {"echo": self.echo}
        if self.is_sqlite:
            kwargs["connect_args"] = {"check_same_thread": False}
            if self.database_url in ("sqlite://", "sqlite:///:memory:"):
                # one shared connection, or every session would see an empty database
                kwargs["poolclass"] = StaticPool
        else:
            kwargs.update(
                pool_size=self.pool_size,
                pool_timeout=self.pool_timeout,
                pool_pre_ping=True,
                pool_recycle=1800,
            )

        self._engine = create_engine(self.database_url, **kwargs)
        self._session_factory = sessionmaker(self._engine, expire_on_commit=False)
        logger.info("Canonical store initialized", sqlite=self.is_sqlite)

    def close(self) -> None:
        """Dispose of pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Canonical store connections closed")

    def __enter__(self) -> "CanonicalStoreClient":
        self.initialize()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Get a database session; commits on success, rolls back on error."""
        self.initialize()
        with self._session_factory() as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise

    def create_tables(self) -> None:
        """Create the canonical grid tables."""
        self.initialize()
        Base.metadata.create_all(self._engine)
        logger.info("Canonical grid tables created")

    # ICanonicalStore

    def find_book_by_canonical_name(self, name: str) -> Optional[BibleBook]:
        return self._lookup(
            "book",
            name,
            select(BibleBook).where(BibleBook.canonical_name == name),
        )

    def find_chapter(self, book_id: Any, chapter_number: int) -> Optional[BibleChapter]:
        if not _INTEGER_MIN <= chapter_number <= _INTEGER_MAX:
            return None
        return self._lookup(
            "chapter",
            (book_id, chapter_number),
            select(BibleChapter).where(
                BibleChapter.book_id == book_id,
                BibleChapter.chapter_number == chapter_number,
            ),
        )

    def find_verse(self, chapter_id: Any, verse_number: int) -> Optional[BibleVerse]:
        if not _INTEGER_MIN <= verse_number <= _INTEGER_MAX:
            return None
        return self._lookup(
            "verse",
            (chapter_id, verse_number),
            select(BibleVerse).where(
                BibleVerse.chapter_id == chapter_id,
                BibleVerse.verse_number == verse_number,
            ),
        )

    def _lookup(self, lookup: str, key: Any, stmt: Select) -> Optional[Any]:
        try:
            with self.session() as session:
                return session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise CanonicalStoreError(
                f"Canonical store {lookup} lookup failed",
                lookup=lookup,
                key=key,
                cause=e,
            ) from e
