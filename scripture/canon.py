"""
THEOLOGOS - Canonical Bible Index

The fixed 66-book Protestant canon and the alias table that maps
abbreviations and spelling variants onto canonical book names.

Both structures are built once, at import time, and validated while
being built; a bad table is a CanonConfigError at startup rather than a
silently shadowed alias later. After that they are read-only and safe to
share between any number of concurrent readers.

Usage:
    from scripture.canon import lookup_by_name, normalize_book_name

    lookup_by_name("romans").canonical_order   # 45
    normalize_book_name("1 Cor.")              # "1 Corinthians"
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from core.errors import CanonConfigError
from core.types import CanonicalBookDict

CANON_SIZE = 66

_TRAILING_PERIODS = re.compile(r"\.+$")


class Testament(str, Enum):
    """Testament enumeration."""
    OT = "OT"
    NT = "NT"


@dataclass(frozen=True)
class CanonicalBook:
    """One book of the canonical grid."""

    canonical_name: str
    abbreviation: str
    testament: Testament
    canonical_order: int

    def to_dict(self) -> CanonicalBookDict:
        return {
            "canonical_name": self.canonical_name,
            "abbreviation": self.abbreviation,
            "testament": self.testament.value,
            "canonical_order": self.canonical_order,
        }


def _books(testament: Testament, first_order: int, rows: Sequence[Tuple[str, str]]) -> Tuple[CanonicalBook, ...]:
    return tuple(
        CanonicalBook(name, abbreviation, testament, first_order + offset)
        for offset, (name, abbreviation) in enumerate(rows)
    )


CANONICAL_BOOKS: Tuple[CanonicalBook, ...] = _books(Testament.OT, 1, [
    ("Genesis", "Gen"), ("Exodus", "Exod"), ("Leviticus", "Lev"),
    ("Numbers", "Num"), ("Deuteronomy", "Deut"), ("Joshua", "Josh"),
    ("Judges", "Judg"), ("Ruth", "Ruth"), ("1 Samuel", "1Sam"),
    ("2 Samuel", "2Sam"), ("1 Kings", "1Kgs"), ("2 Kings", "2Kgs"),
    ("1 Chronicles", "1Chr"), ("2 Chronicles", "2Chr"), ("Ezra", "Ezra"),
    ("Nehemiah", "Neh"), ("Esther", "Esth"), ("Job", "Job"),
    ("Psalms", "Ps"), ("Proverbs", "Prov"), ("Ecclesiastes", "Eccl"),
    ("Song of Solomon", "Song"), ("Isaiah", "Isa"), ("Jeremiah", "Jer"),
    ("Lamentations", "Lam"), ("Ezekiel", "Ezek"), ("Daniel", "Dan"),
    ("Hosea", "Hos"), ("Joel", "Joel"), ("Amos", "Amos"),
    ("Obadiah", "Obad"), ("Jonah", "Jonah"), ("Micah", "Mic"),
    ("Nahum", "Nah"), ("Habakkuk", "Hab"), ("Zephaniah", "Zeph"),
    ("Haggai", "Hag"), ("Zechariah", "Zech"), ("Malachi", "Mal"),
]) + _books(Testament.NT, 40, [
    ("Matthew", "Matt"), ("Mark", "Mark"), ("Luke", "Luke"),
    ("John", "John"), ("Acts", "Acts"), ("Romans", "Rom"),
    ("1 Corinthians", "1Cor"), ("2 Corinthians", "2Cor"), ("Galatians", "Gal"),
    ("Ephesians", "Eph"), ("Philippians", "Phil"), ("Colossians", "Col"),
    ("1 Thessalonians", "1Thess"), ("2 Thessalonians", "2Thess"), ("1 Timothy", "1Tim"),
    ("2 Timothy", "2Tim"), ("Titus", "Titus"), ("Philemon", "Phlm"),
    ("Hebrews", "Heb"), ("James", "Jas"), ("1 Peter", "1Pet"),
    ("2 Peter", "2Pet"), ("1 John", "1John"), ("2 John", "2John"),
    ("3 John", "3John"), ("Jude", "Jude"), ("Revelation", "Rev"),
])


# Aliases are grouped per canonical book instead of written as one dict
# literal, so a key repeated for two books reaches the builder intact.
BOOK_ALIASES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Genesis", ("gen", "ge")),
    ("Exodus", ("exod", "ex")),
    ("Leviticus", ("lev", "le")),
    ("Numbers", ("num", "nu")),
    ("Deuteronomy", ("deut", "dt")),
    ("Joshua", ("josh", "jos")),
    ("Judges", ("judg", "jdg")),
    ("Ruth", ("ruth", "ru")),
    ("1 Samuel", ("1 sam", "1sam", "i sam")),
    ("2 Samuel", ("2 sam", "2sam", "ii sam")),
    ("1 Kings", ("1 kings", "1kings", "i kings")),
    ("2 Kings", ("2 kings", "2kings", "ii kings")),
    ("1 Chronicles", ("1 chron", "1chron", "1 chr", "1chr", "i chronicles")),
    ("2 Chronicles", ("2 chron", "2chron", "2 chr", "2chr", "ii chronicles")),
    ("Ezra", ("ezra", "ezr")),
    ("Nehemiah", ("neh", "ne")),
    ("Esther", ("esth", "est")),
    ("Job", ("job",)),
    ("Psalms", ("ps", "psa", "psalm")),
    ("Proverbs", ("prov", "pr")),
    ("Ecclesiastes", ("eccl", "ecc", "ec")),
    ("Song of Solomon", ("song", "song of songs", "sos", "ss")),
    ("Isaiah", ("isa", "is")),
    ("Jeremiah", ("jer", "je")),
    ("Lamentations", ("lam", "la")),
    ("Ezekiel", ("ezek", "eze")),
    ("Daniel", ("dan", "da")),
    ("Hosea", ("hos",)),
    ("Joel", ("joel",)),
    ("Amos", ("amos",)),
    ("Obadiah", ("obad", "ob")),
    ("Jonah", ("jonah", "jon")),
    ("Micah", ("mic", "mi")),
    ("Nahum", ("nah", "na")),
    ("Habakkuk", ("hab",)),
    ("Zephaniah", ("zeph", "zep")),
    ("Haggai", ("hag", "haggai")),
    ("Zechariah", ("zech", "zec")),
    ("Malachi", ("mal",)),
    ("Matthew", ("matt", "mt")),
    ("Mark", ("mark", "mk", "mr")),
    ("Luke", ("luke", "lk")),
    ("John", ("john", "jn", "joh")),
    ("Acts", ("acts", "ac")),
    ("Romans", ("rom", "ro")),
    ("1 Corinthians", ("1 cor", "1cor", "i cor", "i corinthians")),
    ("2 Corinthians", ("2 cor", "2cor", "ii cor", "ii corinthians")),
    ("Galatians", ("gal", "ga")),
    ("Ephesians", ("eph",)),
    ("Philippians", ("phil", "php")),
    ("Colossians", ("col",)),
    ("1 Thessalonians", ("1 thess", "1thess", "i thess")),
    ("2 Thessalonians", ("2 thess", "2thess", "ii thess")),
    ("1 Timothy", ("1 tim", "1tim", "i tim", "i timothy")),
    ("2 Timothy", ("2 tim", "2tim", "ii tim", "ii timothy")),
    ("Titus", ("titus", "tit")),
    ("Philemon", ("philem", "phlm", "phm")),
    ("Hebrews", ("heb",)),
    ("James", ("jas", "jam")),
    ("1 Peter", ("1 pet", "1pet", "i pet", "i peter")),
    ("2 Peter", ("2 pet", "2pet", "ii pet", "ii peter")),
    ("1 John", ("1 john", "1john", "i john")),
    ("2 John", ("2 john", "2john", "ii john")),
    ("3 John", ("3 john", "3john", "iii john")),
    ("Jude", ("jude", "jud")),
    ("Revelation", ("rev", "re", "revelations")),
)


def clean_book_token(raw: str) -> str:
    """Trim, lower-case and strip trailing periods ("Ps." -> "ps")."""
    return _TRAILING_PERIODS.sub("", raw.strip().lower())


def validate_canon(books: Sequence[CanonicalBook], expected_size: int = CANON_SIZE) -> None:
    """
    Check that canonical orders are unique and contiguous from 1 and that
    names are unique.

    Raises:
        CanonConfigError: On the first inconsistency found
    """
    if len(books) != expected_size:
        raise CanonConfigError(
            f"Canon must contain exactly {expected_size} books, got {len(books)}"
        )

    orders = sorted(book.canonical_order for book in books)
    if orders != list(range(1, expected_size + 1)):
        raise CanonConfigError(
            f"Canonical orders must be unique and contiguous 1..{expected_size}"
        )

    seen: dict[str, str] = {}
    for book in books:
        key = book.canonical_name.lower()
        if key in seen:
            raise CanonConfigError(
                f"Duplicate canonical book name '{book.canonical_name}'",
                key=key,
                conflicting=[seen[key], book.canonical_name],
            )
        seen[key] = book.canonical_name


def build_alias_table(
    alias_groups: Iterable[Tuple[str, Iterable[str]]],
    books: Sequence[CanonicalBook],
) -> Mapping[str, str]:
    """
    Build the read-only alias -> canonical name table.

    Each book's canonical abbreviation is folded in as an alias as well.
    Repeating a key for the same book is harmless; repeating it for a
    different book is not.

    Raises:
        CanonConfigError: If a key maps to two canonical names, or an
            alias group names a book outside the canon
    """
    known = {book.canonical_name for book in books}
    table: dict[str, str] = {}

    def add(alias: str, canonical_name: str) -> None:
        key = clean_book_token(alias)
        existing = table.get(key)
        if existing is not None and existing != canonical_name:
            raise CanonConfigError(
                f"Alias '{key}' maps to both '{existing}' and '{canonical_name}'",
                key=key,
                conflicting=[existing, canonical_name],
            )
        table[key] = canonical_name

    for canonical_name, aliases in alias_groups:
        if canonical_name not in known:
            raise CanonConfigError(
                f"Alias group targets unknown book '{canonical_name}'",
                key=canonical_name,
            )
        for alias in aliases:
            add(alias, canonical_name)

    for book in books:
        add(book.abbreviation, book.canonical_name)

    return MappingProxyType(table)


class BibleIndex:
    """
    Immutable lookup structure over the canonical books and alias table.

    Name lookups are case-insensitive. The index also supplies the
    reading-position key (book order, chapter, verse) used to sort and
    group resolved citations.
    """

    def __init__(
        self,
        books: Sequence[CanonicalBook] = CANONICAL_BOOKS,
        alias_groups: Iterable[Tuple[str, Iterable[str]]] = BOOK_ALIASES,
        expected_size: int = CANON_SIZE,
    ):
        validate_canon(books, expected_size)
        self._books = tuple(sorted(books, key=lambda b: b.canonical_order))
        self._by_name: Mapping[str, CanonicalBook] = MappingProxyType(
            {book.canonical_name.lower(): book for book in self._books}
        )
        self._aliases = build_alias_table(alias_groups, self._books)

    @property
    def books(self) -> Tuple[CanonicalBook, ...]:
        """Books in canonical order."""
        return self._books

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[CanonicalBook]:
        return iter(self._books)

    def lookup_by_name(self, name: str) -> Optional[CanonicalBook]:
        """Find a book by its canonical name, ignoring case."""
        return self._by_name.get(name.strip().lower())

    def normalize_book_name(self, raw: str) -> Optional[str]:
        """
        Map a raw book token to its canonical name.

        The token is cleaned (see clean_book_token), looked up in the alias
        table, then matched directly against canonical names. Returns None
        when neither succeeds.
        """
        cleaned = clean_book_token(raw)
        alias = self._aliases.get(cleaned)
        if alias is not None:
            return alias
        book = self._by_name.get(cleaned)
        return book.canonical_name if book else None

    def reading_position(self, book_name: str, chapter: int, verse: int) -> Tuple[int, int, int]:
        """Sort key in canonical reading order; unknown books sort last."""
        book = self.lookup_by_name(book_name)
        order = book.canonical_order if book else len(self._books) + 1
        return (order, chapter, verse)


BIBLE_INDEX = BibleIndex()


def get_bible_index() -> BibleIndex:
    """Get the process-wide canonical index."""
    return BIBLE_INDEX


def lookup_by_name(name: str) -> Optional[CanonicalBook]:
    """Find a canonical book by name (case-insensitive)."""
    return BIBLE_INDEX.lookup_by_name(name)


def normalize_book_name(raw: str) -> Optional[str]:
    """Normalize a raw book token to its canonical name, or None."""
    return BIBLE_INDEX.normalize_book_name(raw)
