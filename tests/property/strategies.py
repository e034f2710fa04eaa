"""
Custom Hypothesis Strategies for Scripture Citations

Provides domain-specific strategies for generating well-formed and
malformed citations in each of the three input grammars.
"""
from hypothesis import strategies as st

from scripture.canon import get_bible_index
from scripture.resolver import ResolvedReference

# =============================================================================
# BOOK NAMES
# =============================================================================

CANONICAL_NAMES = [book.canonical_name for book in get_bible_index()]

# Alias keys that also read naturally in traditional notation
ALIAS_KEYS = sorted(get_bible_index().aliases)

# Books whose canonical abbreviation can appear in a machine code
ABBREVIATIONS = [book.abbreviation for book in get_bible_index()]


# =============================================================================
# TRADITIONAL NOTATION
# =============================================================================

def book_token_strategy():
    """Book tokens as a human might type them: canonical, aliased, or dotted."""
    return st.one_of(
        st.sampled_from(CANONICAL_NAMES),
        st.sampled_from(CANONICAL_NAMES).map(str.upper),
        st.sampled_from(ALIAS_KEYS),
        st.sampled_from(ALIAS_KEYS).map(lambda alias: f"{alias}."),
    )


@st.composite
def verse_item_strategy(draw):
    """A single verse or an ascending range."""
    start = draw(st.integers(min_value=1, max_value=176))
    if draw(st.booleans()):
        end = draw(st.integers(min_value=start, max_value=start + 10))
        return f"{start}-{end}"
    return str(start)


@st.composite
def traditional_reference_strategy(draw):
    """A well-formed "Book Chapter:VerseList" expression."""
    book = draw(book_token_strategy())
    chapter = draw(st.integers(min_value=1, max_value=150))
    items = draw(st.lists(verse_item_strategy(), min_size=1, max_size=4))
    return f"{book} {chapter}:{', '.join(items)}"


def citation_text_strategy():
    """Citation-like text, well-formed or not."""
    return st.one_of(
        traditional_reference_strategy(),
        st.lists(traditional_reference_strategy(), min_size=1, max_size=4).map("; ".join),
        st.text(max_size=80),
        st.text(alphabet="0123456789:;,-. xyz", max_size=40),
        st.builds(lambda b, c: f"{b} {c}", st.sampled_from(CANONICAL_NAMES), st.integers(-5, 150)),
    )


# =============================================================================
# MACHINE CODES
# =============================================================================

@st.composite
def machine_code_strategy(draw):
    """A Book.Chapter.Verse code, a same-chapter range, or a chapter-only code."""
    book = draw(st.sampled_from(ABBREVIATIONS))
    chapter = draw(st.integers(min_value=1, max_value=150))
    verse = draw(st.integers(min_value=1, max_value=176))
    kind = draw(st.sampled_from(["single", "range", "chapter"]))
    if kind == "single":
        return f"{book}.{chapter}.{verse}"
    if kind == "range":
        end = draw(st.integers(min_value=verse, max_value=verse + 10))
        return f"{book}.{chapter}.{verse}-{book}.{chapter}.{end}"
    return f"{book}.{chapter}"


def machine_code_group_strategy():
    return st.lists(machine_code_strategy(), min_size=1, max_size=4).map(",".join)


# =============================================================================
# RESOLVED REFERENCES
# =============================================================================

@st.composite
def resolved_reference_strategy(draw, books=None):
    """A resolved reference with a synthetic verse identity."""
    book = draw(st.sampled_from(books or CANONICAL_NAMES))
    chapter = draw(st.integers(min_value=1, max_value=5))
    verse = draw(st.integers(min_value=1, max_value=12))
    return ResolvedReference(f"{book} {chapter}:{verse}", book, chapter, verse)


def resolved_references_strategy(max_size=30):
    """Lists drawn from a few books so that groups actually merge."""
    return st.lists(
        resolved_reference_strategy(books=["Genesis", "Job", "Romans"]),
        max_size=max_size,
    )
