"""
THEOLOGOS - Proof Group Builder

Merges resolved proof texts, already in canonical reading order, into
display groups in a single pass:

    Job 32:6, Job 32:7, Job 32:8   -> "Job 32:6-8"
    Rom 8:1, Rom 8:2, Rom 8:4      -> "Romans 8:1, 2, 4"
    Rom 8:28, Rom 9:1              -> "Romans 8:28", "Romans 9:1"

A group never spans two chapters. Once a group has taken a
non-consecutive verse its display text is the full comma list of its
members, even where a sub-run is consecutive.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from core.types import ProofGroupDict
from scripture.canon import BibleIndex, get_bible_index
from scripture.resolver import ResolvedReference


@dataclass(frozen=True)
class ProofGroup:
    """A finalized display group."""

    display_text: str
    references: Tuple[ResolvedReference, ...]

    def to_dict(self) -> ProofGroupDict:
        return {
            "display_text": self.display_text,
            "references": [ref.to_dict() for ref in self.references],
        }


@dataclass
class _OpenGroup:
    display_text: str
    references: List[ResolvedReference] = field(default_factory=list)

    @property
    def first(self) -> ResolvedReference:
        return self.references[0]

    @property
    def last(self) -> ResolvedReference:
        return self.references[-1]

    def same_chapter(self, ref: ResolvedReference) -> bool:
        return ref.book_name == self.last.book_name and ref.chapter == self.last.chapter

    def append_consecutive(self, ref: ResolvedReference) -> None:
        self.references.append(ref)
        first, last = self.first, self.last
        self.display_text = f"{first.book_name} {first.chapter}:{first.verse}"
        if last.verse > first.verse:
            self.display_text += f"-{last.verse}"

    def append_listed(self, ref: ResolvedReference) -> None:
        self.references.append(ref)
        verses = ", ".join(str(member.verse) for member in self.references)
        self.display_text = f"{ref.book_name} {ref.chapter}:{verses}"

    def finalize(self) -> ProofGroup:
        return ProofGroup(display_text=self.display_text, references=tuple(self.references))


def sort_by_reading_position(
    refs: Iterable[ResolvedReference],
    index: Optional[BibleIndex] = None,
) -> List[ResolvedReference]:
    """Sort by (book order, chapter, verse); books outside the canon go last."""
    index = index or get_bible_index()
    return sorted(refs, key=lambda ref: index.reading_position(ref.book_name, ref.chapter, ref.verse))


def build_proof_groups(refs: Iterable[ResolvedReference]) -> List[ProofGroup]:
    """
    Group resolved references for display.

    Args:
        refs: Resolved references sorted in canonical reading order
            (see sort_by_reading_position)

    Returns:
        Finalized groups in input order
    """
    groups: List[ProofGroup] = []
    current: Optional[_OpenGroup] = None

    for ref in refs:
        if current is None or not current.same_chapter(ref):
            if current is not None:
                groups.append(current.finalize())
            current = _OpenGroup(display_text=ref.display_text, references=[ref])
        elif ref.verse == current.last.verse + 1:
            current.append_consecutive(ref)
        else:
            current.append_listed(ref)

    if current is not None:
        groups.append(current.finalize())

    return groups
