"""
Tests for the proof group builder.
"""
from scripture.grouping import ProofGroup, build_proof_groups, sort_by_reading_position
from scripture.resolver import ResolvedReference


def ref(book: str, chapter: int, verse: int) -> ResolvedReference:
    return ResolvedReference(f"{book} {chapter}:{verse}", book, chapter, verse)


def displays(groups):
    return [group.display_text for group in groups]


class TestBuildProofGroups:
    """Tests for the single-pass grouping rules."""

    def test_consecutive_verses_collapse(self):
        groups = build_proof_groups([ref("Job", 32, 6), ref("Job", 32, 7), ref("Job", 32, 8)])

        assert displays(groups) == ["Job 32:6-8"]
        assert [r.verse for r in groups[0].references] == [6, 7, 8]

    def test_new_chapter_starts_new_group(self):
        groups = build_proof_groups([ref("Job", 32, 6), ref("Job", 32, 7), ref("Job", 33, 1)])
        assert displays(groups) == ["Job 32:6-7", "Job 33:1"]

    def test_new_book_starts_new_group(self):
        groups = build_proof_groups([ref("Romans", 8, 28), ref("1 Corinthians", 8, 29)])
        assert displays(groups) == ["Romans 8:28", "1 Corinthians 8:29"]

    def test_non_consecutive_renders_full_list(self):
        """A gap switches the group to a comma list of every member."""
        groups = build_proof_groups([ref("Romans", 8, 1), ref("Romans", 8, 2), ref("Romans", 8, 4)])
        assert displays(groups) == ["Romans 8:1, 2, 4"]

    def test_singleton(self):
        assert displays(build_proof_groups([ref("Isaiah", 44, 6)])) == ["Isaiah 44:6"]

    def test_empty_input(self):
        assert build_proof_groups([]) == []

    def test_repeated_verse_is_listed(self):
        groups = build_proof_groups([ref("Job", 32, 6), ref("Job", 32, 6)])
        assert displays(groups) == ["Job 32:6, 6"]

    def test_consecutive_after_gap_spans_first_to_last(self):
        """A consecutive step re-renders as a first-to-last range."""
        groups = build_proof_groups([ref("Romans", 8, 1), ref("Romans", 8, 3), ref("Romans", 8, 4)])
        assert displays(groups) == ["Romans 8:1-4"]

    def test_consecutive_after_backwards_step_has_no_suffix(self):
        """The '-last' suffix is only written when the last verse is past the first."""
        groups = build_proof_groups([ref("Romans", 8, 5), ref("Romans", 8, 2), ref("Romans", 8, 3)])
        assert displays(groups) == ["Romans 8:5"]

    def test_group_to_dict(self):
        group = build_proof_groups([ref("Job", 32, 6)])[0]
        assert isinstance(group, ProofGroup)
        assert group.to_dict() == {
            "display_text": "Job 32:6",
            "references": [
                {"verse_id": "Job 32:6", "book_name": "Job", "chapter": 32, "verse": 6},
            ],
        }


class TestSortByReadingPosition:
    """Tests for canonical reading-order sorting."""

    def test_sorts_by_book_order_not_name(self):
        refs = [ref("Romans", 8, 28), ref("Genesis", 3, 15), ref("Romans", 3, 23), ref("Genesis", 3, 6)]
        ordered = sort_by_reading_position(refs)
        assert [r.verse_id for r in ordered] == [
            "Genesis 3:6", "Genesis 3:15", "Romans 3:23", "Romans 8:28",
        ]

    def test_sorted_then_grouped(self):
        refs = [ref("Job", 32, 8), ref("Genesis", 1, 1), ref("Job", 32, 6), ref("Job", 32, 7)]
        assert displays(build_proof_groups(sort_by_reading_position(refs))) == [
            "Genesis 1:1",
            "Job 32:6-8",
        ]
