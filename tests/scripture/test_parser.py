"""
Tests for the traditional-notation parser.
"""
import pytest

from scripture.parser import (
    MAX_RANGE_LENGTH,
    ParsedReference,
    TraditionalReferenceSource,
    format_reference,
    leading_int,
    parse_all,
    parse_reference,
    parse_references,
    parse_source,
)


class TestParseReferences:
    """Tests for parse_references."""

    def test_single_verse(self):
        refs = parse_references("Romans 8:28")
        assert refs == [ParsedReference("Romans", 8, (28,))]

    def test_range_expands_inclusively(self):
        refs = parse_references("Romans 8:28-30")
        assert refs[0].verses == (28, 29, 30)

    def test_comma_list_is_not_range_expanded(self):
        refs = parse_references("Romans 8:28, 30")
        assert refs[0].verses == (28, 30)

    def test_semicolon_sequence(self):
        """Each ';'-separated expression yields its own citation."""
        refs = parse_references("Romans 8:28; 1 Cor 13:4-7")
        assert len(refs) == 2
        assert refs[1].book_name == "1 Corinthians"
        assert refs[1].chapter == 13
        assert refs[1].verses == (4, 5, 6, 7)

    @pytest.mark.parametrize("text", ["Ps. 23:1", "Psalm 23:1", "psalms 23:1"])
    def test_alias_equivalence(self, text):
        refs = parse_references(text)
        assert refs == [ParsedReference("Psalms", 23, (1,))]

    def test_mixed_ranges_and_singles_keep_order(self):
        """Verses are kept in written order and not deduplicated."""
        refs = parse_references("John 3:16, 14-15, 16")
        assert refs[0].verses == (16, 14, 15, 16)

    def test_multi_word_book(self):
        refs = parse_references("Song of Solomon 2:1")
        assert refs[0].book_name == "Song of Solomon"


class TestMalformedInput:
    """Malformed input is dropped, never raised."""

    def test_unknown_book_drops_expression(self):
        assert parse_references("Hezekiah 1:1") == []

    def test_unknown_book_does_not_affect_neighbours(self):
        refs = parse_references("Hezekiah 1:1; Job 1:1")
        assert [r.book_name for r in refs] == ["Job"]

    @pytest.mark.parametrize("text", [
        "Romans 0:1",       # zero chapter
        "Romans 8",         # chapter only
        "Romans 8:",        # no verse list
        "Romans 8:0",       # zero verse
        "Romans 8:30-28",   # inverted range
        "Romans 8:x",       # non-numeric verse
        "Romans 8:-3",      # missing range start
        "",
        "   ",
        ";;",
        "Romans " + "9" * 5000 + ":1",   # oversized chapter
        "Romans 8:" + "9" * 5000,        # oversized verse
        "Romans 8:1-999999999",          # oversized range
    ])
    def test_dropped_expressions(self, text):
        assert parse_references(text) == []

    def test_bad_item_dropped_alone(self):
        """A bad item inside a verse list does not drop its neighbours."""
        refs = parse_references("Romans 8:28, 0, 32-30, 31")
        assert refs[0].verses == (28, 31)

    def test_single_verse_range(self):
        """A range whose bounds are equal yields one verse."""
        assert parse_references("Romans 8:28-28")[0].verses == (28,)

    def test_range_length_limit(self):
        """Ranges up to MAX_RANGE_LENGTH verses expand; longer ones drop alone."""
        refs = parse_references(f"Psalms 119:1-{MAX_RANGE_LENGTH}, 5")
        assert len(refs[0].verses) == MAX_RANGE_LENGTH + 1

        refs = parse_references(f"Psalms 119:1-{MAX_RANGE_LENGTH + 1}, 5")
        assert refs[0].verses == (5,)

    def test_lenient_numeric_fields(self):
        """Trailing characters after the digits are ignored."""
        refs = parse_references("Romans 8:28., 30)")
        assert refs[0].verses == (28, 30)


class TestLeadingInt:
    """Tests for the lenient integer reader."""

    @pytest.mark.parametrize("text,expected", [
        ("28", 28),
        (" 28.", 28),
        ("30)", 30),
        ("-3", -3),
        ("+4", 4),
        ("123456789", 123456789),
        ("1234567890", None),
        ("9" * 5000, None),
        ("x1", None),
        ("", None),
    ])
    def test_leading_int(self, text, expected):
        assert leading_int(text) == expected


class TestParsedReference:
    """Tests for the ParsedReference value type."""

    def test_descriptor(self):
        ref = ParsedReference("Romans", 8, (28, 29))
        assert ref.descriptor == "Romans 8:28,29"

    def test_to_dict(self):
        ref = ParsedReference("Romans", 8, (28, 29))
        assert ref.to_dict() == {"book_name": "Romans", "chapter": 8, "verses": [28, 29]}

    def test_parse_reference_single_expression(self):
        assert parse_reference(" Job 32:6 ") == ParsedReference("Job", 32, (6,))
        assert parse_reference("not a citation") is None


class TestReferenceSources:
    """Tests for the shared parsing funnel."""

    def test_parse_all_concatenates(self):
        refs = parse_all(["Job 1:1", "Gen 1:1; Gen 1:2"])
        assert [r.descriptor for r in refs] == ["Job 1:1", "Genesis 1:1", "Genesis 1:2"]

    def test_parse_source_uses_protocol(self):
        class StaticSource:
            def traditional_references(self):
                return ["Rom 8:28", "Foo 1:1"]

        source = StaticSource()
        assert isinstance(source, TraditionalReferenceSource)
        assert parse_source(source) == [ParsedReference("Romans", 8, (28,))]

    def test_format_then_reparse(self):
        text = format_reference("1 Corinthians", 13, 4)
        assert text == "1 Corinthians 13:4"
        assert parse_references(text) == [ParsedReference("1 Corinthians", 13, (4,))]
