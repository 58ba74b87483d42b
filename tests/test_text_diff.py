"""Tests for the character-level text diff engine."""

from __future__ import annotations

import pytest

from checker.core.diff.formatters import PlainHighlighter, SideBySideFormatter
from checker.core.diff.text_diff import TextCompareOptions, TextDiffEngine
from checker.core.models import DiffTag, Segment, candidate_text, reference_text


@pytest.fixture
def engine() -> TextDiffEngine:
    return TextDiffEngine(formatter=SideBySideFormatter(PlainHighlighter()))


PAIRS = [
    ("", ""),
    ("", "new"),
    ("old", ""),
    ("abc", "abd"),
    ("hello\nworld\n", "hello\nthere\nworld\n"),
    ("1 2 3\n4 5 6\n", "1 2 3\n4 5 7"),
    ("same", "same"),
    ("line\r\n", "line\n"),
    ("ünïcödé", "unicode"),
]


class TestMatchRule:
    """Tests for matched/unmatched classification."""

    def test_identical_texts_match(self, engine):
        result = engine.compare("abc\n", "abc\n")
        assert result.matched
        assert result.segments == (Segment(DiffTag.EQUAL, "abc\n"),)

    def test_empty_texts_match(self, engine):
        """Two empty texts give no segments and still match."""
        result = engine.compare("", "")
        assert result.matched
        assert result.segments == ()

    @pytest.mark.parametrize("reference,candidate", [
        ("abc", "abd"),
        ("abc\n", "abc"),
        ("", " "),
        ("x", ""),
        ("a b", "a  b"),
    ])
    def test_any_byte_difference_is_mismatch(self, engine, reference, candidate):
        assert not engine.compare(reference, candidate).matched

    def test_is_match_requires_single_equal_segment(self):
        assert TextDiffEngine.is_match([])
        assert TextDiffEngine.is_match([Segment(DiffTag.EQUAL, "a")])
        assert not TextDiffEngine.is_match([Segment(DiffTag.INSERT, "a")])
        assert not TextDiffEngine.is_match([
            Segment(DiffTag.EQUAL, "a"),
            Segment(DiffTag.EQUAL, "b"),
        ])

    def test_identifier_is_kept(self, engine):
        assert engine.compare("a", "b", identifier=7).identifier == 7


class TestSegments:
    """Tests for the segment sequence produced by diff()."""

    def test_single_character_change(self, engine):
        assert engine.diff("abc", "abd") == [
            Segment(DiffTag.EQUAL, "ab"),
            Segment(DiffTag.DELETE, "c"),
            Segment(DiffTag.INSERT, "d"),
        ]

    def test_pure_insert(self, engine):
        assert engine.diff("", "xyz") == [Segment(DiffTag.INSERT, "xyz")]

    def test_pure_delete(self, engine):
        assert engine.diff("xyz", "") == [Segment(DiffTag.DELETE, "xyz")]

    @pytest.mark.parametrize("reference,candidate", PAIRS)
    def test_segments_reconstruct_both_texts(self, engine, reference, candidate):
        segments = engine.compare(reference, candidate).segments
        assert reference_text(segments) == reference
        assert candidate_text(segments) == candidate

    @pytest.mark.parametrize("reference,candidate", PAIRS)
    def test_no_empty_fragments(self, engine, reference, candidate):
        assert all(s.text for s in engine.diff(reference, candidate))

    def test_result_reconstruction_properties(self, engine):
        result = engine.compare("hello\nworld\n", "hello\nthere\nworld\n")
        assert result.reference_text == "hello\nworld\n"
        assert result.candidate_text == "hello\nthere\nworld\n"
        assert result.change_count == len(list(result.iter_changes())) > 0


class TestOptions:
    """Tests for TextCompareOptions."""

    def test_line_endings_are_exact_by_default(self, engine):
        assert not engine.compare("a\r\nb\r\n", "a\nb\n").matched

    def test_normalize_line_endings(self):
        engine = TextDiffEngine(TextCompareOptions(normalize_line_endings=True))
        assert engine.compare("a\r\nb\rc", "a\nb\nc").matched


class TestStatistics:
    """Tests for per-comparison statistics."""

    def test_counts(self, engine):
        stats = engine.compare("abc", "abd").statistics
        assert stats.unchanged_chars == 2
        assert stats.inserted_chars == 1
        assert stats.deleted_chars == 1
        assert stats.total_changes == 2
        assert stats.similarity_ratio == pytest.approx(4 / 6)
        assert str(stats) == "+1 -1 =2"

    def test_empty_similarity(self, engine):
        assert engine.compare("", "").statistics.similarity_ratio == 1.0


class TestPrecomputedSideBySide:
    """The side-by-side lines are built at comparison time."""

    def test_lines_are_stored(self, engine):
        result = engine.compare("abc", "abd")
        assert result.side_by_side.reference == ("ab[-c-]",)
        assert result.side_by_side.candidate == ("ab{+d+}",)

    def test_default_formatter_uses_background_colors(self):
        result = TextDiffEngine().compare("abc", "abd")
        assert result.side_by_side.reference == ("ab\033[41mc\033[0m",)
        assert result.side_by_side.candidate == ("ab\033[42md\033[0m",)
