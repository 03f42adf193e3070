"""Tests for the segmentation search."""

import pytest

from phonecode.dictionary import DictionaryIndex
from phonecode.encoding import extract_digits
from phonecode.models import LiteralDigit, Parse, WordSpan
from phonecode.search import segment


def spans(parse: Parse) -> list[tuple]:
    """Compact view of a parse for assertions."""
    out = []
    for seg in parse:
        if isinstance(seg, WordSpan):
            out.append(("w", seg.start, seg.end))
        else:
            out.append(("d", seg.position, seg.value))
    return out


def assert_valid(parse: Parse, length: int) -> None:
    """Segments cover [0, length) once, with no two literals in a row."""
    position = 0
    previous_literal = False
    for seg in parse:
        if isinstance(seg, WordSpan):
            assert seg.start == position
            assert seg.end > seg.start
            position = seg.end
            previous_literal = False
        else:
            assert seg.position == position
            assert not previous_literal
            position += 1
            previous_literal = True
    assert position == length


class TestSegment:
    """Tests for the depth-first segmentation."""

    def test_single_word_group(self):
        index = DictionaryIndex.build(["am", "ma", "if"])
        result = list(segment("5564", index))

        assert [spans(p) for p in result] == [[("w", 0, 2), ("w", 2, 4)]]

    def test_lone_digit_becomes_literal(self):
        index = DictionaryIndex.build([])
        result = list(segment("9", index))

        assert len(result) == 1
        assert result[0].segments == (LiteralDigit(0, 9),)

    def test_adjacent_literals_not_allowed(self):
        index = DictionaryIndex.build([])
        assert list(segment("99", index)) == []

    def test_empty_digits(self):
        index = DictionaryIndex.build(["an"])
        assert list(segment("", index)) == []

    def test_literal_between_words(self):
        index = DictionaryIndex.build(["a"])
        result = list(segment("535", index))

        assert [spans(p) for p in result] == [
            [("w", 0, 1), ("d", 1, 3), ("w", 2, 3)],
        ]

    def test_literal_at_start(self):
        index = DictionaryIndex.build(["a"])
        result = list(segment("35", index))

        assert [spans(p) for p in result] == [[("d", 0, 3), ("w", 1, 2)]]

    def test_no_literal_where_word_starts(self):
        """A word match at a position rules out a literal there."""
        index = DictionaryIndex.build(["a"])
        result = list(segment("5", index))

        assert [spans(p) for p in result] == [[("w", 0, 1)]]

    def test_literal_still_blocked_after_partial_words(self):
        """'55' has a word at 0 but nothing covers the trailing '1' then '1'."""
        index = DictionaryIndex.build(["am"])
        assert list(segment("5511", index)) == []

    def test_all_match_lengths_explored(self):
        """Both the short and the long key at a position are used."""
        index = DictionaryIndex.build(["a", "am"])
        result = list(segment("55", index))

        assert [spans(p) for p in result] == [
            [("w", 0, 2)],
            [("w", 0, 1), ("w", 1, 2)],
        ]

    def test_yield_order_is_last_in_first_out(self):
        index = DictionaryIndex.build(["a", "am"])
        result = list(segment("555", index))

        assert [spans(p) for p in result] == [
            [("w", 0, 2), ("w", 2, 3)],
            [("w", 0, 1), ("w", 1, 3)],
            [("w", 0, 1), ("w", 1, 2), ("w", 2, 3)],
        ]

    def test_is_lazy(self):
        index = DictionaryIndex.build(["a"])
        parses = segment("5" * 200, index)

        first = next(parses)
        assert len(first) == 200

    def test_long_run_without_words(self):
        """An uncovered run dies after one literal."""
        index = DictionaryIndex.build(["a"])
        assert list(segment("5" + "1" * 50, index)) == []

    def test_sample_decompositions(self, sample_index):
        result = list(segment(extract_digits("10/783--5"), sample_index))

        assert [spans(p) for p in result] == [
            [("w", 0, 3), ("w", 3, 5), ("d", 5, 5)],
            [("w", 0, 2), ("w", 2, 5), ("d", 5, 5)],
            [("w", 0, 2), ("w", 2, 4), ("w", 4, 6)],
        ]


class TestInvariants:
    """Every parse is a complete, valid cover of the digits."""

    @pytest.mark.parametrize(
        "number",
        ["5624-82", "4824", "04824", "381482", "10/783--5", "7884", "5555", "40215", "3838"],
    )
    def test_coverage_and_literals(self, sample_index, number):
        digits = extract_digits(number)
        for parse in segment(digits, sample_index):
            assert_valid(parse, len(digits))

    def test_coverage_with_dense_dictionary(self):
        index = DictionaryIndex.build(["a", "am", "mam", "e", "ee", "je"])
        digits = "5505510550"
        parses = list(segment(digits, index))

        assert parses
        for parse in parses:
            assert_valid(parse, len(digits))
        assert len({p.segments for p in parses}) == len(parses)
