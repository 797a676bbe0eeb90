"""Tests for sort projections over canonical word order."""

import pytest

from random_words.core.projection import SortProjection
from random_words.models.word_models import SortMode


class TestSortProjection:
    """Test class for SortProjection."""

    WORDS = ["pear", "Apple", "fig", "apple"]

    def test_original_order(self):
        projection = SortProjection(self.WORDS, SortMode.ORIGINAL)
        assert projection.words == self.WORDS
        assert [projection.canonical_index(i) for i in range(4)] == [0, 1, 2, 3]

    def test_reverse_order(self):
        projection = SortProjection(self.WORDS, SortMode.REVERSE)
        assert projection.words == ["apple", "fig", "Apple", "pear"]
        assert projection.canonical_index(0) == 3

    def test_alphabetical_is_case_insensitive_and_stable(self):
        """Equal keys keep their canonical order."""
        projection = SortProjection(self.WORDS, SortMode.ALPHABETICAL)
        assert projection.words == ["Apple", "apple", "fig", "pear"]
        assert projection.canonical_index(0) == 1
        assert projection.canonical_index(1) == 3

    def test_reverse_alphabetical(self):
        projection = SortProjection(self.WORDS, SortMode.REVERSE_ALPHABETICAL)
        assert projection.words == ["pear", "fig", "Apple", "apple"]

    def test_duplicates_map_to_distinct_indices(self):
        """Each displayed duplicate refers to its own canonical slot."""
        projection = SortProjection(["b", "a", "b"], SortMode.ALPHABETICAL)
        assert projection.words == ["a", "b", "b"]
        assert projection.canonical_index(1) == 0
        assert projection.canonical_index(2) == 2

    def test_position_lookups(self):
        projection = SortProjection(self.WORDS, SortMode.REVERSE)
        assert projection.position_of("pear") == 3
        assert projection.position_of("missing") is None
        assert projection.position_of_index(0) == 3
        assert projection.position_of_index(9) is None

    def test_canonical_index_out_of_range(self):
        projection = SortProjection(["a"], SortMode.ORIGINAL)
        with pytest.raises(IndexError):
            projection.canonical_index(1)
        with pytest.raises(IndexError):
            projection.canonical_index(-1)

    def test_projection_does_not_alias_canonical(self):
        words = ["b", "a"]
        projection = SortProjection(words, SortMode.ALPHABETICAL)
        words.append("c")
        assert len(projection) == 2
        assert list(projection) == ["a", "b"]
        assert projection[1] == "b"


class TestSortMode:
    """Test sort mode parsing and labels."""

    def test_parse_value_and_label(self):
        assert SortMode.parse("reverse") is SortMode.REVERSE
        assert SortMode.parse("Reverse CSV Order") is SortMode.REVERSE
        assert SortMode.parse(" Alphabetical ") is SortMode.ALPHABETICAL
        assert SortMode.parse(SortMode.ORIGINAL) is SortMode.ORIGINAL

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            SortMode.parse("random")

    def test_labels(self):
        assert SortMode.ORIGINAL.label == "CSV Order"
        assert SortMode.REVERSE_ALPHABETICAL.label == "Reverse Alphabetical"
