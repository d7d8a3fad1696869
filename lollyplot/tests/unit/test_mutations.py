"""
Unit tests for the mutation change parser

Covers position extraction, @count and #color suffixes, and the
synonymous-change color rule.
"""
import pytest

from lollyplot.config import StyleConfig
from lollyplot.mutations import (
    MutationParseError,
    is_synonymous,
    parse_mutation,
    parse_mutations,
)


class TestParseMutation:
    """Tests for parse_mutation"""

    def test_missense(self):
        """Plain change gets position, count 1 and the mutation color"""
        descriptor = parse_mutation("R273C")
        assert descriptor.label == "R273C"
        assert descriptor.position == 273
        assert descriptor.count == 1
        assert descriptor.color == StyleConfig().mutation_color

    def test_count_suffix(self):
        """@count sets the multiplicity and is dropped from the label"""
        descriptor = parse_mutation("G50C@2")
        assert descriptor.label == "G50C"
        assert descriptor.position == 50
        assert descriptor.count == 2

    def test_color_suffix(self):
        """#color overrides the default and is normalized to lowercase"""
        descriptor = parse_mutation("R175H#00AA00")
        assert descriptor.label == "R175H"
        assert descriptor.color == "#00aa00"

    @pytest.mark.parametrize("change", ["R175H@3#00aa00", "R175H#00aa00@3"])
    def test_count_and_color(self, change):
        """Count and color are accepted in either order"""
        descriptor = parse_mutation(change)
        assert descriptor.label == "R175H"
        assert descriptor.position == 175
        assert descriptor.count == 3
        assert descriptor.color == "#00aa00"

    @pytest.mark.parametrize("change", ["R273R", "R273=", "Arg273Arg", "p.R273R", "R273"])
    def test_synonymous_color(self, change):
        """Changes keeping the residue use the synonymous color"""
        assert parse_mutation(change).color == StyleConfig().synonymous_color

    def test_custom_style_colors(self):
        """Default colors come from the style"""
        style = StyleConfig(mutation_color="#123456")
        assert parse_mutation("A10T", style).color == "#123456"

    def test_whitespace_is_stripped(self):
        """Surrounding whitespace is ignored"""
        assert parse_mutation("  A10T \n").label == "A10T"

    def test_missing_position_raises(self):
        """Change strings without digits are rejected"""
        with pytest.raises(MutationParseError):
            parse_mutation("ABC")

    def test_bad_count_raises(self):
        """Non-numeric counts are rejected"""
        with pytest.raises(MutationParseError):
            parse_mutation("R273C@x")

    def test_parse_error_is_value_error(self):
        """Callers catching ValueError also catch parse errors"""
        with pytest.raises(ValueError):
            parse_mutation("no-position")


class TestIsSynonymous:
    """Tests for is_synonymous"""

    def test_identical_residue(self):
        assert is_synonymous("R", "R")

    def test_three_letter_residue(self):
        """Three-letter names compare by one-letter code"""
        assert is_synonymous("Arg", "R")

    def test_different_residue(self):
        assert not is_synonymous("R", "C")

    def test_empty_and_equals(self):
        assert is_synonymous("R", "")
        assert is_synonymous("R", "=")


class TestParseMutations:
    """Tests for parse_mutations"""

    def test_order_preserved(self):
        descriptors = parse_mutations(["G50C", "A10T"])
        assert [d.label for d in descriptors] == ["G50C", "A10T"]

    def test_blank_entries_skipped(self):
        """Empty and whitespace-only entries are ignored"""
        descriptors = parse_mutations(["A10T", "", "   ", "G50C"])
        assert len(descriptors) == 2
