"""
Unit tests for LabelFitter

Uses a fixed-width measure of 6px per character (12px font), so fits can
be checked by counting characters.
"""
import pytest

from lollyplot.layout import LabelFitter
from lollyplot.layout.labels import split_words, strip_punctuation


@pytest.fixture
def fitter(measure):
    return LabelFitter(measure, font_size=12.0, min_truncate_width=40.0)


class TestHelpers:
    """Tests for word splitting helpers"""

    def test_split_words(self):
        assert split_words("P53_tetramer") == ["P53", "tetramer"]

    def test_split_words_drops_empty(self):
        assert split_words("__a--b__") == ["a", "b"]

    def test_strip_punctuation(self):
        assert strip_punctuation("-abc_") == "abc"
        assert strip_punctuation("a-b") == "a-b"


class TestFit:
    """Tests for LabelFitter.fit"""

    def test_label_fits_verbatim(self, fitter):
        fitted = fitter.fit(200, "Kinase")
        assert fitted.text == "Kinase"
        assert fitted.method == "label"
        assert fitted.width == 36

    def test_description_preferred(self, fitter):
        """A fitting description beats the short label"""
        fitted = fitter.fit(300, "P53", "P53 DNA-binding domain")
        assert fitted.text == "P53 DNA-binding domain"
        assert fitted.method == "description"

    def test_description_too_long_falls_back(self, fitter):
        fitted = fitter.fit(60, "P53", "P53 DNA-binding domain")
        assert fitted.text == "P53"
        assert fitted.method == "label"

    def test_single_character_description_ignored(self, fitter):
        fitted = fitter.fit(100, "Kinase", "K")
        assert fitted.text == "Kinase"

    def test_fit_requires_strictly_less(self, fitter):
        """Text exactly as wide as the box does not fit"""
        fitted = fitter.fit(36, "Kinase")
        assert fitted is None or fitted.text != "Kinase"

    @pytest.mark.parametrize("label", ["Kinase", "P53_TAD", "SH2", "Immunoglobulin"])
    @pytest.mark.parametrize("width", [100, 250, 1000])
    def test_wide_box_is_verbatim(self, fitter, measure, label, width):
        """Labels narrower than the box are never altered"""
        assert measure(label) < width
        assert fitter.fit(width, label).text == label

    def test_last_word(self, fitter):
        """'P53_tetramer' degrades to its last word"""
        fitted = fitter.fit(70, "P53_tetramer")
        assert fitted.text == "..tetramer"
        assert fitted.method == "word"

    def test_middle_word(self, fitter):
        """Middle words are wrapped in ellipses on both sides"""
        fitted = fitter.fit(50, "Alpha_Beta_Gammalongword")
        assert fitted.text == "..Beta.."
        assert fitted.method == "word"

    def test_first_word(self, fitter):
        fitted = fitter.fit(40, "Abc_Defghijklmnop")
        assert fitted.text == "Abc.."
        assert fitted.method == "word"

    def test_truncated(self, fitter):
        """Labels without punctuation lose characters from the end"""
        fitted = fitter.fit(50, "Immunoglobulin")
        assert fitted.text == "Immuno.."
        assert fitted.method == "truncated"

    def test_word_preferred_over_truncation(self, fitter):
        """Whole words are tried before characters are cut"""
        fitted = fitter.fit(70, "P53_tetramer")
        assert fitted.method == "word"

    def test_narrow_box_not_truncated(self, fitter):
        """At or below the truncation threshold nothing is drawn"""
        assert fitter.fit(30, "Immunoglobulin") is None
        assert fitter.fit(40, "Immunoglobulin") is None

    def test_nothing_fits(self):
        """Very wide glyphs leave no candidate"""
        fitter = LabelFitter(lambda text, size: len(text) * 20.0, min_truncate_width=40.0)
        assert fitter.fit(41, "Immunoglobulin") is None

    def test_empty_label(self, fitter):
        assert fitter.fit(100, "") is None


class TestFitTruncated:
    """Tests for LabelFitter.fit_truncated"""

    def test_trailing_punctuation_stripped(self, measure):
        fitter = LabelFitter(measure, min_truncate_width=0.0)
        fitted = fitter.fit_truncated("Abc-defghijkl", 33)
        assert fitted.text == "Abc.."

    def test_below_threshold(self, fitter):
        assert fitter.fit_truncated("Immunoglobulin", 40) is None
