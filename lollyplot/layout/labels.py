"""
Domain label fitting

Finds the most informative text that fits inside a domain box, degrading
from the long description to the short label, then to a single word of the
label, then to a truncated label.
"""
from __future__ import annotations
from typing import Callable, List, Optional
import unicodedata
import logging

from .types import FittedLabel

logger = logging.getLogger(__name__)

ELLIPSIS = '..'

MeasureFn = Callable[[str, float], float]


def is_punctuation(char: str) -> bool:
    """Whether char is in a Unicode punctuation category"""
    return unicodedata.category(char).startswith('P')


def split_words(text: str) -> List[str]:
    """Split text at punctuation, dropping empty tokens"""
    words: List[str] = []
    current: List[str] = []
    for char in text:
        if is_punctuation(char):
            if current:
                words.append(''.join(current))
            current = []
        else:
            current.append(char)
    if current:
        words.append(''.join(current))
    return words


def strip_punctuation(text: str) -> str:
    """Remove leading and trailing punctuation"""
    start, end = 0, len(text)
    while start < end and is_punctuation(text[start]):
        start += 1
    while end > start and is_punctuation(text[end - 1]):
        end -= 1
    return text[start:end]


class LabelFitter:
    """
    Fits domain labels into a pixel width

    Strategies, first success wins:
    1. 'description': the long description, verbatim
    2. 'label': the short label, verbatim
    3. 'word': one punctuation-delimited word of the label, trying the
       last word first (e.g. 'P53_tetramer' -> '..tetramer')
    4. 'truncated': the longest label prefix followed by '..'
    """

    def __init__(
        self,
        measure: MeasureFn,
        font_size: float = 12.0,
        min_truncate_width: float = 40.0
    ):
        """
        Initialize label fitter

        Args:
            measure: Text width function (text, font_size) -> px
            font_size: Font size of domain labels (px)
            min_truncate_width: Available width required before truncating
                                characters (px)
        """
        self.measure = measure
        self.font_size = font_size
        self.min_truncate_width = min_truncate_width

    def _fits(self, text: str, available_width: float) -> Optional[float]:
        width = self.measure(text, self.font_size)
        if width < available_width:
            return width
        return None

    def fit_word(self, label: str, available_width: float) -> Optional[FittedLabel]:
        """
        Fit a single word of a punctuated label

        Args:
            label: Short label containing punctuation
            available_width: Width available for text (px)

        Returns:
            FittedLabel, or None if no word fits
        """
        if not any(is_punctuation(c) for c in label):
            return None
        words = split_words(label)
        prefix = ELLIPSIS
        suffix = ''
        for i in range(len(words) - 1, -1, -1):
            if i == 0:
                prefix = ''
            candidate = prefix + words[i] + suffix
            width = self._fits(candidate, available_width)
            if width is not None:
                return FittedLabel(text=candidate, method='word', width=width)
            suffix = ELLIPSIS
        return None

    def fit_truncated(self, label: str, available_width: float) -> Optional[FittedLabel]:
        """
        Fit the longest prefix of label followed by '..'

        Args:
            label: Short label
            available_width: Width available for text (px)

        Returns:
            FittedLabel, or None if the box is too narrow or nothing fits
        """
        if available_width <= self.min_truncate_width:
            return None
        for size in range(len(label) - 2, 0, -1):
            stem = strip_punctuation(label[:size])
            if not stem:
                continue
            candidate = stem + ELLIPSIS
            width = self._fits(candidate, available_width)
            if width is not None:
                return FittedLabel(text=candidate, method='truncated', width=width)
        return None

    def fit(
        self,
        available_width: float,
        label: str,
        description: Optional[str] = None
    ) -> Optional[FittedLabel]:
        """
        Fit the best text into available_width

        Args:
            available_width: Box width minus text padding (px)
            label: Short label
            description: Optional long description

        Returns:
            FittedLabel, or None when no text fits
        """
        if description and len(description) > 1:
            width = self._fits(description, available_width)
            if width is not None:
                return FittedLabel(text=description, method='description', width=width)

        if not label:
            return None

        width = self._fits(label, available_width)
        if width is not None:
            return FittedLabel(text=label, method='label', width=width)

        fitted = self.fit_word(label, available_width) or self.fit_truncated(label, available_width)
        if fitted is None:
            logger.debug(f"No text fits {available_width:.1f}px for label '{label}'")
        return fitted
