"""
Text tokenization for the Bayesian classifier, dood!

Splits raw text into maximal runs of word characters. A word character is a
letter, a decimal digit, connector punctuation (like "_") or a non-spacing
mark, so accented and combined characters stay inside their word.
"""

import sys
import unicodedata
from typing import FrozenSet, Iterator, Optional

# Unicode general categories that belong to a token besides letters
_TOKEN_CATEGORIES = frozenset({"Nd", "Pc", "Mn"})

DEFAULT_STOP_WORDS: FrozenSet[str] = frozenset(
    {
        "a",
        "and",
        "the",
        "me",
        "i",
        "of",
        "if",
        "it",
        "is",
        "they",
        "there",
        "but",
        "or",
        "to",
        "this",
        "you",
        "in",
        "your",
        "on",
        "for",
        "as",
        "are",
        "that",
        "with",
        "have",
        "be",
        "at",
        "was",
        "so",
        "out",
        "not",
        "an",
    }
)


def isTokenChar(char: str) -> bool:
    """Check if character belongs to a token (letter, digit, connector or mark)"""
    category = unicodedata.category(char)
    return category[0] == "L" or category in _TOKEN_CATEGORIES


class WordTokenizer:
    """
    Lazily tokenizes text into words

    Tokens are produced left to right and interned, so repeated words across a
    large training corpus share one string object. Each call to tokenize()
    starts a fresh scan.
    """

    def tokenize(self, text: Optional[str]) -> Iterator[str]:
        """
        Yield tokens from text

        Args:
            text: Text to tokenize, None is treated as empty text

        Yields:
            Tokens in the order they appear in text
        """
        if not text:
            return

        start = -1
        for pos, char in enumerate(text):
            if isTokenChar(char):
                if start < 0:
                    start = pos
            elif start >= 0:
                yield sys.intern(text[start:pos])
                start = -1

        if start >= 0:
            yield sys.intern(text[start:])
