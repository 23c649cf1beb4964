"""
Query Analyzer

Normalizes and tokenizes naat titles and search queries.
Used by the scorer, the ranker and the highlighter.
"""

import re
from typing import Iterable

# Urdu/Hindi (transliterated) and English connector words
STOP_WORDS: frozenset[str] = frozenset(
    {
        "e",
        "ke",
        "ka",
        "ki",
        "ko",
        "se",
        "me",
        "mein",
        "par",
        "pe",
        "aur",
        "ya",
        "hai",
        "hain",
        "tha",
        "the",
        "thi",
        "ho",
        "he",
        "a",
        "an",
        "and",
        "or",
        "of",
        "in",
        "on",
        "at",
        "to",
        "for",
    }
)

MIN_WORD_LENGTH = 2

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Lowercase text, turn punctuation into spaces and collapse whitespace.

    Example: "Hai Kalam-e-Ilah!" -> "hai kalam e ilah"
    """
    text = _NON_WORD.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def fold_text(text: str) -> str:
    """
    Lowercase text and blank out punctuation without changing its length.

    Offsets in the result are offsets in the input, which lets callers map
    matches back onto the original string.
    """
    folded = text.lower()
    if len(folded) != len(text):
        # Some characters expand when lowercased (e.g. "İ"); keep those as is
        folded = "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in text)
    return _NON_WORD.sub(" ", folded)


class QueryAnalyzer:
    def __init__(
        self,
        stop_words: Iterable[str] = STOP_WORDS,
        min_length: int = MIN_WORD_LENGTH,
    ):
        self.stop_words = frozenset(stop_words)
        self.min_length = min_length

    def normalize(self, text: str) -> str:
        return normalize_text(text)

    def extract_words(self, text: str) -> list[str]:
        """
        Extract the significant words of a text, in order.

        Words shorter than min_length and stop words are dropped, so a
        query made only of connectors yields an empty list.
        """
        words = self.normalize(text).split(" ")
        return [
            word
            for word in words
            if len(word) >= self.min_length and word not in self.stop_words
        ]


# Global instance
analyzer = QueryAnalyzer()


def extract_words(text: str) -> list[str]:
    """Tokenize with the default stop words."""
    return analyzer.extract_words(text)
