"""
Tiered Relevance Scoring

Scores a single text against a query by match quality:
exact phrase > all words in order > all words in any order.
"""

from dataclasses import dataclass

from naat_search.analyzer import QueryAnalyzer, analyzer as default_analyzer


@dataclass(frozen=True)
class ScoringConfig:
    """Score tiers and field weights."""

    exact_phrase: int = 100  # Normalized query is a substring
    in_order: int = 80  # All words present, query order
    any_order: int = 60  # All words present
    secondary_weight: float = 0.5  # Multiplier for channel name matches


DEFAULT_CONFIG = ScoringConfig()


class TieredScorer:
    """
    Tiered scoring implementation.

    score(text, q):
    - exact_phrase if normalize(q) occurs in normalize(text)
    - 0 if any query word is not a substring of normalize(text)
    - in_order if every word is found after the previous one
    - any_order otherwise

    Word presence is plain substring containment, not word-boundary
    matching, so "kalam" matches inside "kalamullah".
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        analyzer: QueryAnalyzer | None = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.analyzer = analyzer or default_analyzer

    def score(self, text: str, tokens: list[str], raw_query: str) -> int:
        normalized_text = self.analyzer.normalize(text)
        normalized_query = self.analyzer.normalize(raw_query)

        # Phrase match must win over any token-level tie
        if normalized_query in normalized_text:
            return self.config.exact_phrase

        if not all(token in normalized_text for token in tokens):
            return 0

        if self._in_order(normalized_text, tokens):
            return self.config.in_order

        return self.config.any_order

    def _in_order(self, normalized_text: str, tokens: list[str]) -> bool:
        """Greedy left-to-right walk; each word must start after the last."""
        last_index = -1
        for token in tokens:
            index = normalized_text.find(token, last_index + 1)
            if index == -1:
                return False
            last_index = index
        return True


_default_scorer = TieredScorer()


def score_text(
    text: str,
    tokens: list[str],
    raw_query: str,
    analyzer: QueryAnalyzer | None = None,
) -> int:
    """Score text with the default tiers (0, 60, 80 or 100)."""
    if analyzer is None:
        return _default_scorer.score(text, tokens, raw_query)
    return TieredScorer(analyzer=analyzer).score(text, tokens, raw_query)
