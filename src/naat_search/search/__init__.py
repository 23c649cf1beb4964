"""Naat search engine: scoring, ranking and highlighting."""

from naat_search.search.scoring import ScoringConfig, TieredScorer, score_text
from naat_search.search.searcher import SearchEngine, SearchableItem, search_items
from naat_search.search.snippet import (
    HighlightSegment,
    MatchSpan,
    highlight_html,
    highlight_matches,
)

__all__ = [
    "ScoringConfig",
    "TieredScorer",
    "score_text",
    "SearchEngine",
    "SearchableItem",
    "search_items",
    "HighlightSegment",
    "MatchSpan",
    "highlight_html",
    "highlight_matches",
]
