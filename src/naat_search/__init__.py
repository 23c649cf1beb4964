"""Relevance-ranked search over naat catalogues."""

from naat_search.analyzer import QueryAnalyzer, STOP_WORDS, extract_words, normalize_text
from naat_search.search import highlight_matches, search_items

__all__ = [
    "QueryAnalyzer",
    "STOP_WORDS",
    "extract_words",
    "normalize_text",
    "highlight_matches",
    "search_items",
]
