"""
Match Highlighting for Search Results

Splits a title into matched / unmatched segments for rendering.
"""

import html
from dataclasses import dataclass

from naat_search.analyzer import QueryAnalyzer, analyzer as default_analyzer, fold_text


@dataclass
class MatchSpan:
    """Half-open [start, end) character range."""

    start: int
    end: int


@dataclass
class HighlightSegment:
    """A piece of the original text."""

    text: str
    is_match: bool


def find_spans(folded_text: str, tokens: list[str]) -> list[MatchSpan]:
    """Find every occurrence of every token, overlapping ones included."""
    spans = []
    for token in tokens:
        search_from = 0
        while True:
            index = folded_text.find(token, search_from)
            if index == -1:
                break
            spans.append(MatchSpan(index, index + len(token)))
            search_from = index + 1
    return spans


def merge_spans(spans: list[MatchSpan]) -> list[MatchSpan]:
    """Sort spans and merge the ones that touch or overlap."""
    merged: list[MatchSpan] = []
    for span in sorted(spans, key=lambda s: s.start):
        if merged and span.start <= merged[-1].end:
            merged[-1].end = max(merged[-1].end, span.end)
        else:
            merged.append(MatchSpan(span.start, span.end))
    return merged


def highlight_matches(
    text: str,
    query: str,
    analyzer: QueryAnalyzer | None = None,
) -> list[HighlightSegment]:
    """
    Segment text by query word matches.

    Args:
        text: The original text (e.g. a naat title).
        query: Raw search query.
        analyzer: Tokenizer for the query words.

    Returns:
        Segments in order; joining their text gives back the input.
    """
    analyzer = analyzer or default_analyzer

    if not query.strip():
        return [HighlightSegment(text, False)]

    tokens = analyzer.extract_words(query)
    if not tokens:
        return [HighlightSegment(text, False)]

    spans = merge_spans(find_spans(fold_text(text), tokens))

    segments = []
    current = 0
    for span in spans:
        if current < span.start:
            segments.append(HighlightSegment(text[current : span.start], False))
        segments.append(HighlightSegment(text[span.start : span.end], True))
        current = span.end

    if current < len(text):
        segments.append(HighlightSegment(text[current:], False))

    return segments


def highlight_html(text: str, query: str, tag: str = "mark") -> str:
    """
    Render highlighted text as HTML.

    Matched runs are wrapped in <mark> (or the given tag); all text is escaped.
    """
    parts = []
    for segment in highlight_matches(text, query):
        escaped = html.escape(segment.text)
        if segment.is_match:
            parts.append(f"<{tag}>{escaped}</{tag}>")
        else:
            parts.append(escaped)
    return "".join(parts)
