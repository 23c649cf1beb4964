"""
Naat Search Engine

Ranks an in-memory collection against a query.
Every call re-tokenizes the query and scans the whole collection;
there is no index.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Protocol, TypeVar

from naat_search.analyzer import QueryAnalyzer, analyzer as default_analyzer
from naat_search.search.scoring import DEFAULT_CONFIG, ScoringConfig, TieredScorer
from naat_search.search.snippet import HighlightSegment, highlight_matches

logger = logging.getLogger(__name__)

DEFAULT_MIN_SCORE = 60


class SearchableItem(Protocol):
    """Anything with a title; channel_name is optional."""

    title: str


T = TypeVar("T")

# Type alias for field accessors
FieldGetter = Callable[[Any], str | None]


def get_title(item: SearchableItem | Mapping[str, Any]) -> str | None:
    if isinstance(item, Mapping):
        return item.get("title")
    return getattr(item, "title", None)


def get_channel_name(item: Any) -> str | None:
    # Backend documents use camelCase keys
    if isinstance(item, Mapping):
        return item.get("channel_name") or item.get("channelName")
    return getattr(item, "channel_name", None)


@dataclass
class ScoredItem(Generic[T]):
    """An item paired with its effective score."""

    item: T
    score: float


class SearchEngine:
    """
    Relevance search over caller-supplied collections.

    Scoring per item:
    - title score (0, 60, 80 or 100)
    - if the title scores 0, the channel name score * secondary_weight
    Items below min_score are dropped; the rest are sorted by score,
    keeping input order for equal scores.
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        analyzer: QueryAnalyzer | None = None,
        title_of: FieldGetter = get_title,
        secondary_of: FieldGetter = get_channel_name,
    ):
        """
        Initialize search engine.

        Args:
            config: Score tiers and channel weight
            analyzer: Tokenizer (owns the stop words)
            title_of: Returns the primary text of an item
            secondary_of: Returns the secondary text (channel name) or None
        """
        self.config = config or DEFAULT_CONFIG
        self.analyzer = analyzer or default_analyzer
        self.scorer = TieredScorer(self.config, self.analyzer)
        self._title_of = title_of
        self._secondary_of = secondary_of

    def search(
        self,
        items: Iterable[T],
        query: str,
        *,
        search_in_channel: bool | None = True,
        min_score: float | None = DEFAULT_MIN_SCORE,
    ) -> list[T]:
        """
        Return matching items, best first.

        Args:
            items: Collection to search (not modified)
            query: Raw user query
            search_in_channel: Fall back to the channel name when the title misses
            min_score: Inclusive score floor (None or non-numeric: default)

        Returns:
            The original item objects, filtered and sorted
        """
        min_score = _coerce_min_score(min_score)
        if search_in_channel is None:
            search_in_channel = True

        if not query.strip():
            return []

        tokens = self.analyzer.extract_words(query)
        if not tokens:
            return []

        scored = [
            result
            for result in (
                self._score_item(item, tokens, query, search_in_channel)
                for item in items
            )
            if result.score >= min_score
        ]

        # sorted() is stable: equal scores keep collection order
        scored = sorted(scored, key=lambda r: r.score, reverse=True)

        logger.debug(
            "search query=%r tokens=%s matched=%d", query, tokens, len(scored)
        )
        return [result.item for result in scored]

    def highlight(self, text: str, query: str) -> list[HighlightSegment]:
        return highlight_matches(text, query, analyzer=self.analyzer)

    def _score_item(
        self,
        item: T,
        tokens: list[str],
        query: str,
        search_in_channel: bool,
    ) -> ScoredItem[T]:
        score: float = self.scorer.score(self._title_of(item) or "", tokens, query)

        # Channel matches only count when the title misses entirely
        if score == 0 and search_in_channel:
            secondary = self._secondary_of(item)
            if secondary:
                score = (
                    self.scorer.score(secondary, tokens, query)
                    * self.config.secondary_weight
                )

        return ScoredItem(item=item, score=score)


def _coerce_min_score(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return DEFAULT_MIN_SCORE
    try:
        return float(value)
    except (TypeError, ValueError):
        return DEFAULT_MIN_SCORE


_default_engine = SearchEngine()


def search_items(
    items: Iterable[T],
    query: str,
    *,
    search_in_channel: bool | None = True,
    min_score: float | None = DEFAULT_MIN_SCORE,
    title_of: FieldGetter = get_title,
    secondary_of: FieldGetter = get_channel_name,
    analyzer: QueryAnalyzer | None = None,
    config: ScoringConfig | None = None,
) -> list[T]:
    """
    Search items by title (and channel name).

    The shared default engine is used unless an accessor, analyzer or
    scoring config is given, in which case a one-off engine is built.

    Example:
        search_items(naats, "kalam shamsudduha", min_score=80)
    """
    engine = _default_engine
    if (
        title_of is not get_title
        or secondary_of is not get_channel_name
        or analyzer is not None
        or config is not None
    ):
        engine = SearchEngine(
            config=config,
            analyzer=analyzer,
            title_of=title_of,
            secondary_of=secondary_of,
        )
    return engine.search(
        items, query, search_in_channel=search_in_channel, min_score=min_score
    )
