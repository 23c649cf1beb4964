"""
Naat Search Service

Runs the search engine over the catalogue and pages the results.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any

from naat_search.core.config import Settings, settings as default_settings
from naat_search.models import Naat
from naat_search.search import HighlightSegment, SearchEngine, highlight_matches
from naat_search.services.catalog import NaatCatalog

logger = logging.getLogger(__name__)


@dataclass
class SearchHit:
    """A single search result."""

    naat: Naat
    highlights: list[HighlightSegment]

    def to_dict(self) -> dict[str, Any]:
        data = self.naat.model_dump()
        data["highlights"] = [
            {"text": s.text, "is_match": s.is_match} for s in self.highlights
        ]
        return data


@dataclass
class SearchResult:
    """Search results with metadata."""

    query: str
    total: int
    page: int
    per_page: int
    last_page: int
    hits: list[SearchHit] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "total": self.total,
            "page": self.page,
            "per_page": self.per_page,
            "last_page": self.last_page,
            "hits": [hit.to_dict() for hit in self.hits],
        }


class SearchService:
    def __init__(
        self,
        catalog: NaatCatalog,
        settings: Settings = default_settings,
        engine: SearchEngine | None = None,
    ):
        self.catalog = catalog
        self.settings = settings
        self.engine = engine or SearchEngine()

    def search(
        self,
        q: str | None,
        channel_id: str | None = None,
        limit: int | None = None,
        page: int = 1,
        min_score: float | None = None,
    ) -> SearchResult:
        """
        Search the catalogue.

        Args:
            q: Raw query (truncated to MAX_QUERY_LEN)
            channel_id: Restrict to one channel
            limit: Results per page (clamped to MAX_PER_PAGE)
            page: 1-based page (clamped to the last page)
            min_score: Score floor, DEFAULT_MIN_SCORE when None

        Returns:
            SearchResult with title highlights on each hit
        """
        started_at = time.perf_counter()

        query = (q or "").strip()[: self.settings.MAX_QUERY_LEN]
        per_page = min(max(limit or self.settings.RESULTS_LIMIT, 1), self.settings.MAX_PER_PAGE)
        page = min(max(page, 1), self.settings.MAX_PAGE)

        if not query:
            return self._empty_result(per_page)

        if min_score is None:
            min_score = self.settings.DEFAULT_MIN_SCORE

        matches = self.engine.search(
            self.catalog.naats(channel_id),
            query,
            search_in_channel=self.settings.SEARCH_IN_CHANNEL,
            min_score=min_score,
        )

        total = len(matches)
        last_page = max((total + per_page - 1) // per_page, 1)
        page = min(page, last_page)
        offset = (page - 1) * per_page

        hits = [
            SearchHit(
                naat=naat,
                highlights=highlight_matches(naat.title, query, self.engine.analyzer),
            )
            for naat in matches[offset : offset + per_page]
        ]

        latency_ms = int((time.perf_counter() - started_at) * 1000)
        logger.info(
            "Search completed",
            extra={
                "query": query,
                "channel_id": channel_id,
                "total": total,
                "latency_ms": latency_ms,
            },
        )

        return SearchResult(
            query=query,
            total=total,
            page=page,
            per_page=per_page,
            last_page=last_page,
            hits=hits,
        )

    def _empty_result(self, per_page: int, q: str = "") -> SearchResult:
        return SearchResult(query=q, total=0, page=1, per_page=per_page, last_page=1)
