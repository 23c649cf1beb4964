"""Search API Router - JSON endpoints for naat search."""

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from naat_search.api.deps import get_search_service
from naat_search.api.middleware.rate_limiter import limiter, search_rate_limit
from naat_search.services.search import SearchService

logger = logging.getLogger(__name__)


router = APIRouter()


def _parse_pos_int(value: str | None, default: int | None, *, min_v: int = 1) -> int | None:
    try:
        x = int(value) if value is not None else default
    except ValueError:
        x = default
    return max(x, min_v) if x is not None else None


@router.get("/search")
@limiter.limit(search_rate_limit)
async def api_search(
    request: Request,
    q: str | None = None,
    channel_id: str | None = None,
    limit: str | None = None,
    page: str | None = None,
    min_score: str | None = None,
    service: SearchService = Depends(get_search_service),
):
    """Search naats by title, falling back to channel name."""
    result = service.search(
        q,
        channel_id=channel_id or None,
        limit=_parse_pos_int(limit, None),
        page=_parse_pos_int(page, 1),
        min_score=_parse_pos_int(min_score, None, min_v=0),
    )
    return JSONResponse(result.to_dict())


@router.get("/channels")
async def api_channels(service: SearchService = Depends(get_search_service)):
    return JSONResponse([c.model_dump() for c in service.catalog.channels()])
