"""
System Router

Health check endpoints:
- /health: Simple health for load balancers
- /api/v1/health: Same, under the API prefix
"""

from fastapi import APIRouter, Depends

from naat_search.api.deps import get_search_service
from naat_search.services.search import SearchService

# Router for /api/v1 prefix
router = APIRouter()

# Router for root-level health endpoints
root_router = APIRouter()


def _health(service: SearchService) -> dict:
    return {"status": "ok", "naats": len(service.catalog)}


@root_router.get("/health")
async def health(service: SearchService = Depends(get_search_service)):
    return _health(service)


@router.get("/health")
async def api_health(service: SearchService = Depends(get_search_service)):
    return _health(service)
