import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from slowapi.errors import RateLimitExceeded

from naat_search.core.config import Environment, settings
from naat_search.exceptions import CatalogError
from naat_search.api.routers import search_api, system
from naat_search.api.middleware.rate_limiter import limiter, rate_limit_exceeded_handler
from naat_search.api.middleware.request_logging import RequestLoggingMiddleware
from naat_search.services.catalog import NaatCatalog
from naat_search.services.search import SearchService

logger = logging.getLogger(__name__)


def load_catalog() -> NaatCatalog:
    """Load the catalogue; outside production a missing export yields an empty one."""
    try:
        return NaatCatalog.from_file(settings.NAATS_FILE)
    except CatalogError:
        if settings.ENVIRONMENT == Environment.PRODUCTION:
            raise
        logger.warning(
            f"Could not load catalogue from {settings.NAATS_FILE}; starting empty",
            exc_info=True,
        )
        return NaatCatalog()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.LOG_LEVEL)
    app.state.search_service = SearchService(load_catalog(), settings)
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Naat Search API",
    version="0.1.0",
    description="Relevance-ranked search over the naat catalogue.",
    openapi_tags=[
        {"name": "search", "description": "Search endpoints"},
        {"name": "system", "description": "Health checks"},
    ],
)

# --- Rate Limiter ---
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# --- Middleware (order matters: last added = first executed) ---
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(system.root_router, tags=["system"])
app.include_router(system.router, prefix="/api/v1", tags=["system"])
app.include_router(search_api.router, prefix="/api/v1", tags=["search"])


if __name__ == "__main__":
    uvicorn.run(
        "naat_search.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
