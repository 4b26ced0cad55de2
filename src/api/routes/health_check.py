from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.app.services.cache_store import CacheStore
from src.depends import get_cache_store

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    cache: str


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check(cache_store: CacheStore = Depends(get_cache_store)):
    """
    Liveness and cache status.

    The service stays up when the cache is unreachable, so this reports
    "degraded" rather than failing.
    """
    cache_ok = await cache_store.ping()
    return HealthResponse(
        status="ok" if cache_ok else "degraded",
        cache="up" if cache_ok else "down",
    )
