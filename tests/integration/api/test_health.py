import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_with_cache_up(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "cache": "up"}


@pytest.mark.asyncio
async def test_health_with_cache_down(client: AsyncClient, cache_store):
    await cache_store.close()

    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "degraded", "cache": "down"}
