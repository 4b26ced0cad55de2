import pytest
import pytest_asyncio
import fakeredis.aioredis
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.cache_store import RedisCacheStore
from src.core.result import Return


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.get_by_active_reset_token = AsyncMock()
    uow.users.clear_reset_token = AsyncMock(return_value=True)
    return uow


@pytest.fixture
def mock_blacklist():
    blacklist = MagicMock()
    blacklist.is_blacklisted = AsyncMock(return_value=Return.ok(False))
    blacklist.invalidate = AsyncMock(return_value=Return.ok(None))
    return blacklist


@pytest_asyncio.fixture
async def redis_client():
    client = fakeredis.aioredis.FakeRedis(decode_responses=True)
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def cache_store(redis_client):
    return RedisCacheStore(client=redis_client)
