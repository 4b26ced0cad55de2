"""
Redis-backed CacheStore.

A bucket maps to a Redis hash and a field to a hash field. Every set
rewrites the hash TTL, so all fields of a bucket expire together, measured
from the most recent write to any of them.

No operation raises. A missing client, a Redis error or a timeout is
logged and returned as a DEPENDENCY error Result.
"""

import asyncio
import logging
from datetime import timedelta
from typing import Awaitable, Callable, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.app.services.cache_store import CacheStore
from src.core.result import Error, ErrorKind, Result, Return
from src.domain.constants import CACHE_EXPIRATION

logger = logging.getLogger(__name__)


def _cache_error(code: str, message: str) -> Error:
    return Error(code, message, ErrorKind.DEPENDENCY)


class RedisCacheStore(CacheStore):
    """
    CacheStore implementation over redis.asyncio.

    Lifecycle:
        store = RedisCacheStore(client_factory=lambda: create_redis_client(config))
        await store.connect()   # before serving traffic
        await store.ping()      # health checks
        await store.close()     # on shutdown

    Calls made before connect() completes get a CACHE_NOT_INITIALIZED error.
    """

    def __init__(
        self,
        client: Optional[Redis] = None,
        client_factory: Optional[Callable[[], Redis]] = None,
        ttl: timedelta = CACHE_EXPIRATION,
        timeout: float = 2.0,
    ):
        self._client = client
        self._client_factory = client_factory
        self.ttl_seconds = int(ttl.total_seconds())
        self.timeout = timeout

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    async def connect(self) -> bool:
        """
        Create the client (if needed) and check connectivity.

        A failed check is logged, not raised: the service keeps running with
        the cache degraded and the client keeps reconnecting on later calls.
        """
        if self._client is None:
            if self._client_factory is None:
                logger.error("Redis client is not initialized and no factory was provided")
                return False
            self._client = self._client_factory()

        if await self.ping():
            logger.info("Redis cache connected")
            return True

        logger.critical("Redis connection failed after max reconnection attempts; cache degraded")
        return False

    async def close(self) -> None:
        if self._client is None:
            return
        try:
            await self._client.aclose()
        except RedisError as e:
            logger.error(f"Error closing Redis client: {e}")
        finally:
            self._client = None

    async def ping(self) -> bool:
        if self._client is None:
            return False
        try:
            return bool(await asyncio.wait_for(self._client.ping(), timeout=self.timeout))
        except (RedisError, OSError, asyncio.TimeoutError) as e:
            logger.error(f"Redis ping failed: {e!r}")
            return False

    async def _run(self, operation: str, call: Callable[[Redis], Awaitable]) -> Result:
        if self._client is None:
            logger.error("Redis client is not initialized")
            return Return.err(
                _cache_error("CACHE_NOT_INITIALIZED", "Cache client is not initialized")
            )
        try:
            value = await asyncio.wait_for(call(self._client), timeout=self.timeout)
            return Return.ok(value)
        except asyncio.TimeoutError:
            logger.error(f"Redis {operation} timed out after {self.timeout}s")
            return Return.err(_cache_error("CACHE_TIMEOUT", f"Cache {operation} timed out"))
        except (RedisError, OSError) as e:
            logger.error(f"Redis {operation} failed: {e!r}")
            return Return.err(_cache_error("CACHE_UNAVAILABLE", f"Cache {operation} failed"))

    async def set(self, bucket: str, field: str, value: str) -> Result[None]:
        async def call(client: Redis):
            async with client.pipeline(transaction=True) as pipe:
                pipe.hset(bucket, field, value)
                pipe.expire(bucket, self.ttl_seconds)
                await pipe.execute()

        result = await self._run("set", call)
        if result.is_ok():
            logger.info(f"{field} cache data created")
        return result

    async def get(self, bucket: str, field: str) -> Result[Optional[str]]:
        return await self._run("get", lambda client: client.hget(bucket, field))

    async def delete(self, bucket: str, field: str) -> Result[None]:
        async def call(client: Redis):
            await client.hdel(bucket, field)

        result = await self._run("delete", call)
        if result.is_ok():
            logger.info(f"{field} cache data deleted")
        return result
