"""
Redis client factory.

Two connection profiles, chosen by the environment discriminator:
- "test": local, unsecured endpoint from REDIS_URL
- anything else: credentialed endpoint over mutual TLS

Both reconnect with capped exponential backoff and give up after
REDIS_MAX_RETRIES attempts.
"""

from redis.asyncio import Redis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError


def _retry_policy(config) -> Retry:
    return Retry(
        ExponentialBackoff(cap=config.REDIS_BACKOFF_CAP, base=config.REDIS_BACKOFF_BASE),
        config.REDIS_MAX_RETRIES,
    )


def create_redis_client(config) -> Redis:
    common = dict(
        decode_responses=True,
        retry=_retry_policy(config),
        retry_on_error=[ConnectionError, TimeoutError],
        socket_timeout=config.CACHE_TIMEOUT_SECONDS,
        socket_connect_timeout=config.CACHE_TIMEOUT_SECONDS,
    )

    if config.ENVIRONMENT == "test":
        return Redis.from_url(config.REDIS_URL, **common)

    return Redis(
        host=config.REDIS_HOST,
        port=config.REDIS_PORT,
        username=config.REDIS_USERNAME,
        password=config.REDIS_PASSWORD,
        ssl=True,
        ssl_keyfile=config.REDIS_TLS_KEYFILE,
        ssl_certfile=config.REDIS_TLS_CERTFILE,
        ssl_ca_certs=config.REDIS_TLS_CA_CERTS,
        **common,
    )
