"""
Token Blacklist

Tracks reset tokens that must never be honored again, backed by the
bucketed cache. Entries are keyed by the SHA-256 hash of the token so raw
tokens never reach the cache.
"""

import logging
from datetime import timedelta

from src.app.services.cache_store import CacheStore
from src.app.utils.tokens import hash_token
from src.core.result import Result, Return
from src.domain.constants import CACHE_EXPIRATION, RESET_TOKEN_EXPIRATION

logger = logging.getLogger(__name__)

BLACKLIST_BUCKET = "blacklist"


class TokenBlacklist:
    """
    Revocation list for reset tokens.

    Business Rules:
    - Membership alone is the signal; the stored value is a marker
    - invalidate is idempotent
    - Retention (cache bucket TTL) must cover the whole token validity window,
      so a token can never outlive its own blacklist entry
    """

    def __init__(
        self,
        cache_store: CacheStore,
        retention: timedelta = CACHE_EXPIRATION,
        token_lifetime: timedelta = RESET_TOKEN_EXPIRATION,
    ):
        if retention < token_lifetime:
            raise ValueError(
                f"Blacklist retention ({retention}) is shorter than the token "
                f"validity window ({token_lifetime})"
            )
        self.cache_store = cache_store

    async def invalidate(self, token: str) -> Result[None]:
        result = await self.cache_store.set(BLACKLIST_BUCKET, hash_token(token), "1")
        if result.is_err():
            logger.error(f"Failed to blacklist reset token: {result.error.message}")
            return result
        return Return.ok(None)

    async def is_blacklisted(self, token: str) -> Result[bool]:
        result = await self.cache_store.get(BLACKLIST_BUCKET, hash_token(token))
        if result.is_err():
            return Return.err(result.error)
        return Return.ok(result.value is not None)
