"""
Reset Token Validator

Read-only checks shared by reset verification and reset submission.
"""

import logging
from datetime import datetime

from src.app.repositories.user_repository import IUserRepository
from src.app.services.blacklist import TokenBlacklist
from src.app.utils.tokens import hash_token
from src.core.result import Error, ErrorKind, Result, Return
from src.domain.entities import User

logger = logging.getLogger(__name__)

TOKEN_INVALID_MESSAGE = "Invalid or expired token"


def invalid_token_error() -> Error:
    # Blacklisted, expired and unknown tokens are deliberately indistinguishable
    return Error("INVALID_TOKEN", TOKEN_INVALID_MESSAGE, ErrorKind.AUTH)


class ResetTokenValidator:
    """
    Validates a presented reset token.

    Business Rules:
    - Empty token is rejected
    - Blacklisted token is rejected
    - Token must match a user's current reset token and its window must still be open
    - Validation never mutates state and may be repeated
    - When the blacklist cannot be read: fail-open by default (the token hash
      is cleared from the user record on consumption, so reuse is still
      blocked), fail-closed when configured
    """

    def __init__(self, blacklist: TokenBlacklist, fail_closed: bool = False):
        self.blacklist = blacklist
        self.fail_closed = fail_closed

    async def validate(self, users: IUserRepository, token: str) -> Result[User]:
        if not token:
            return Return.err(invalid_token_error())

        blacklisted = await self.blacklist.is_blacklisted(token)
        if blacklisted.is_err():
            if self.fail_closed:
                return Return.err(
                    Error(
                        "CACHE_UNAVAILABLE",
                        "Token revocation list is unavailable",
                        ErrorKind.DEPENDENCY,
                    )
                )
            logger.warning("Blacklist lookup failed, treating token as not blacklisted")
        elif blacklisted.value:
            return Return.err(invalid_token_error())

        user = await users.get_by_active_reset_token(hash_token(token), datetime.utcnow())
        if user is None:
            return Return.err(invalid_token_error())

        return Return.ok(user)
