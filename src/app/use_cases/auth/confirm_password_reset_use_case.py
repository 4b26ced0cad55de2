"""
Confirm Password Reset Use Case

Consumes a reset token and sets the new password.
"""

import logging
from datetime import datetime

from src.app.services.blacklist import TokenBlacklist
from src.app.services.token_validator import ResetTokenValidator, invalid_token_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.utils.passwords import hash_password, validate_new_password
from src.app.utils.tokens import hash_token
from src.core.result import Error, ErrorKind, Result, Return
from .dtos import ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - New password must be 8 chars to 72 bytes (bcrypt input limit), checked
      before anything is touched
    - Token is re-validated; a prior verify call is not trusted
    - Token is claimed with a compare-and-clear on the user record, so two
      concurrent submissions cannot both succeed
    - Token is blacklisted before the password is written; once claimed it
      is never reusable even if the password write fails
    - Password is hashed with bcrypt (cost factor 12)
    - Blacklist write failure: logged and tolerated by default, aborts the
      reset when fail_closed is set
    """

    def __init__(
        self,
        uow: UnitOfWork,
        validator: ResetTokenValidator,
        blacklist: TokenBlacklist,
        fail_closed: bool = False,
    ):
        self.uow = uow
        self.validator = validator
        self.blacklist = blacklist
        self.fail_closed = fail_closed

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text from the reset link)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - INVALID_PASSWORD: Password does not meet complexity requirements
            - INVALID_TOKEN: Token empty, blacklisted, expired, unknown or already consumed
            - CACHE_UNAVAILABLE: Blacklist unreachable and fail-closed is configured
        """
        password_validation = validate_new_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            validation = await self.validator.validate(self.uow.users, token)
            if validation.is_err():
                return Return.err(validation.error)
            user = validation.value

            claimed = await self.uow.users.clear_reset_token(
                user.id, hash_token(token), datetime.utcnow()
            )
            if not claimed:
                # Another submission consumed the token first
                return Return.err(invalid_token_error())

            revoked = await self.blacklist.invalidate(token)
            if revoked.is_err():
                if self.fail_closed:
                    await self.uow.rollback()
                    return Return.err(
                        Error(
                            "CACHE_UNAVAILABLE",
                            "Token revocation list is unavailable",
                            ErrorKind.DEPENDENCY,
                        )
                    )
                logger.warning(
                    f"Reset token for user {user.id} consumed without blacklist entry"
                )

            user.password_hash = await hash_password(new_password)
            user.reset_token_hash = None
            user.reset_expiry = None
            await self.uow.users.update(user)

            await self.uow.commit()

        logger.info(f"Password reset completed for user {user.id}")
        return Return.ok(
            ConfirmPasswordResetResponse(
                status="success",
                message="Password changed",
            )
        )
