"""
Request Password Reset Use Case

Issues a single-use reset token and emails the reset link.
"""

import asyncio
import logging
from datetime import datetime

from src.app.services.mailer import MailDispatchError, Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.utils.tokens import generate_reset_token, hash_token
from src.core.result import Error, ErrorKind, Result, Return
from src.domain.constants import RESET_TOKEN_EXPIRATION
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Unknown email is reported as not registered
    - Generate cryptographically secure 32-byte token
    - Hash token with SHA-256 before storing on the user record
    - Token expires in 30 minutes
    - A new request overwrites any earlier token (one active token per user)
    - Token is committed before mail dispatch; a failed dispatch does not
      roll it back, a resend simply overwrites it
    """

    def __init__(self, uow: UnitOfWork, mailer: Mailer, mail_timeout: float = 10.0):
        self.uow = uow
        self.mailer = mailer
        self.mail_timeout = mail_timeout

    async def execute(self, email: str, base_url: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address
            base_url: Front-end URL the token is appended to

        Returns:
            Result with reset status, or Error

        Errors:
            - USER_NOT_FOUND: No account with this email
            - MAIL_DISPATCH_FAILED: Token issued but the email could not be sent
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(
                    Error("USER_NOT_FOUND", "Email not registered", ErrorKind.NOT_FOUND)
                )

            reset_token = generate_reset_token()
            user.reset_token_hash = hash_token(reset_token)
            user.reset_expiry = datetime.utcnow() + RESET_TOKEN_EXPIRATION
            await self.uow.users.update(user)

            await self.uow.commit()

        reset_link = f"{base_url.rstrip('/')}/{reset_token}"

        try:
            await asyncio.wait_for(
                self.mailer.send_password_reset(email, reset_link),
                timeout=self.mail_timeout,
            )
        except (MailDispatchError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to send password reset email: {e!r}")
            return Return.err(
                Error("MAIL_DISPATCH_FAILED", "Failed to send email", ErrorKind.DEPENDENCY)
            )

        logger.info("Password reset link dispatched")
        return Return.ok(
            RequestPasswordResetResponse(
                status="sent",
                message="Password reset link sent to email",
            )
        )
