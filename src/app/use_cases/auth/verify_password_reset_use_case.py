"""
Verify Password Reset Use Case

Lets a client confirm a reset link is live before showing the reset form.
"""

from src.app.services.token_validator import ResetTokenValidator
from src.app.services.unit_of_work import UnitOfWork
from src.core.result import Result, Return
from .dtos import VerifyPasswordResetResponse


class VerifyPasswordResetUseCase:
    """
    Use case for verifying a reset token.

    Business Rules:
    - Read-only: verifying does not consume the token
    - May be called any number of times within the validity window
    """

    def __init__(self, uow: UnitOfWork, validator: ResetTokenValidator):
        self.uow = uow
        self.validator = validator

    async def execute(self, token: str) -> Result[VerifyPasswordResetResponse]:
        async with self.uow:
            validation = await self.validator.validate(self.uow.users, token)
            if validation.is_err():
                return Return.err(validation.error)

        return Return.ok(VerifyPasswordResetResponse(message="success", token=token))
