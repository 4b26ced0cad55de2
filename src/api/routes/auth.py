from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.blacklist import TokenBlacklist
from src.app.services.mailer import Mailer
from src.app.services.token_validator import ResetTokenValidator
from src.app.services.unit_of_work import UnitOfWork
from src.app.utils.passwords import validate_new_password
from src.app.use_cases.auth import (
    RequestPasswordResetUseCase,
    VerifyPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetResponse,
    VerifyPasswordResetResponse,
    ConfirmPasswordResetResponse,
)
from src.depends import get_blacklist, get_mailer, get_token_validator, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class ForgotPasswordRequest(BaseModel):
    """
    Forgot password HTTP request payload

    The reset link is built as ``{url}/{token}``.
    """

    email: EmailStr = Field(..., description="User email address")
    url: str = Field(..., min_length=1, description="Base URL of the reset page")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_201_CREATED,
    response_model=RequestPasswordResetResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: Mailer = Depends(get_mailer),
):
    """
    Request Password Reset

    Issues a reset token valid for 30 minutes and emails the reset link.

    Raises:
        - 400 Bad Request: Invalid input
        - 404 Not Found: Email not registered
        - 500 Internal Server Error: Mail dispatch failed
    """
    use_case = RequestPasswordResetUseCase(
        uow, mailer, mail_timeout=ApplicationConfig.MAIL_TIMEOUT_SECONDS
    )
    result = await use_case.execute(request.email, request.url)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/reset-password/{token}",
    status_code=status.HTTP_200_OK,
    response_model=VerifyPasswordResetResponse,
)
async def verify_password_reset(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    validator: ResetTokenValidator = Depends(get_token_validator),
):
    """
    Verify Password Reset Token

    Read-only check that the link is still live. Does not consume the token.

    Raises:
        - 401 Unauthorized: Invalid, blacklisted or expired token
    """
    use_case = VerifyPasswordResetUseCase(uow, validator)
    result = await use_case.execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    password: str = Field(..., min_length=8, description="New password (8 chars to 72 bytes)")

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Reject passwords bcrypt cannot hash"""
        result = validate_new_password(v)
        if result.is_err():
            raise ValueError(result.error.message)
        return v


@router.post(
    "/reset-password/{token}",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    token: str,
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    validator: ResetTokenValidator = Depends(get_token_validator),
    blacklist: TokenBlacklist = Depends(get_blacklist),
):
    """
    Submit Password Reset

    Consumes the token and sets the new password. The token is blacklisted
    and can never be used again.

    Raises:
        - 400 Bad Request: Password validation failed
        - 401 Unauthorized: Invalid, blacklisted, expired or already used token
        - 500 Internal Server Error: Revocation list unavailable (fail-closed mode)
    """
    use_case = ConfirmPasswordResetUseCase(
        uow, validator, blacklist, fail_closed=ApplicationConfig.BLACKLIST_FAIL_CLOSED
    )
    result = await use_case.execute(token, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
