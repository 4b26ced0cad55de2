"""
Authentication Use Cases

Password recovery business logic.
"""

from .request_password_reset_use_case import RequestPasswordResetUseCase
from .verify_password_reset_use_case import VerifyPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    RequestPasswordResetResponse,
    VerifyPasswordResetResponse,
    ConfirmPasswordResetResponse,
)

__all__ = [
    # Use Cases
    "RequestPasswordResetUseCase",
    "VerifyPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Responses
    "RequestPasswordResetResponse",
    "VerifyPasswordResetResponse",
    "ConfirmPasswordResetResponse",
]
