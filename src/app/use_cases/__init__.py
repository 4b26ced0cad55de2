"""
Use Cases

Organized into domain folders:
- auth/: Password recovery flows
- users/: Authenticated account management

Import from subdirectories for better organization.
"""

from .auth import (
    RequestPasswordResetUseCase,
    VerifyPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
)
from .users import (
    ChangePasswordUseCase,
)

__all__ = [
    # Auth
    "RequestPasswordResetUseCase",
    "VerifyPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # Users
    "ChangePasswordUseCase",
]
