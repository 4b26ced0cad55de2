"""
User Use Cases

Self-service account operations.
"""

from .change_password_use_case import ChangePasswordUseCase

__all__ = [
    "ChangePasswordUseCase",
]
