"""
Account Recovery Domain Entities

All domain entities organized by model.
"""

from .enums import NotificationType
from .user import User

__all__ = [
    # Enums
    "NotificationType",
    # Entities
    "User",
]
