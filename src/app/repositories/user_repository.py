from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def get_by_active_reset_token(self, token_hash: str, now: datetime) -> Optional[User]:
        """Get user whose reset token hash matches and whose reset window is still open"""
        pass

    @abstractmethod
    async def clear_reset_token(self, user_id: UUID, token_hash: str, now: datetime) -> bool:
        """
        Atomically clear the reset token if it still matches and has not expired.

        Returns True only for the caller that actually cleared it.
        """
        pass
