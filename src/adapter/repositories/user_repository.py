from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_active_reset_token(self, token_hash: str, now: datetime) -> Optional[User]:
        """Get user whose reset token hash matches and whose reset window is still open"""
        stmt = select(User).where(
            User.reset_token_hash == token_hash,
            User.reset_expiry > now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def clear_reset_token(self, user_id: UUID, token_hash: str, now: datetime) -> bool:
        """
        Compare-and-clear the reset token in a single UPDATE.

        Only one of several concurrent callers sees rowcount 1; the others
        find the token already cleared.
        """
        stmt = (
            update(User)
            .where(
                User.id == user_id,
                User.reset_token_hash == token_hash,
                User.reset_expiry > now,
            )
            .values(reset_token_hash=None, reset_expiry=None)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
