"""
User Entity

The account record owned by the user store. The recovery flows only read
and write the credential, reset-token and notification fields.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel


class User(SQLModel, table=True):
    """
    User entity - account holder with a password credential.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash (cost factor 12)
    - At most one active reset token per user; issuing a new one overwrites it
    - Reset token stored as SHA-256 hash, never in plain text
    - Notifications kept oldest first, capped at MAX_NOTIFICATIONS
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Password reset (single active token)
    reset_token_hash: Optional[str] = Field(default=None, max_length=64)  # SHA-256 output
    reset_expiry: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    notifications: list = Field(default_factory=list, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_user_reset_token_hash", "reset_token_hash"),)
