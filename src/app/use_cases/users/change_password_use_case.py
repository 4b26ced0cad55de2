"""
Change Password Use Case

Authenticated password change with a bounded notification history.
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.utils.passwords import hash_password, validate_new_password, verify_password
from src.core.result import Error, ErrorKind, Result, Return
from src.domain.constants import MAX_NOTIFICATIONS
from src.domain.entities import NotificationType
from src.domain.notifications import generate_notification, manage_notifications

logger = logging.getLogger(__name__)

PASSWORD_UPDATE_NOTIFICATION_MESSAGE = "Password changed"


class ChangePasswordUseCase:
    """
    Use case for changing the caller's own password.

    Business Rules:
    - New password must be 8 chars to 72 bytes and differ from the current
      one, checked before the user is loaded
    - Current password must match the stored bcrypt hash
    - New password is hashed with bcrypt (cost factor 12)
    - A notification is appended and the history trimmed to the newest
      MAX_NOTIFICATIONS entries
    - Password hash and notification list are written in one update
    """

    def __init__(self, uow: UnitOfWork, max_notifications: int = MAX_NOTIFICATIONS):
        self.uow = uow
        self.max_notifications = max_notifications

    async def execute(self, user_id: UUID, current_password: str, new_password: str) -> Result[None]:
        """
        Execute change password use case.

        Args:
            user_id: Authenticated caller
            current_password: Password the caller claims is current
            new_password: Replacement password

        Returns:
            Result with None on success, or Error

        Errors:
            - INVALID_PASSWORD: New password too short or too long
            - SAME_PASSWORD: New password equals the current one
            - USER_NOT_FOUND: Caller no longer exists
            - CURRENT_PASSWORD_INCORRECT: Current password does not match
        """
        password_validation = validate_new_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        if current_password == new_password:
            return Return.err(
                Error("SAME_PASSWORD", "Please provide a new password", ErrorKind.VALIDATION)
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found", ErrorKind.NOT_FOUND))

            if not await verify_password(current_password, user.password_hash):
                return Return.err(
                    Error(
                        "CURRENT_PASSWORD_INCORRECT",
                        "Current password is incorrect",
                        ErrorKind.AUTH,
                    )
                )

            user.password_hash = await hash_password(new_password)

            notification = generate_notification(
                NotificationType.updated_user, PASSWORD_UPDATE_NOTIFICATION_MESSAGE
            )
            # Reassign so the JSON column is flagged dirty
            user.notifications = manage_notifications(
                [*(user.notifications or []), notification], self.max_notifications
            )

            await self.uow.users.update(user)
            await self.uow.commit()

        logger.info(f"Password changed for user {user_id}")
        return Return.ok(None)
