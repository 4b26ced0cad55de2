"""
Notification history helpers.

A user's notifications are stored oldest first. The list is bounded:
once it grows past the limit the oldest entries are dropped.
"""

from datetime import datetime
from typing import List

from src.domain.constants import MAX_NOTIFICATIONS
from src.domain.entities.enums import NotificationType


def generate_notification(notification_type: NotificationType, message: str) -> dict:
    """Build a notification entry stamped with the current time."""
    return {
        "type": notification_type.value,
        "message": message,
        "created_at": datetime.utcnow().isoformat(),
    }


def manage_notifications(notifications: List[dict], limit: int = MAX_NOTIFICATIONS) -> List[dict]:
    """
    Enforce the bounded history.

    Args:
        notifications: Entries in chronological order (oldest first)
        limit: Maximum number of entries to keep

    Returns:
        A new list holding at most ``limit`` entries, the newest ones
    """
    if limit <= 0:
        return []
    overflow = len(notifications) - limit
    if overflow > 0:
        return list(notifications[overflow:])
    return list(notifications)
