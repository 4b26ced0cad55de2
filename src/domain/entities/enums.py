"""
Account Recovery Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class NotificationType(str, Enum):
    """Kind of event recorded in a user's notification history"""

    updated_user = "updatedUser"
