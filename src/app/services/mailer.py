from abc import ABC, abstractmethod


class MailDispatchError(Exception):
    """Raised by a Mailer when a message could not be handed to the transport"""


class Mailer(ABC):
    """Outbound email port - application layer"""

    @abstractmethod
    async def send_password_reset(self, email: str, reset_link: str) -> None:
        """
        Send the password reset link to the given address.

        Raises:
            MailDispatchError: the message was not accepted for delivery
        """
        pass
