"""
Mailer adapters.

SmtpMailer sends through an SMTP relay; ConsoleMailer only logs, for
development setups without mail credentials.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from src.app.services.mailer import MailDispatchError, Mailer

logger = logging.getLogger(__name__)

RESET_SUBJECT = "Password Reset"


def build_reset_message(sender: str, email: str, reset_link: str) -> EmailMessage:
    message = EmailMessage()
    message["From"] = sender
    message["To"] = email
    message["Subject"] = RESET_SUBJECT
    message.set_content(
        "A password reset was requested for your account.\n\n"
        f"Open the link below within 30 minutes to choose a new password:\n{reset_link}\n\n"
        "If you did not request this, you can ignore this email."
    )
    return message


class SmtpMailer(Mailer):
    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        starttls: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.starttls = starttls
        self.timeout = timeout

    def _send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.starttls:
                server.starttls()
            if self.username and self.password:
                server.login(self.username, self.password)
            server.send_message(message)

    async def send_password_reset(self, email: str, reset_link: str) -> None:
        message = build_reset_message(self.sender, email, reset_link)
        try:
            await asyncio.to_thread(self._send, message)
        except (smtplib.SMTPException, OSError) as e:
            raise MailDispatchError(str(e)) from e
        logger.info("Password reset email handed to SMTP relay")


class ConsoleMailer(Mailer):
    async def send_password_reset(self, email: str, reset_link: str) -> None:
        logger.info(f"[DEV MAIL] to={email} subject={RESET_SUBJECT!r} link={reset_link}")


def create_mailer(config) -> Mailer:
    if config.MAIL_BACKEND == "smtp":
        return SmtpMailer(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            sender=config.MAIL_FROM,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            starttls=config.SMTP_STARTTLS,
            timeout=config.MAIL_TIMEOUT_SECONDS,
        )
    return ConsoleMailer()
