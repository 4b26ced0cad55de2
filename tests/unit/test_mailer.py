import smtplib
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from src.adapter.services.mailer import (
    ConsoleMailer,
    SmtpMailer,
    build_reset_message,
    create_mailer,
)
from src.app.services.mailer import MailDispatchError


def _config(**overrides):
    values = dict(
        MAIL_BACKEND="console",
        SMTP_HOST="smtp.example.com",
        SMTP_PORT=587,
        SMTP_USERNAME="mailer",
        SMTP_PASSWORD="secret",
        SMTP_STARTTLS=True,
        MAIL_FROM="no-reply@example.com",
        MAIL_TIMEOUT_SECONDS=5.0,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_reset_message_contains_link():
    message = build_reset_message("no-reply@example.com", "a@x.com", "https://app/reset/abc")

    assert message["To"] == "a@x.com"
    assert message["Subject"] == "Password Reset"
    assert "https://app/reset/abc" in message.get_content()


def test_create_mailer_selects_backend():
    assert isinstance(create_mailer(_config()), ConsoleMailer)

    smtp = create_mailer(_config(MAIL_BACKEND="smtp"))
    assert isinstance(smtp, SmtpMailer)
    assert smtp.host == "smtp.example.com"
    assert smtp.timeout == 5.0


@pytest.mark.asyncio
async def test_smtp_mailer_sends_with_starttls_and_login():
    server = MagicMock()
    smtp_cls = MagicMock()
    smtp_cls.return_value.__enter__.return_value = server

    mailer = SmtpMailer("smtp.example.com", 587, "no-reply@example.com", "mailer", "secret")
    with patch("src.adapter.services.mailer.smtplib.SMTP", smtp_cls):
        await mailer.send_password_reset("a@x.com", "https://app/reset/abc")

    smtp_cls.assert_called_once_with("smtp.example.com", 587, timeout=10.0)
    server.starttls.assert_called_once()
    server.login.assert_called_once_with("mailer", "secret")
    server.send_message.assert_called_once()


@pytest.mark.asyncio
async def test_smtp_failure_raises_dispatch_error():
    smtp_cls = MagicMock(side_effect=smtplib.SMTPConnectError(421, "unavailable"))

    mailer = SmtpMailer("smtp.example.com", 587, "no-reply@example.com")
    with patch("src.adapter.services.mailer.smtplib.SMTP", smtp_cls):
        with pytest.raises(MailDispatchError):
            await mailer.send_password_reset("a@x.com", "https://app/reset/abc")
