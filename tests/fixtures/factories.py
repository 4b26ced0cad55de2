import bcrypt
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.services.mailer import MailDispatchError, Mailer
from src.domain.entities import User


class RecordingMailer(Mailer):
    """Captures reset links instead of sending them"""

    def __init__(self):
        self.sent = []
        self.fail = False

    async def send_password_reset(self, email: str, reset_link: str) -> None:
        if self.fail:
            raise MailDispatchError("relay unavailable")
        self.sent.append((email, reset_link))

    @property
    def last_token(self) -> str:
        return self.sent[-1][1].rsplit("/", 1)[1]


async def create_test_user(
    db_session: AsyncSession,
    email: str = "a@x.com",
    password: str = "OldPass123!",
) -> User:
    """Persist a user with a low-cost bcrypt hash of ``password``"""
    password_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt(4))
    user = User(email=email, password_hash=password_hash.decode())
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user
