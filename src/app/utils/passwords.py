import asyncio

import bcrypt

from src.core.result import Error, ErrorKind, Result, Return
from src.domain.constants import BCRYPT_ROUNDS, MAX_PASSWORD_BYTES, MIN_PASSWORD_LENGTH


def validate_new_password(password: str) -> Result[None]:
    """Length policy for a password about to be hashed."""
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                ErrorKind.VALIDATION,
            )
        )
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long",
                ErrorKind.VALIDATION,
            )
        )
    return Return.ok(None)


async def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a password with a fresh bcrypt salt, off the event loop."""
    hashed = await asyncio.to_thread(bcrypt.hashpw, password.encode(), bcrypt.gensalt(rounds))
    return hashed.decode()


async def verify_password(password: str, password_hash: str) -> bool:
    try:
        return await asyncio.to_thread(bcrypt.checkpw, password.encode(), password_hash.encode())
    except ValueError:
        # Malformed stored hash, or a candidate longer than bcrypt accepts
        return False
