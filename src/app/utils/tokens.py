import hashlib
import secrets


def generate_reset_token() -> str:
    """Generate a cryptographically secure, URL-safe reset token (32 bytes)."""
    return secrets.token_urlsafe(32)


def hash_token(token: str) -> str:
    """SHA-256 hex digest used to store and look up a token."""
    return hashlib.sha256(token.encode()).hexdigest()
