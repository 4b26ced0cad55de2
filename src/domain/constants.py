"""
Fixed recovery policy values.
"""

from datetime import timedelta

# Reset link validity window
RESET_TOKEN_EXPIRATION = timedelta(minutes=30)

# Lifetime of a cache bucket, refreshed on every write to any of its fields
CACHE_EXPIRATION = timedelta(days=20)

MAX_NOTIFICATIONS = 15

BCRYPT_ROUNDS = 12

MIN_PASSWORD_LENGTH = 8

# bcrypt only accepts inputs up to this many bytes
MAX_PASSWORD_BYTES = 72
