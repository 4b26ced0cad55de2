import pytest

from src.app.utils.passwords import hash_password, validate_new_password, verify_password


def test_accepts_password_within_limits():
    assert validate_new_password("NewPass1").is_ok()
    assert validate_new_password("A" * 72).is_ok()


def test_rejects_short_password():
    result = validate_new_password("short")

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"


def test_limit_counts_bytes_not_characters():
    # 40 characters, 80 bytes in UTF-8
    result = validate_new_password("é" * 40)

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"
    assert "72 bytes" in result.error.message


@pytest.mark.asyncio
async def test_hash_and_verify():
    password_hash = await hash_password("NewPass1", rounds=4)

    assert await verify_password("NewPass1", password_hash)
    assert not await verify_password("OtherPass1", password_hash)


@pytest.mark.asyncio
async def test_verify_against_malformed_hash_is_false():
    assert not await verify_password("NewPass1", "not-a-bcrypt-hash")
