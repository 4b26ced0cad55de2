"""
Unit tests for ChangePasswordUseCase
"""
from uuid import uuid4

import bcrypt
import pytest

from src.app.use_cases.users.change_password_use_case import ChangePasswordUseCase
from src.core.result import ErrorKind
from src.domain.entities import User


def make_user(password="OldPass123!", notifications=None):
    return User(
        email="user@example.com",
        password_hash=bcrypt.hashpw(password.encode(), bcrypt.gensalt(4)).decode(),
        notifications=notifications or [],
    )


@pytest.mark.asyncio
async def test_successful_password_change(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    use_case = ChangePasswordUseCase(mock_uow)
    result = await use_case.execute(user.id, "OldPass123!", "NewPass456!")

    assert result.is_ok()
    assert bcrypt.checkpw(b"NewPass456!", user.password_hash.encode())
    assert user.password_hash.startswith("$2b$12$")

    assert len(user.notifications) == 1
    assert user.notifications[0]["type"] == "updatedUser"
    assert user.notifications[0]["message"] == "Password changed"

    # Password and notifications persisted in one write
    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_same_password_rejected(mock_uow):
    use_case = ChangePasswordUseCase(mock_uow)
    result = await use_case.execute(uuid4(), "SamePass123!", "SamePass123!")

    assert result.is_err()
    assert result.error.code == "SAME_PASSWORD"
    assert result.error.kind == ErrorKind.VALIDATION
    mock_uow.users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_user_not_found(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    use_case = ChangePasswordUseCase(mock_uow)
    result = await use_case.execute(uuid4(), "OldPass123!", "NewPass456!")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    assert result.error.kind == ErrorKind.NOT_FOUND
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_wrong_current_password(mock_uow):
    user = make_user()
    old_hash = user.password_hash
    mock_uow.users.get_by_id.return_value = user

    use_case = ChangePasswordUseCase(mock_uow)
    result = await use_case.execute(user.id, "WrongPass!", "NewPass456!")

    assert result.is_err()
    assert result.error.code == "CURRENT_PASSWORD_INCORRECT"
    assert result.error.message == "Current password is incorrect"
    assert user.password_hash == old_hash
    assert user.notifications == []
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_notification_history_is_bounded(mock_uow):
    """A 16th notification evicts the oldest, keeping exactly 15"""
    existing = [
        {"type": "updatedUser", "message": f"event {i}", "created_at": "2024-01-01T00:00:00"}
        for i in range(15)
    ]
    user = make_user(notifications=existing)
    mock_uow.users.get_by_id.return_value = user

    use_case = ChangePasswordUseCase(mock_uow)
    result = await use_case.execute(user.id, "OldPass123!", "NewPass456!")

    assert result.is_ok()
    assert len(user.notifications) == 15
    messages = [n["message"] for n in user.notifications]
    assert "event 0" not in messages
    assert messages[0] == "event 1"
    assert messages[-1] == "Password changed"


@pytest.mark.asyncio
async def test_password_over_bcrypt_limit_rejected(mock_uow):
    use_case = ChangePasswordUseCase(mock_uow)
    result = await use_case.execute(uuid4(), "OldPass123!", "B" * 80)

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"
    assert result.error.kind == ErrorKind.VALIDATION
    mock_uow.users.get_by_id.assert_not_called()
    mock_uow.commit.assert_not_called()
