from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import ChangePasswordUseCase
from src.app.utils.passwords import validate_new_password
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/users", tags=["User"])


class ChangePasswordRequest(BaseModel):
    """Change password HTTP request payload"""

    current_password: str = Field(..., min_length=1, description="Current password")
    new_password: str = Field(..., min_length=8, description="New password (8 chars to 72 bytes)")

    @field_validator("new_password")
    @classmethod
    def validate_new_password_length(cls, v: str) -> str:
        """Reject passwords bcrypt cannot hash"""
        result = validate_new_password(v)
        if result.is_err():
            raise ValueError(result.error.message)
        return v


@router.put("/me/password", status_code=status.HTTP_204_NO_CONTENT)
async def change_password(
    request: ChangePasswordRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Password

    Changes the authenticated caller's password and records a notification.

    Raises:
        - 400 Bad Request: Same password or current password incorrect
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: User not found
    """
    use_case = ChangePasswordUseCase(uow)
    result = await use_case.execute(user_id, request.current_password, request.new_password)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
