"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the password recovery use cases.
"""

from pydantic import BaseModel


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    status: str
    message: str


class VerifyPasswordResetResponse(BaseModel):
    """Response for verify password reset use case"""

    message: str
    token: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str
