from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.mailer import create_mailer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.app.services.blacklist import TokenBlacklist
from src.app.services.cache_store import CacheStore
from src.app.services.mailer import Mailer
from src.app.services.token_validator import ResetTokenValidator

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()

_mailer = create_mailer(ApplicationConfig)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_cache_store(request: Request) -> CacheStore:
    """Cache store created and connected by the application lifespan"""
    return request.app.state.cache_store


def get_mailer() -> Mailer:
    return _mailer


def get_blacklist(cache_store: CacheStore = Depends(get_cache_store)) -> TokenBlacklist:
    return TokenBlacklist(cache_store)


def get_token_validator(
    blacklist: TokenBlacklist = Depends(get_blacklist),
) -> ResetTokenValidator:
    return ResetTokenValidator(blacklist, fail_closed=ApplicationConfig.BLACKLIST_FAIL_CLOSED)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None or "user_id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload


def get_current_user_id(current_user: dict = Depends(get_current_user)) -> UUID:
    try:
        return UUID(current_user["user_id"])
    except (ValueError, TypeError, AttributeError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
