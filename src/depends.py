from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import InvalidTokenError, verify_jwt
from src.domain.entities import Identity

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Identity:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        request: Incoming request; the identity is attached to request.state
        credentials: Bearer token from Authorization header, None when the
            header is missing or not a Bearer scheme

    Returns:
        Identity with user_id, email, role

    Raises:
        ClientError: 401 if the header is missing/malformed or the token is
            invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("UNAUTHORIZED", "Missing or malformed authorization header"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        identity = verify_jwt(credentials.credentials)
    except InvalidTokenError:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    request.state.identity = identity
    return identity
