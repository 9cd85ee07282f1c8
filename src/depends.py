from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import raise_for_error
from src.api.utils.cookies import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE
from src.app.use_cases.auth import (
    AuthenticateAccessTokenUseCase,
    AuthenticatedUser,
    OptionalIdentity,
    ValidateSessionUseCase,
)

engine = create_async_engine(
    ApplicationConfig.DB_URI,
    echo=False,
    future=True,
    pool_pre_ping=True,
    **(
        {"pool_timeout": ApplicationConfig.DB_POOL_TIMEOUT}
        if not ApplicationConfig.DB_URI.startswith("sqlite")
        else {}
    ),
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def _authenticate_access_token(
    request: Request, credentials: Optional[HTTPAuthorizationCredentials]
) -> AuthenticatedUser:
    # Cookie first, then Authorization: Bearer for API clients
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if not token and credentials is not None:
        token = credentials.credentials

    result = AuthenticateAccessTokenUseCase().execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthenticatedUser:
    """
    Stateless gate: verify the access token from cookie or Authorization header.

    Returns:
        AuthenticatedUser with user_id only (no session id)

    Raises:
        ClientError: 401 TOKEN_MISSING / TOKEN_INVALID
    """
    return _authenticate_access_token(request, credentials)


async def get_current_session(
    request: Request, uow=Depends(get_unit_of_work)
) -> AuthenticatedUser:
    """
    Session-checked gate: the refresh token cookie must map to a live session.

    Returns:
        AuthenticatedUser with user_id and session_id

    Raises:
        ClientError: 401 SESSION_NOT_FOUND / SESSION_TOKEN_INVALID / SESSION_INVALID,
            403 SESSION_MISMATCH
        ServerError: store unavailable
    """
    result = await ValidateSessionUseCase(uow).execute(
        request.cookies.get(REFRESH_TOKEN_COOKIE)
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


async def get_optional_session(
    request: Request, uow=Depends(get_unit_of_work)
) -> OptionalIdentity:
    """Non-rejecting session gate for endpoints that personalize but don't require login"""
    return await ValidateSessionUseCase(uow).resolve_optional(
        request.cookies.get(REFRESH_TOKEN_COOKIE)
    )


async def get_session_or_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    optional_session: OptionalIdentity = Depends(get_optional_session),
) -> AuthenticatedUser:
    """
    Prefer the live session identity; fall back to the stateless gate.

    Only a request without a session cookie falls back; its identity carries
    no session id, which callers treat as "current session unknown". A
    presented but revoked or forged session cookie is rejected.

    Raises:
        ClientError: 401 SESSION_INVALID, or the stateless gate errors
        ServerError: store unavailable
    """
    if optional_session.resolved:
        return optional_session.identity

    if optional_session.reason == "store_unavailable":
        raise_for_error(Error("STORE_UNAVAILABLE", "Session store is unavailable"))
    if optional_session.reason != "no_cookie":
        raise_for_error(Error("SESSION_INVALID", "Invalid or expired session"))

    return _authenticate_access_token(request, credentials)
