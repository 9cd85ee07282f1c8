"""
Authentication Gate Use Cases

Resolve the caller's identity from an access token (stateless) or from a
refresh token backed by a live session (session-checked).
"""

import logging
from typing import Optional

from src.libs.result import Error, Result, Return
from src.api.utils.jwt import verify_token
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from src.domain.entities import TokenType
from .dtos import AuthenticatedUser, OptionalIdentity

logger = logging.getLogger(__name__)

_ANONYMOUS_REASONS = {
    "SESSION_NOT_FOUND": "no_cookie",
    "SESSION_TOKEN_INVALID": "token_invalid",
    "STORE_UNAVAILABLE": "store_unavailable",
}


class AuthenticateAccessTokenUseCase:
    """
    Stateless gate.

    Only the token signature and expiry are checked; a session revoked less
    than one access-token lifetime ago still passes.
    """

    def execute(self, access_token: Optional[str]) -> Result[AuthenticatedUser]:
        if not access_token:
            return Return.err(Error("TOKEN_MISSING", "Access token required"))

        payload = verify_token(access_token, TokenType.access)
        if payload is None:
            return Return.err(
                Error("TOKEN_INVALID", "Invalid or expired access token")
            )

        return Return.ok(AuthenticatedUser(user_id=payload["user_id"]))


class ValidateSessionUseCase:
    """
    Session-checked gate.

    Business Rules:
    - Refresh token must verify
    - Session row must exist and be valid
    - Session row user must match the token user
    - Only this gate yields a session id
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def execute(self, refresh_token: Optional[str]) -> Result[AuthenticatedUser]:
        if not refresh_token:
            return Return.err(Error("SESSION_NOT_FOUND", "No active session found"))

        payload = verify_token(refresh_token, TokenType.refresh)
        if payload is None:
            return Return.err(
                Error("SESSION_TOKEN_INVALID", "Invalid session token")
            )

        async with self.uow:
            session = await self.uow.sessions.find_by_refresh_token(refresh_token)

            if session is None or not session.is_valid:
                return Return.err(Error("SESSION_INVALID", "Invalid or expired session"))

            if session.user_id != payload["user_id"]:
                logger.warning(f"Session {session.id} does not match token user")
                return Return.err(Error("SESSION_MISMATCH", "Session mismatch"))

            return Return.ok(
                AuthenticatedUser(user_id=session.user_id, session_id=session.id)
            )

    async def resolve_optional(self, refresh_token: Optional[str]) -> OptionalIdentity:
        """Non-rejecting variant: never fails, reports why no identity was resolved"""
        result = await self.execute(refresh_token)
        if result.is_ok():
            return OptionalIdentity.of(result.value)

        return OptionalIdentity.anonymous(
            _ANONYMOUS_REASONS.get(result.error.code, "session_invalid")
        )
