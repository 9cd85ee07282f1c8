"""
Refresh Token Use Case

Mints a new access token from a refresh token backed by a live session.
"""

import logging

from src.libs.result import Error, Result, Return
from src.api.utils.jwt import issue_access_token, verify_token
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from src.domain.entities import TokenType
from .dtos import RefreshTokenResponse

logger = logging.getLogger(__name__)


class RefreshTokenUseCase:
    """
    Use case for refreshing access tokens.

    Business Rules:
    - Refresh token signature and expiry must verify
    - Backing session must exist, be valid and belong to the token's user
    - Non-rotating: the refresh token and session row are left untouched,
      only a new access token is minted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        """
        Execute refresh token use case.

        Args:
            refresh_token: The refresh token presented by the client

        Returns:
            Result with RefreshTokenResponse containing a new access token, or
            Error(TOKEN_INVALID) / Error(SESSION_REVOKED)
        """
        payload = verify_token(refresh_token, TokenType.refresh)
        if payload is None:
            return Return.err(
                Error("TOKEN_INVALID", "Invalid or expired refresh token")
            )

        async with self.uow:
            session = await self.uow.sessions.find_by_refresh_token(refresh_token)

            if session is None or not session.is_valid:
                return Return.err(Error("SESSION_REVOKED", "Session has been revoked"))

            # Token/session desync
            if session.user_id != payload["user_id"]:
                logger.warning(
                    f"Refresh token user does not match session {session.id}"
                )
                return Return.err(Error("SESSION_REVOKED", "Session has been revoked"))

            access_token = issue_access_token(session.user_id)

            return Return.ok(
                RefreshTokenResponse(
                    access_token=access_token,
                    session_id=str(session.id),
                )
            )
