"""
Login Use Case

Handles user authentication and opens a new session.
"""

from typing import Optional

import bcrypt

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from .dtos import AuthResponse, ClientInfo, UserInfo
from .session_opener import open_session


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Every login creates a new Active session (multi-device)
    - Existing sessions of the user are left untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def execute(
        self, email: str, password: str, client: Optional[ClientInfo] = None
    ) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password
            client: User agent / IP of the client

        Returns:
            Result with AuthResponse containing tokens and session id, or Error
        """
        client = client or ClientInfo()

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            # Always perform a hash check even if user not found
            if user is None:
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(12))
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid credentials")
                )

            password_valid = bcrypt.checkpw(
                password.encode(), user.password_hash.encode()
            )

            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid credentials")
                )

            session, tokens = await open_session(self.uow, user.id, client)

            await self.uow.commit()

            return Return.ok(
                AuthResponse(
                    user=UserInfo(id=user.id, name=user.name, email=user.email),
                    access_token=tokens.access_token,
                    refresh_token=tokens.refresh_token,
                    session_id=str(session.id),
                )
            )
