from typing import Optional

import bcrypt
from src.libs.result import Error, Result, Return

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from src.domain.entities import User
from .dtos import AuthResponse, ClientInfo, RegisterCommand, UserInfo
from .session_opener import open_session


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent) + ClientInfo
    - Output: Result[AuthResponse]

    Business Logic:
    1. Check if email already exists
    2. Hash password with bcrypt cost factor 12
    3. Create User
    4. Open a session (token pair + Active session row), same as login
    5. Commit transaction atomically
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def execute(
        self, command: RegisterCommand, client: Optional[ClientInfo] = None
    ) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated email, name, password
            client: User agent / IP of the registering client

        Returns:
            Result[AuthResponse] with user data, tokens and session id
            or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        client = client or ClientInfo()

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "This email already exists")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )

            user = User(
                email=command.email,
                name=command.name,
                password_hash=password_hash.decode("utf-8"),
            )
            user = await self.uow.users.create(user)

            # A new registration auto-authenticates
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
