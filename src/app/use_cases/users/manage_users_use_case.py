"""
Manage Users Use Case

User directory: list, read, update and delete accounts.
"""

import logging
from datetime import datetime

import bcrypt

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from src.domain.entities import User
from .dtos import UpdateUserCommand, UserDetails, UserListResponse

logger = logging.getLogger(__name__)


def to_user_details(user: User) -> UserDetails:
    return UserDetails(
        id=user.id,
        name=user.name,
        email=user.email,
        avatar=user.avatar,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class ManageUsersUseCase:
    """
    Use case for the user directory.

    Business Rules:
    - Any authenticated user can list and read users
    - Users can only update or delete their own account
    - Email must stay unique
    - Deleting a user removes its sessions, blogs, likes and saved blogs
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def list_all(self) -> Result[UserListResponse]:
        async with self.uow:
            users = await self.uow.users.list_all()
            return Return.ok(UserListResponse(users=[to_user_details(u) for u in users]))

    @store_guarded
    async def get(self, user_id: int) -> Result[UserDetails]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            return Return.ok(to_user_details(user))

    @store_guarded
    async def update(
        self, requesting_user_id: int, user_id: int, command: UpdateUserCommand
    ) -> Result[UserDetails]:
        """
        Update a user account.

        Args:
            requesting_user_id: Authenticated caller
            user_id: Account to update
            command: Fields to change

        Returns:
            Result with updated UserDetails, or Error
            (USER_NOT_FOUND, FORBIDDEN, EMAIL_ALREADY_EXISTS)
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.id != requesting_user_id:
                return Return.err(
                    Error("FORBIDDEN", "Users can only modify their own account")
                )

            if command.email and command.email != user.email:
                if await self.uow.users.get_by_email(command.email):
                    return Return.err(
                        Error("EMAIL_ALREADY_EXISTS", "Email already in use by another user")
                    )
                user.email = command.email

            if command.name:
                user.name = command.name

            if command.password:
                user.password_hash = bcrypt.hashpw(
                    command.password.encode("utf-8"), bcrypt.gensalt(12)
                ).decode("utf-8")

            user.updated_at = datetime.utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(to_user_details(user))

    @store_guarded
    async def delete(self, requesting_user_id: int, user_id: int) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.id != requesting_user_id:
                return Return.err(
                    Error("FORBIDDEN", "Users can only delete their own account")
                )

            await self.uow.users.delete(user)
            await self.uow.commit()

        logger.info(f"User {user_id} deleted with all owned records")
        return Return.ok(None)
