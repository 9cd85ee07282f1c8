"""
Logout Use Case

Ends the caller's session, or every session when the current one is unknown.
"""

import logging
from typing import Optional
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for logging out.

    Business Rules:
    - Known session id: invalidate exactly that session
    - Only user id known: invalidate every Active session of the user
    - Cookies are always cleared by the transport layer
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def execute(
        self, session_id: Optional[UUID] = None, user_id: Optional[int] = None
    ) -> Result[LogoutResponse]:
        async with self.uow:
            if session_id is not None:
                flipped = await self.uow.sessions.invalidate(session_id)
                count = 1 if flipped else 0
                if flipped:
                    logger.info(f"Session {session_id} invalidated on logout")
                else:
                    logger.debug(f"Session {session_id} was already invalid on logout")
            elif user_id is not None:
                count = await self.uow.sessions.invalidate_all_for_user(user_id)
                logger.info(
                    f"Logout without session id: {count} session(s) of user {user_id} invalidated"
                )
            else:
                count = 0

            await self.uow.commit()

            return Return.ok(LogoutResponse(invalidated_count=count, clear_cookies=True))
