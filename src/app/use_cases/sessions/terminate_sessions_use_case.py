"""
Terminate Sessions Use Case

Multi-device session termination for the session owner.
"""

import logging
from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from .dtos import TerminateAllSessionsResponse, TerminateSessionResponse

logger = logging.getLogger(__name__)


class TerminateSessionsUseCase:
    """
    Use case for terminating sessions.

    Business Rules:
    - A user may only terminate sessions among their own active sessions
    - Terminating the caller's current session requires clearing cookies
    - "Log out other devices" keeps the current session when it is known,
      otherwise every session is terminated and cookies are cleared
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def terminate_one(
        self,
        user_id: int,
        session_id: UUID,
        current_session_id: Optional[UUID] = None,
    ) -> Result[TerminateSessionResponse]:
        """
        Terminate a specific session.

        Args:
            user_id: Requesting user
            session_id: Session to terminate
            current_session_id: Session the request was made from, if known

        Returns:
            Result with TerminateSessionResponse, or Error(NOT_AUTHORIZED)
        """
        async with self.uow:
            active_sessions = await self.uow.sessions.find_active_by_user(user_id)
            if not any(s.id == session_id for s in active_sessions):
                return Return.err(
                    Error("NOT_AUTHORIZED", "Session not found or not authorized")
                )

            await self.uow.sessions.invalidate(session_id)
            await self.uow.commit()

        logger.info(f"Session {session_id} of user {user_id} terminated")

        is_current = current_session_id is not None and session_id == current_session_id
        return Return.ok(
            TerminateSessionResponse(
                session_id=str(session_id),
                is_current=is_current,
                clear_cookies=is_current,
            )
        )

    @store_guarded
    async def terminate_all_except_current(
        self, user_id: int, current_session_id: Optional[UUID] = None
    ) -> Result[TerminateAllSessionsResponse]:
        """
        Terminate every session of the user except the current one.

        Args:
            user_id: Requesting user
            current_session_id: Session to keep; None terminates all sessions

        Returns:
            Result with TerminateAllSessionsResponse
        """
        async with self.uow:
            count = await self.uow.sessions.invalidate_all_for_user(
                user_id, except_session_id=current_session_id
            )
            await self.uow.commit()

        logger.info(f"{count} session(s) of user {user_id} terminated")

        return Return.ok(
            TerminateAllSessionsResponse(
                invalidated_count=count,
                kept_session_id=str(current_session_id) if current_session_id else None,
                clear_cookies=current_session_id is None,
            )
        )
