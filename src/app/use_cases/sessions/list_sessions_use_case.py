from typing import Optional
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from .dtos import SessionInfo, SessionListResponse


class ListSessionsUseCase:
    """Enumerate a user's active sessions, flagging the caller's own"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def execute(
        self, user_id: int, current_session_id: Optional[UUID] = None
    ) -> Result[SessionListResponse]:
        async with self.uow:
            sessions = await self.uow.sessions.find_active_by_user(user_id)

            return Return.ok(
                SessionListResponse(
                    sessions=[
                        SessionInfo(
                            id=str(s.id),
                            user_agent=s.user_agent,
                            ip_address=s.ip_address,
                            created_at=s.created_at,
                            is_current=s.id == current_session_id,
                        )
                        for s in sessions
                    ]
                )
            )
