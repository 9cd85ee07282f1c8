from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        session_obj.is_valid = True
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    @translate_store_errors
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        stmt = select(Session).where(Session.id == session_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def find_by_refresh_token(self, refresh_token: str) -> Optional[Session]:
        """
        Find session by exact refresh token.

        Validity is not filtered here - the caller distinguishes a missing
        row from an invalidated one.
        """
        stmt = select(Session).where(Session.refresh_token == refresh_token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def find_active_by_user(self, user_id: int) -> List[Session]:
        """Get valid sessions for a user, newest first"""
        stmt = (
            select(Session)
            .where(Session.user_id == user_id, Session.is_valid == True)
            .order_by(Session.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    @translate_store_errors
    async def invalidate(self, session_id: UUID) -> bool:
        """Invalidate a specific session; a second call is a no-op"""
        stmt = (
            update(Session)
            .where(Session.id == session_id, Session.is_valid == True)
            .values(is_valid=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    @translate_store_errors
    async def invalidate_all_for_user(
        self, user_id: int, except_session_id: Optional[UUID] = None
    ) -> int:
        """Invalidate all valid sessions for a user, optionally keeping one"""
        stmt = update(Session).where(
            Session.user_id == user_id, Session.is_valid == True
        )
        if except_session_id is not None:
            stmt = stmt.where(Session.id != except_session_id)
        stmt = stmt.values(is_valid=False)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
