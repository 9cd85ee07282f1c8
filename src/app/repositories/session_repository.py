from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session (is_valid=True). Raises DuplicateRecordError on token reuse."""
        pass

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def find_by_refresh_token(self, refresh_token: str) -> Optional[Session]:
        """Find session by exact refresh token, regardless of validity"""
        pass

    @abstractmethod
    async def find_active_by_user(self, user_id: int) -> List[Session]:
        """Get valid sessions for a user, newest first"""
        pass

    @abstractmethod
    async def invalidate(self, session_id: UUID) -> bool:
        """Invalidate a session. Idempotent; returns True if a valid row was flipped."""
        pass

    @abstractmethod
    async def invalidate_all_for_user(
        self, user_id: int, except_session_id: Optional[UUID] = None
    ) -> int:
        """Invalidate all valid sessions for a user, optionally keeping one. Returns count."""
        pass
