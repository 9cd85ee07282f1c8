from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Like


class ILikeRepository(ABC):
    """Like repository interface - application layer"""

    @abstractmethod
    async def get(self, user_id: int, blog_id: int) -> Optional[Like]:
        """Get a user's like on a blog"""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[Like]:
        """Get all likes by a user, newest first"""
        pass

    @abstractmethod
    async def create(self, like: Like) -> Like:
        """Create a new like"""
        pass

    @abstractmethod
    async def delete(self, like: Like) -> None:
        """Remove a like"""
        pass
