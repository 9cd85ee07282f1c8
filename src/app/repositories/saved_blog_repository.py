from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import SavedBlog


class ISavedBlogRepository(ABC):
    """Saved blog repository interface - application layer"""

    @abstractmethod
    async def get(self, user_id: int, blog_id: int) -> Optional[SavedBlog]:
        """Get a user's saved entry for a blog"""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[SavedBlog]:
        """Get all saved entries of a user, newest first"""
        pass

    @abstractmethod
    async def create(self, saved_blog: SavedBlog) -> SavedBlog:
        """Save a blog"""
        pass

    @abstractmethod
    async def delete(self, saved_blog: SavedBlog) -> None:
        """Remove a saved entry"""
        pass
