from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Blog


class IBlogRepository(ABC):
    """Blog repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, blog_id: int) -> Optional[Blog]:
        """Get blog by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Blog]:
        """Get all blogs, newest first"""
        pass

    @abstractmethod
    async def list_by_author(self, author_id: int, limit: Optional[int] = None) -> List[Blog]:
        """Get blogs written by a user, newest first"""
        pass

    @abstractmethod
    async def get_by_ids(self, blog_ids: List[int]) -> List[Blog]:
        """Get blogs by a list of IDs"""
        pass

    @abstractmethod
    async def create(self, blog: Blog) -> Blog:
        """Create a new blog"""
        pass

    @abstractmethod
    async def update(self, blog: Blog) -> Blog:
        """Update existing blog"""
        pass

    @abstractmethod
    async def delete(self, blog: Blog) -> None:
        """Delete a blog together with its likes and saved entries"""
        pass
