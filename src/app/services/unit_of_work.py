from abc import ABC, abstractmethod

from src.app.repositories.blog_repository import IBlogRepository
from src.app.repositories.like_repository import ILikeRepository
from src.app.repositories.saved_blog_repository import ISavedBlogRepository
from src.app.repositories.session_repository import ISessionRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    sessions: ISessionRepository
    blogs: IBlogRepository
    likes: ILikeRepository
    saved_blogs: ISavedBlogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
