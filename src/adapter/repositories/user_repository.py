from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import Blog, Like, SavedBlog, Session, User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def get_by_ids(self, user_ids: List[int]) -> List[User]:
        """Get users by a list of IDs"""
        if not user_ids:
            return []
        stmt = select(User).where(User.id.in_(user_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    @translate_store_errors
    async def list_all(self) -> List[User]:
        """Get all users"""
        stmt = select(User).order_by(User.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    @translate_store_errors
    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    @translate_store_errors
    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    @translate_store_errors
    async def delete(self, user: User) -> None:
        """Delete a user and everything it owns"""
        authored = select(Blog.id).where(Blog.author_id == user.id)
        await self.session.execute(delete(Like).where(Like.blog_id.in_(authored)))
        await self.session.execute(
            delete(SavedBlog).where(SavedBlog.blog_id.in_(authored))
        )
        await self.session.execute(delete(Like).where(Like.user_id == user.id))
        await self.session.execute(delete(SavedBlog).where(SavedBlog.user_id == user.id))
        await self.session.execute(delete(Blog).where(Blog.author_id == user.id))
        await self.session.execute(delete(Session).where(Session.user_id == user.id))
        await self.session.delete(user)
        await self.session.flush()
