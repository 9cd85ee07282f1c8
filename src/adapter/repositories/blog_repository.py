from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.blog_repository import IBlogRepository
from src.domain.entities import Blog, Like, SavedBlog


class BlogRepository(IBlogRepository):
    """Blog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def get_by_id(self, blog_id: int) -> Optional[Blog]:
        stmt = select(Blog).where(Blog.id == blog_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def list_all(self) -> List[Blog]:
        stmt = select(Blog).order_by(Blog.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    @translate_store_errors
    async def list_by_author(self, author_id: int, limit: Optional[int] = None) -> List[Blog]:
        stmt = (
            select(Blog)
            .where(Blog.author_id == author_id)
            .order_by(Blog.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    @translate_store_errors
    async def get_by_ids(self, blog_ids: List[int]) -> List[Blog]:
        if not blog_ids:
            return []
        stmt = select(Blog).where(Blog.id.in_(blog_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    @translate_store_errors
    async def create(self, blog: Blog) -> Blog:
        self.session.add(blog)
        await self.session.flush()
        await self.session.refresh(blog)
        return blog

    @translate_store_errors
    async def update(self, blog: Blog) -> Blog:
        self.session.add(blog)
        await self.session.flush()
        await self.session.refresh(blog)
        return blog

    @translate_store_errors
    async def delete(self, blog: Blog) -> None:
        await self.session.execute(delete(Like).where(Like.blog_id == blog.id))
        await self.session.execute(delete(SavedBlog).where(SavedBlog.blog_id == blog.id))
        await self.session.delete(blog)
        await self.session.flush()
