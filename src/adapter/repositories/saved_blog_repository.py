from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.saved_blog_repository import ISavedBlogRepository
from src.domain.entities import SavedBlog


class SavedBlogRepository(ISavedBlogRepository):
    """Saved blog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def get(self, user_id: int, blog_id: int) -> Optional[SavedBlog]:
        stmt = select(SavedBlog).where(
            SavedBlog.user_id == user_id, SavedBlog.blog_id == blog_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def list_by_user(self, user_id: int) -> List[SavedBlog]:
        stmt = (
            select(SavedBlog)
            .where(SavedBlog.user_id == user_id)
            .order_by(SavedBlog.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    @translate_store_errors
    async def create(self, saved_blog: SavedBlog) -> SavedBlog:
        self.session.add(saved_blog)
        await self.session.flush()
        await self.session.refresh(saved_blog)
        return saved_blog

    @translate_store_errors
    async def delete(self, saved_blog: SavedBlog) -> None:
        await self.session.delete(saved_blog)
        await self.session.flush()
