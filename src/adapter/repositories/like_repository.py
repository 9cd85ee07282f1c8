from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.like_repository import ILikeRepository
from src.domain.entities import Like


class LikeRepository(ILikeRepository):
    """Like repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def get(self, user_id: int, blog_id: int) -> Optional[Like]:
        stmt = select(Like).where(Like.user_id == user_id, Like.blog_id == blog_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def list_by_user(self, user_id: int) -> List[Like]:
        stmt = (
            select(Like)
            .where(Like.user_id == user_id)
            .order_by(Like.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    @translate_store_errors
    async def create(self, like: Like) -> Like:
        self.session.add(like)
        await self.session.flush()
        await self.session.refresh(like)
        return like

    @translate_store_errors
    async def delete(self, like: Like) -> None:
        await self.session.delete(like)
        await self.session.flush()
