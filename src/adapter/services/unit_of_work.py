from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.blog_repository import BlogRepository
from src.adapter.repositories.like_repository import LikeRepository
from src.adapter.repositories.saved_blog_repository import SavedBlogRepository
from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.repositories.errors import DuplicateRecordError, StoreUnavailableError
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.blogs = BlogRepository(self.session)
        self.likes = LikeRepository(self.session)
        self.saved_blogs = SavedBlogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as exc:
            raise DuplicateRecordError("commit: constraint violated") from exc
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("commit: store unavailable") from exc

    async def rollback(self):
        await self.session.rollback()
