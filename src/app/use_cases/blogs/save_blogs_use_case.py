"""
Save Blogs Use Case
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from src.domain.entities import SavedBlog
from .dtos import BlogListResponse, BlogStatusResponse, to_blog_list


class SaveBlogsUseCase:
    """
    Use case for bookmarking blogs.

    Business Rules:
    - The blog must exist
    - A user saves a blog at most once
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def save(self, user_id: int, blog_id: int) -> Result[BlogStatusResponse]:
        async with self.uow:
            blog = await self.uow.blogs.get_by_id(blog_id)
            if blog is None:
                return Return.err(Error("BLOG_NOT_FOUND", "Blog not found"))

            if await self.uow.saved_blogs.get(user_id, blog_id):
                return Return.err(Error("ALREADY_SAVED", "Blog already saved"))

            await self.uow.saved_blogs.create(SavedBlog(user_id=user_id, blog_id=blog_id))
            await self.uow.commit()

            return Return.ok(BlogStatusResponse(blog_id=blog_id, active=True))

    @store_guarded
    async def unsave(self, user_id: int, blog_id: int) -> Result[BlogStatusResponse]:
        async with self.uow:
            saved = await self.uow.saved_blogs.get(user_id, blog_id)
            if saved is None:
                return Return.err(Error("NOT_SAVED", "Blog is not saved"))

            await self.uow.saved_blogs.delete(saved)
            await self.uow.commit()

            return Return.ok(BlogStatusResponse(blog_id=blog_id, active=False))

    @store_guarded
    async def list_saved(self, user_id: int) -> Result[BlogListResponse]:
        async with self.uow:
            saved = await self.uow.saved_blogs.list_by_user(user_id)
            blogs_by_id = {
                b.id: b
                for b in await self.uow.blogs.get_by_ids([s.blog_id for s in saved])
            }
            blogs = [blogs_by_id[s.blog_id] for s in saved if s.blog_id in blogs_by_id]
            authors = await self.uow.users.get_by_ids(
                list({b.author_id for b in blogs})
            )
            return Return.ok(to_blog_list(blogs, authors))

    @store_guarded
    async def status(self, user_id: int, blog_id: int) -> Result[BlogStatusResponse]:
        async with self.uow:
            saved = await self.uow.saved_blogs.get(user_id, blog_id)
            return Return.ok(BlogStatusResponse(blog_id=blog_id, active=saved is not None))
