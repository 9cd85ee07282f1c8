"""
Like Blogs Use Case
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from src.domain.entities import Like
from .dtos import BlogListResponse, BlogStatusResponse, to_blog_list


class LikeBlogsUseCase:
    """
    Use case for liking blogs.

    Business Rules:
    - The blog must exist
    - A user likes a blog at most once
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def like(self, user_id: int, blog_id: int) -> Result[BlogStatusResponse]:
        async with self.uow:
            blog = await self.uow.blogs.get_by_id(blog_id)
            if blog is None:
                return Return.err(Error("BLOG_NOT_FOUND", "Blog not found"))

            if await self.uow.likes.get(user_id, blog_id):
                return Return.err(Error("ALREADY_LIKED", "Blog already liked"))

            await self.uow.likes.create(Like(user_id=user_id, blog_id=blog_id))
            await self.uow.commit()

            return Return.ok(BlogStatusResponse(blog_id=blog_id, active=True))

    @store_guarded
    async def unlike(self, user_id: int, blog_id: int) -> Result[BlogStatusResponse]:
        async with self.uow:
            like = await self.uow.likes.get(user_id, blog_id)
            if like is None:
                return Return.err(Error("NOT_LIKED", "Blog is not liked"))

            await self.uow.likes.delete(like)
            await self.uow.commit()

            return Return.ok(BlogStatusResponse(blog_id=blog_id, active=False))

    @store_guarded
    async def list_liked(self, user_id: int) -> Result[BlogListResponse]:
        async with self.uow:
            likes = await self.uow.likes.list_by_user(user_id)
            blogs_by_id = {
                b.id: b
                for b in await self.uow.blogs.get_by_ids([like.blog_id for like in likes])
            }
            # Most recently liked first
            blogs = [blogs_by_id[like.blog_id] for like in likes if like.blog_id in blogs_by_id]
            authors = await self.uow.users.get_by_ids(
                list({b.author_id for b in blogs})
            )
            return Return.ok(to_blog_list(blogs, authors))

    @store_guarded
    async def status(self, user_id: int, blog_id: int) -> Result[BlogStatusResponse]:
        async with self.uow:
            like = await self.uow.likes.get(user_id, blog_id)
            return Return.ok(BlogStatusResponse(blog_id=blog_id, active=like is not None))
