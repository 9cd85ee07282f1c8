"""
Manage Blogs Use Case

Create, read, update and delete blog posts.
"""

from datetime import datetime

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guarded
from src.domain.entities import Blog
from .dtos import BlogCommand, BlogInfo, BlogListResponse, to_blog_info, to_blog_list


class ManageBlogsUseCase:
    """
    Use case for blog CRUD.

    Business Rules:
    - Anyone may read blogs; listing is newest first
    - Only an authenticated user may create a blog, as its author
    - Only the author may update or delete a blog
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guarded
    async def create(self, author_id: int, command: BlogCommand) -> Result[BlogInfo]:
        async with self.uow:
            author = await self.uow.users.get_by_id(author_id)
            if author is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            blog = Blog(title=command.title, content=command.content, author_id=author_id)
            blog = await self.uow.blogs.create(blog)
            await self.uow.commit()

            return Return.ok(to_blog_info(blog, author))

    @store_guarded
    async def list_all(self) -> Result[BlogListResponse]:
        async with self.uow:
            blogs = await self.uow.blogs.list_all()
            authors = await self.uow.users.get_by_ids(
                list({b.author_id for b in blogs})
            )
            return Return.ok(to_blog_list(blogs, authors))

    @store_guarded
    async def get(self, blog_id: int) -> Result[BlogInfo]:
        async with self.uow:
            blog = await self.uow.blogs.get_by_id(blog_id)
            if blog is None:
                return Return.err(Error("BLOG_NOT_FOUND", "Blog not found"))

            author = await self.uow.users.get_by_id(blog.author_id)
            return Return.ok(to_blog_info(blog, author))

    @store_guarded
    async def update(
        self, requesting_user_id: int, blog_id: int, command: BlogCommand
    ) -> Result[BlogInfo]:
        async with self.uow:
            blog = await self.uow.blogs.get_by_id(blog_id)
            if blog is None:
                return Return.err(Error("BLOG_NOT_FOUND", "Blog not found"))

            if blog.author_id != requesting_user_id:
                return Return.err(
                    Error("FORBIDDEN", "You are not authorized to modify this blog")
                )

            blog.title = command.title
            blog.content = command.content
            blog.updated_at = datetime.utcnow()
            blog = await self.uow.blogs.update(blog)
            author = await self.uow.users.get_by_id(blog.author_id)
            await self.uow.commit()

            return Return.ok(to_blog_info(blog, author))

    @store_guarded
    async def delete(self, requesting_user_id: int, blog_id: int) -> Result[None]:
        async with self.uow:
            blog = await self.uow.blogs.get_by_id(blog_id)
            if blog is None:
                return Return.err(Error("BLOG_NOT_FOUND", "Blog not found"))

            if blog.author_id != requesting_user_id:
                return Return.err(
                    Error("FORBIDDEN", "You are not authorized to modify this blog")
                )

            await self.uow.blogs.delete(blog)
            await self.uow.commit()

            return Return.ok(None)
