"""
Blog Use Case DTOs
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from src.domain.entities import Blog, User


class BlogCommand(BaseModel):
    """Validated title/content for creating or updating a blog"""

    title: str
    content: str


class AuthorInfo(BaseModel):
    """Public author fields embedded in blog responses"""

    id: int
    name: str
    email: str
    avatar: Optional[str] = None


class BlogInfo(BaseModel):
    id: int
    title: str
    content: str
    author: Optional[AuthorInfo] = None
    created_at: datetime
    updated_at: datetime


class BlogListResponse(BaseModel):
    blogs: List[BlogInfo]


class BlogStatusResponse(BaseModel):
    """Whether the caller has liked / saved a blog"""

    blog_id: int
    active: bool


def to_blog_info(blog: Blog, author: Optional[User]) -> BlogInfo:
    return BlogInfo(
        id=blog.id,
        title=blog.title,
        content=blog.content,
        author=(
            AuthorInfo(id=author.id, name=author.name, email=author.email, avatar=author.avatar)
            if author
            else None
        ),
        created_at=blog.created_at,
        updated_at=blog.updated_at,
    )


def to_blog_list(blogs: List[Blog], authors: List[User]) -> BlogListResponse:
    by_id: Dict[int, User] = {a.id: a for a in authors}
    return BlogListResponse(
        blogs=[to_blog_info(b, by_id.get(b.author_id)) for b in blogs]
    )
