"""
SavedBlog Entity

A blog bookmarked by a user for later reading.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel, UniqueConstraint


class SavedBlog(SQLModel, table=True):
    """
    SavedBlog entity - a user bookmarking a blog.

    Business Rules:
    - A user can save a given blog at most once
    """

    __tablename__ = "saved_blogs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    blog_id: int = Field(foreign_key="blogs.id", nullable=False, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        UniqueConstraint("user_id", "blog_id", name="uq_saved_blog_user_blog"),
    )
