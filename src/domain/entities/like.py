"""
Like Entity

Marks that a user liked a blog.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel, UniqueConstraint


class Like(SQLModel, table=True):
    """
    Like entity - a user liking a blog.

    Business Rules:
    - A user can like a given blog at most once
    """

    __tablename__ = "likes"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    blog_id: int = Field(foreign_key="blogs.id", nullable=False, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (UniqueConstraint("user_id", "blog_id", name="uq_like_user_blog"),)
