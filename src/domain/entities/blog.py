"""
Blog Entity

A blog post written by a user.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class Blog(SQLModel, table=True):
    """
    Blog entity - a post authored by a single user.

    Business Rules:
    - Only the author may update or delete a blog
    - Listed newest first
    """

    __tablename__ = "blogs"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    content: str
    author_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
