"""
Blog Use Cases

Blog CRUD plus likes and saved blogs.
"""

from .manage_blogs_use_case import ManageBlogsUseCase
from .like_blogs_use_case import LikeBlogsUseCase
from .save_blogs_use_case import SaveBlogsUseCase
from .dtos import (
    BlogCommand,
    AuthorInfo,
    BlogInfo,
    BlogListResponse,
    BlogStatusResponse,
)

__all__ = [
    "ManageBlogsUseCase",
    "LikeBlogsUseCase",
    "SaveBlogsUseCase",
    "BlogCommand",
    "AuthorInfo",
    "BlogInfo",
    "BlogListResponse",
    "BlogStatusResponse",
]
