"""
Blog Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import TokenType

# Export all entities
from .user import User
from .session import Session
from .blog import Blog
from .like import Like
from .saved_blog import SavedBlog

__all__ = [
    # Enums
    "TokenType",
    # Entities
    "User",
    "Session",
    "Blog",
    "Like",
    "SavedBlog",
]
