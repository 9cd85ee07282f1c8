"""
User Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class UpdateUserCommand(BaseModel):
    """Fields to change; None means unchanged"""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserDetails(BaseModel):
    """User fields safe to return (no password hash)"""

    id: int
    name: str
    email: str
    avatar: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class UserListResponse(BaseModel):
    users: List[UserDetails]


class ProfileBlog(BaseModel):
    id: int
    title: str
    created_at: datetime


class ProfileSession(BaseModel):
    id: str
    user_agent: Optional[str] = None
    created_at: datetime


class ProfileResponse(BaseModel):
    """Current user with recent blogs and active sessions"""

    user: UserDetails
    blogs: List[ProfileBlog]
    sessions: List[ProfileSession]
