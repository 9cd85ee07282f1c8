"""
User Use Cases
"""

from .manage_users_use_case import ManageUsersUseCase
from .get_profile_use_case import GetProfileUseCase
from .dtos import (
    UpdateUserCommand,
    UserDetails,
    UserListResponse,
    ProfileResponse,
)

__all__ = [
    "ManageUsersUseCase",
    "GetProfileUseCase",
    "UpdateUserCommand",
    "UserDetails",
    "UserListResponse",
    "ProfileResponse",
]
