"""
Session Management Use Cases
"""

from .list_sessions_use_case import ListSessionsUseCase
from .terminate_sessions_use_case import TerminateSessionsUseCase
from .dtos import (
    SessionInfo,
    SessionListResponse,
    TerminateSessionResponse,
    TerminateAllSessionsResponse,
)

__all__ = [
    "ListSessionsUseCase",
    "TerminateSessionsUseCase",
    "SessionInfo",
    "SessionListResponse",
    "TerminateSessionResponse",
    "TerminateAllSessionsResponse",
]
