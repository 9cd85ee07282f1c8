"""
Session Management DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class SessionInfo(BaseModel):
    """Client-safe view of an active session"""

    id: str
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    created_at: datetime
    is_current: bool


class SessionListResponse(BaseModel):
    """Active sessions of a user, newest first"""

    sessions: List[SessionInfo]


class TerminateSessionResponse(BaseModel):
    """Result of terminating one session"""

    session_id: str
    is_current: bool
    clear_cookies: bool


class TerminateAllSessionsResponse(BaseModel):
    """Result of terminating every session except (possibly) the current one"""

    invalidated_count: int
    kept_session_id: Optional[str] = None
    clear_cookies: bool
