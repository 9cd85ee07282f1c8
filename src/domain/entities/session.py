"""
Session Entity

One authenticated client/device, backed by a refresh token.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Session(SQLModel, table=True):
    """
    Session entity - one logged-in device or client.

    Business Rules:
    - refresh_token is unique across all sessions
    - is_valid is True at creation and flips to False exactly once
    - Invalidation is logical; rows are kept for audit history
    - user_agent and ip_address are captured at creation only
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    refresh_token: str = Field(unique=True, index=True, max_length=1024)
    user_agent: Optional[str] = Field(default=None, max_length=512)
    ip_address: Optional[str] = Field(default=None, max_length=64)
    is_valid: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_session_user_valid", "user_id", "is_valid"),)
