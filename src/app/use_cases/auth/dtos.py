"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    email: str
    name: str
    password: str


class ClientInfo(BaseModel):
    """Descriptive metadata about the client opening a session"""

    user_agent: Optional[str] = None
    ip_address: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User information in authentication responses"""

    id: int
    name: str
    email: str


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    user: UserInfo
    access_token: str
    refresh_token: str
    session_id: str


class RefreshTokenResponse(BaseModel):
    """
    Response for refresh token use case

    Refresh is non-rotating: only a new access token is issued.
    """

    access_token: str
    session_id: str


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    invalidated_count: int
    clear_cookies: bool = True


# ============================================================================
# Identity DTOs (authentication gate results)
# ============================================================================


class AuthenticatedUser(BaseModel):
    """
    Identity resolved by an authentication gate

    session_id is only known when the session-checked gate resolved it;
    access tokens do not carry one.
    """

    user_id: int
    session_id: Optional[UUID] = None


class OptionalIdentity(BaseModel):
    """
    Outcome of the non-rejecting session gate

    Either resolved (identity set) or anonymous (reason set); the request
    proceeds in both cases.
    """

    resolved: bool
    identity: Optional[AuthenticatedUser] = None
    reason: Optional[str] = None

    @classmethod
    def of(cls, identity: AuthenticatedUser) -> "OptionalIdentity":
        return cls(resolved=True, identity=identity)

    @classmethod
    def anonymous(cls, reason: str) -> "OptionalIdentity":
        return cls(resolved=False, reason=reason)
