"""
Authentication Use Cases

Session lifecycle (register, login, refresh, logout) and the
authentication gates.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .logout_use_case import LogoutUseCase
from .authenticate_use_case import AuthenticateAccessTokenUseCase, ValidateSessionUseCase
from .dtos import (
    RegisterCommand,
    ClientInfo,
    UserInfo,
    AuthResponse,
    RefreshTokenResponse,
    LogoutResponse,
    AuthenticatedUser,
    OptionalIdentity,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "AuthenticateAccessTokenUseCase",
    "ValidateSessionUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "ClientInfo",
    # DTOs - Responses
    "UserInfo",
    "AuthResponse",
    "RefreshTokenResponse",
    "LogoutResponse",
    # DTOs - Identity
    "AuthenticatedUser",
    "OptionalIdentity",
]
