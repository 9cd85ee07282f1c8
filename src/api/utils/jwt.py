from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import uuid4

from jose import JWTError, jwt

from config import ApplicationConfig
from src.domain.entities import TokenType


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


def _secret_for(token_type: TokenType) -> str:
    if token_type == TokenType.access:
        return ApplicationConfig.JWT_ACCESS_SECRET
    return ApplicationConfig.JWT_REFRESH_SECRET


def _default_expiry(token_type: TokenType) -> timedelta:
    if token_type == TokenType.access:
        return timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_EXPIRE_MINUTES)
    return timedelta(days=ApplicationConfig.REFRESH_TOKEN_EXPIRE_DAYS)


def create_token(
    user_id: int, token_type: TokenType, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a signed JWT for a user

    Args:
        user_id: User ID embedded in the token
        token_type: access or refresh; selects the signing secret
        expires_delta: Token lifetime (defaults to 15 minutes / 30 days)

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": user_id,
        "type": token_type.value,
        # Unique per token so two logins in the same second never collide
        "jti": uuid4().hex,
        "exp": now + (expires_delta if expires_delta is not None else _default_expiry(token_type)),
        "iat": now,
    }
    return jwt.encode(payload, _secret_for(token_type), algorithm=ApplicationConfig.JWT_ALGORITHM)


def issue_access_token(user_id: int) -> str:
    """Mint a short-lived access token (15 minutes)"""
    return create_token(user_id, TokenType.access)


def issue_token_pair(user_id: int) -> TokenPair:
    """
    Issue an access/refresh token pair for a user

    The two tokens are signed with distinct secrets.
    """
    return TokenPair(
        access_token=create_token(user_id, TokenType.access),
        refresh_token=create_token(user_id, TokenType.refresh),
    )


def verify_token(token: str, token_type: TokenType) -> Optional[dict]:
    """
    Verify and decode a JWT

    Args:
        token: JWT token string
        token_type: Expected kind of token

    Returns:
        Decoded payload dict or None if invalid, expired or of the wrong type
    """
    try:
        payload = jwt.decode(
            token, _secret_for(token_type), algorithms=[ApplicationConfig.JWT_ALGORITHM]
        )
    except JWTError:
        return None

    if payload.get("type") != token_type.value or payload.get("user_id") is None:
        return None
    return payload
