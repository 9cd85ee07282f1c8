from fastapi import Response

from config import ApplicationConfig

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"


def _set_cookie(response: Response, key: str, value: str, max_age: int) -> None:
    response.set_cookie(
        key=key,
        value=value,
        max_age=max_age,
        httponly=True,
        secure=ApplicationConfig.ENVIRONMENT == "production",
        samesite="strict",
    )


def set_access_cookie(response: Response, access_token: str) -> None:
    """Access token cookie: 15 minutes"""
    _set_cookie(
        response,
        ACCESS_TOKEN_COOKIE,
        access_token,
        ApplicationConfig.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


def set_auth_cookies(response: Response, access_token: str, refresh_token: str) -> None:
    """Set both token cookies after register/login"""
    set_access_cookie(response, access_token)
    _set_cookie(
        response,
        REFRESH_TOKEN_COOKIE,
        refresh_token,
        ApplicationConfig.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
    )


def clear_auth_cookies(response: Response) -> None:
    """Clear both token cookies (full logout)"""
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    response.delete_cookie(REFRESH_TOKEN_COOKIE)
