from fastapi import status
from src.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Shared error code -> HTTP status mapping for routers
ERROR_STATUS = {
    "TOKEN_MISSING": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_INVALID": status.HTTP_401_UNAUTHORIZED,
    "SESSION_NOT_FOUND": status.HTTP_401_UNAUTHORIZED,
    "SESSION_TOKEN_INVALID": status.HTTP_401_UNAUTHORIZED,
    "SESSION_INVALID": status.HTTP_401_UNAUTHORIZED,
    "SESSION_REVOKED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "SESSION_MISMATCH": status.HTTP_403_FORBIDDEN,
    "NOT_AUTHORIZED": status.HTTP_403_FORBIDDEN,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "BLOG_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "NOT_LIKED": status.HTTP_404_NOT_FOUND,
    "NOT_SAVED": status.HTTP_404_NOT_FOUND,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "ALREADY_LIKED": status.HTTP_409_CONFLICT,
    "ALREADY_SAVED": status.HTTP_409_CONFLICT,
    "CONFLICT": status.HTTP_409_CONFLICT,
}


def raise_for_error(error: Error) -> None:
    """Raise the ClientError/ServerError matching a use case Error"""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
