from typing import Optional

from fastapi import APIRouter, Body, Depends, Request, Response, status
from pydantic import BaseModel, EmailStr, Field

from src.libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.utils.cookies import (
    REFRESH_TOKEN_COOKIE,
    clear_auth_cookies,
    set_access_cookie,
    set_auth_cookies,
)
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthenticatedUser,
    ClientInfo,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
    UserInfo,
)
from src.depends import get_session_or_user, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


def client_info(request: Request) -> ClientInfo:
    return ClientInfo(
        user_agent=request.headers.get("user-agent"),
        ip_address=request.client.host if request.client else None,
    )


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    name: str = Field(..., min_length=2, description="Display name (min 2 chars)")
    password: str = Field(..., min_length=6, description="User password (min 6 chars)")


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password")


class RefreshRequest(BaseModel):
    """Refresh payload for clients that cannot send the refresh cookie"""

    refresh_token: Optional[str] = Field(default=None, description="Refresh token")


class AuthSuccessResponse(BaseModel):
    """
    Register/login response

    Tokens travel as httpOnly cookies; the access token is echoed for
    Authorization-header clients. The refresh token never appears in the body.
    """

    message: str
    user: UserInfo
    session_id: str
    access_token: str


class RefreshResponse(BaseModel):
    message: str
    session_id: str
    access_token: str


class LogoutResponse(BaseModel):
    message: str
    invalidated_count: int


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AuthSuccessResponse
)
async def register(
    request: RegisterRequest,
    http_request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Registration

    Creates the account and logs it in: a session is opened and both token
    cookies are set.

    Raises:
        - 409 Conflict: Email already exists
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Store failure
    """
    command = RegisterCommand(
        email=request.email, name=request.name, password=request.password
    )

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command, client_info(http_request))

    if result.is_err():
        error = result.error
        if error.code in ("EMAIL_ALREADY_EXISTS", "CONFLICT"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    data = result.value
    set_auth_cookies(response, data.access_token, data.refresh_token)
    return AuthSuccessResponse(
        message="Registration successful",
        user=data.user,
        session_id=data.session_id,
        access_token=data.access_token,
    )


@router.post(
    "/login", status_code=status.HTTP_201_CREATED, response_model=AuthSuccessResponse
)
async def login(
    request: LoginRequest,
    http_request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Login

    Opens a new session for this client; other sessions stay active.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Store failure
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(
        request.email, request.password, client_info(http_request)
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "CONFLICT":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    data = result.value
    set_auth_cookies(response, data.access_token, data.refresh_token)
    return AuthSuccessResponse(
        message="Login successful",
        user=data.user,
        session_id=data.session_id,
        access_token=data.access_token,
    )


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=RefreshResponse)
async def refresh(
    http_request: Request,
    response: Response,
    request: Optional[RefreshRequest] = Body(default=None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Refresh Access Token

    Reads the refresh token from the cookie (or the JSON body) and sets a new
    access token cookie. The refresh token is not rotated.

    Raises:
        - 401 Unauthorized: Missing/invalid token or revoked session
        - 500 Internal Server Error: Store failure
    """
    token = http_request.cookies.get(REFRESH_TOKEN_COOKIE)
    if not token and request is not None:
        token = request.refresh_token

    if not token:
        raise ClientError(
            Error("TOKEN_MISSING", "Refresh token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    use_case = RefreshTokenUseCase(uow)
    result = await use_case.execute(token)

    if result.is_err():
        error = result.error
        if error.code in ("TOKEN_INVALID", "SESSION_REVOKED"):
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    data = result.value
    set_access_cookie(response, data.access_token)
    return RefreshResponse(
        message="Access token refreshed",
        session_id=data.session_id,
        access_token=data.access_token,
    )


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    response: Response,
    identity: AuthenticatedUser = Depends(get_session_or_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Logout

    With a live session cookie only that session ends. When only an access
    token identifies the caller, every session of the user ends.

    Raises:
        - 401 Unauthorized: No session and no valid access token
        - 500 Internal Server Error: Store failure
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(
        session_id=identity.session_id, user_id=identity.user_id
    )

    if result.is_err():
        raise ServerError(result.error)

    if result.value.clear_cookies:
        clear_auth_cookies(response)

    return LogoutResponse(
        message="Logged out successfully.",
        invalidated_count=result.value.invalidated_count,
    )
