from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from src.api.error import ClientError, ServerError
from src.api.utils.cookies import clear_auth_cookies
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedUser
from src.app.use_cases.sessions import (
    ListSessionsUseCase,
    SessionListResponse,
    TerminateSessionsUseCase,
)
from src.depends import get_current_session, get_session_or_user, get_unit_of_work

router = APIRouter(prefix="/sessions", tags=["Sessions"])


class TerminateSessionResponse(BaseModel):
    """Response for specific session termination"""

    message: str
    session_id: str


class TerminateAllSessionsResponse(BaseModel):
    """Response for terminating all other sessions"""

    message: str
    invalidated_count: int
    kept_session_id: Optional[str] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=SessionListResponse)
async def list_sessions(
    identity: AuthenticatedUser = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Active Sessions

    Newest first; the session the request was made from has is_current=true.
    """
    use_case = ListSessionsUseCase(uow)
    result = await use_case.execute(identity.user_id, identity.session_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_200_OK,
    response_model=TerminateSessionResponse,
)
async def terminate_session(
    session_id: UUID,
    response: Response,
    identity: AuthenticatedUser = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Terminate Specific Session

    Logs out one device. Terminating the current session also clears cookies.

    Raises:
        - 403 Forbidden: Session is not one of the caller's active sessions
        - 500 Internal Server Error: Store failure
    """
    use_case = TerminateSessionsUseCase(uow)
    result = await use_case.terminate_one(
        identity.user_id, session_id, identity.session_id
    )

    if result.is_err():
        error = result.error
        if error.code == "NOT_AUTHORIZED":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    data = result.value
    if data.clear_cookies:
        clear_auth_cookies(response)

    return TerminateSessionResponse(
        message="Current session terminated" if data.is_current else "Session terminated",
        session_id=data.session_id,
    )


@router.delete(
    "",
    status_code=status.HTTP_200_OK,
    response_model=TerminateAllSessionsResponse,
)
async def terminate_all_sessions(
    response: Response,
    identity: AuthenticatedUser = Depends(get_session_or_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Terminate All Other Sessions

    Keeps the current session when the session cookie identifies it;
    otherwise terminates every session and clears cookies.
    """
    use_case = TerminateSessionsUseCase(uow)
    result = await use_case.terminate_all_except_current(
        identity.user_id, identity.session_id
    )

    if result.is_err():
        raise ServerError(result.error)

    data = result.value
    if data.clear_cookies:
        clear_auth_cookies(response)

    return TerminateAllSessionsResponse(
        message=(
            "All sessions terminated"
            if data.clear_cookies
            else "All other sessions terminated"
        ),
        invalidated_count=data.invalidated_count,
        kept_session_id=data.kept_session_id,
    )
