from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.sessions import ListSessionsUseCase, TerminateSessionsUseCase
from src.domain.entities import Session


def _session(user_id: int, minutes_ago: int = 0, user_agent: str = None) -> Session:
    return Session(
        id=uuid4(),
        user_id=user_id,
        refresh_token=f"token-{uuid4().hex}",
        user_agent=user_agent,
        created_at=datetime.utcnow() - timedelta(minutes=minutes_ago),
    )


@pytest.fixture
def sessions():
    """Two active sessions of user 1, newest first"""
    return [_session(1, 0, "Phone"), _session(1, 10, "Laptop")]


@pytest.mark.asyncio
async def test_list_sessions_flags_current(mock_uow, sessions):
    mock_uow.sessions.find_active_by_user.return_value = sessions

    result = await ListSessionsUseCase(mock_uow).execute(1, sessions[1].id)

    assert result.is_ok()
    listed = result.value.sessions
    assert [s.id for s in listed] == [str(sessions[0].id), str(sessions[1].id)]
    assert [s.is_current for s in listed] == [False, True]
    assert listed[0].user_agent == "Phone"
    mock_uow.sessions.find_active_by_user.assert_called_once_with(1)


@pytest.mark.asyncio
async def test_list_sessions_without_current(mock_uow, sessions):
    mock_uow.sessions.find_active_by_user.return_value = sessions

    result = await ListSessionsUseCase(mock_uow).execute(1)

    assert result.is_ok()
    assert not any(s.is_current for s in result.value.sessions)


@pytest.mark.asyncio
async def test_terminate_other_session(mock_uow, sessions):
    mock_uow.sessions.find_active_by_user.return_value = sessions
    current, other = sessions

    result = await TerminateSessionsUseCase(mock_uow).terminate_one(1, other.id, current.id)

    assert result.is_ok()
    assert result.value.session_id == str(other.id)
    assert result.value.is_current is False
    assert result.value.clear_cookies is False
    mock_uow.sessions.invalidate.assert_called_once_with(other.id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_terminate_current_session_clears_cookies(mock_uow, sessions):
    mock_uow.sessions.find_active_by_user.return_value = sessions
    current = sessions[0]

    result = await TerminateSessionsUseCase(mock_uow).terminate_one(1, current.id, current.id)

    assert result.is_ok()
    assert result.value.is_current is True
    assert result.value.clear_cookies is True


@pytest.mark.asyncio
async def test_terminate_session_of_another_user(mock_uow, sessions):
    """A session id outside the caller's active set is not authorized"""
    mock_uow.sessions.find_active_by_user.return_value = sessions

    result = await TerminateSessionsUseCase(mock_uow).terminate_one(1, uuid4(), sessions[0].id)

    assert result.is_err()
    assert result.error.code == "NOT_AUTHORIZED"
    mock_uow.sessions.invalidate.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_terminate_all_except_current(mock_uow):
    current_id = uuid4()
    mock_uow.sessions.invalidate_all_for_user.return_value = 2

    result = await TerminateSessionsUseCase(mock_uow).terminate_all_except_current(
        1, current_id
    )

    assert result.is_ok()
    assert result.value.invalidated_count == 2
    assert result.value.kept_session_id == str(current_id)
    assert result.value.clear_cookies is False
    mock_uow.sessions.invalidate_all_for_user.assert_called_once_with(
        1, except_session_id=current_id
    )


@pytest.mark.asyncio
async def test_terminate_all_without_current_terminates_everything(mock_uow):
    mock_uow.sessions.invalidate_all_for_user.return_value = 3

    result = await TerminateSessionsUseCase(mock_uow).terminate_all_except_current(1)

    assert result.is_ok()
    assert result.value.invalidated_count == 3
    assert result.value.kept_session_id is None
    assert result.value.clear_cookies is True
    mock_uow.sessions.invalidate_all_for_user.assert_called_once_with(
        1, except_session_id=None
    )
