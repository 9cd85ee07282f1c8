from datetime import timedelta
from uuid import uuid4

import pytest

from src.api.utils.jwt import create_token, issue_access_token, issue_token_pair
from src.app.repositories.errors import StoreUnavailableError
from src.app.use_cases.auth import (
    AuthenticateAccessTokenUseCase,
    ValidateSessionUseCase,
)
from src.domain.entities import Session, TokenType


# ============================================================================
# Stateless gate
# ============================================================================


def test_access_token_gate_accepts_valid_token():
    result = AuthenticateAccessTokenUseCase().execute(issue_access_token(11))

    assert result.is_ok()
    assert result.value.user_id == 11
    assert result.value.session_id is None


def test_access_token_gate_missing_token():
    result = AuthenticateAccessTokenUseCase().execute(None)

    assert result.is_err()
    assert result.error.code == "TOKEN_MISSING"


def test_access_token_gate_expired_token():
    token = create_token(11, TokenType.access, expires_delta=timedelta(seconds=-1))

    result = AuthenticateAccessTokenUseCase().execute(token)

    assert result.is_err()
    assert result.error.code == "TOKEN_INVALID"


def test_access_token_gate_rejects_refresh_token():
    pair = issue_token_pair(11)

    result = AuthenticateAccessTokenUseCase().execute(pair.refresh_token)

    assert result.is_err()
    assert result.error.code == "TOKEN_INVALID"


# ============================================================================
# Session-checked gate
# ============================================================================


@pytest.mark.asyncio
async def test_session_gate_resolves_user_and_session(mock_uow):
    pair = issue_token_pair(2)
    session = Session(id=uuid4(), user_id=2, refresh_token=pair.refresh_token)
    mock_uow.sessions.find_by_refresh_token.return_value = session

    result = await ValidateSessionUseCase(mock_uow).execute(pair.refresh_token)

    assert result.is_ok()
    assert result.value.user_id == 2
    assert result.value.session_id == session.id


@pytest.mark.asyncio
async def test_session_gate_without_cookie(mock_uow):
    result = await ValidateSessionUseCase(mock_uow).execute(None)

    assert result.is_err()
    assert result.error.code == "SESSION_NOT_FOUND"
    mock_uow.sessions.find_by_refresh_token.assert_not_called()


@pytest.mark.asyncio
async def test_session_gate_bad_signature(mock_uow):
    result = await ValidateSessionUseCase(mock_uow).execute("garbage")

    assert result.is_err()
    assert result.error.code == "SESSION_TOKEN_INVALID"


@pytest.mark.asyncio
async def test_session_gate_invalidated_session(mock_uow):
    pair = issue_token_pair(2)
    mock_uow.sessions.find_by_refresh_token.return_value = Session(
        id=uuid4(), user_id=2, refresh_token=pair.refresh_token, is_valid=False
    )

    result = await ValidateSessionUseCase(mock_uow).execute(pair.refresh_token)

    assert result.is_err()
    assert result.error.code == "SESSION_INVALID"


@pytest.mark.asyncio
async def test_session_gate_missing_row(mock_uow):
    pair = issue_token_pair(2)

    result = await ValidateSessionUseCase(mock_uow).execute(pair.refresh_token)

    assert result.is_err()
    assert result.error.code == "SESSION_INVALID"


@pytest.mark.asyncio
async def test_session_gate_user_mismatch(mock_uow):
    pair = issue_token_pair(2)
    mock_uow.sessions.find_by_refresh_token.return_value = Session(
        id=uuid4(), user_id=99, refresh_token=pair.refresh_token
    )

    result = await ValidateSessionUseCase(mock_uow).execute(pair.refresh_token)

    assert result.is_err()
    assert result.error.code == "SESSION_MISMATCH"


# ============================================================================
# Optional session gate
# ============================================================================


@pytest.mark.asyncio
async def test_optional_gate_resolves(mock_uow):
    pair = issue_token_pair(2)
    session = Session(id=uuid4(), user_id=2, refresh_token=pair.refresh_token)
    mock_uow.sessions.find_by_refresh_token.return_value = session

    identity = await ValidateSessionUseCase(mock_uow).resolve_optional(pair.refresh_token)

    assert identity.resolved is True
    assert identity.identity.session_id == session.id
    assert identity.reason is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "token, reason",
    [(None, "no_cookie"), ("garbage", "token_invalid")],
)
async def test_optional_gate_anonymous_reasons(mock_uow, token, reason):
    identity = await ValidateSessionUseCase(mock_uow).resolve_optional(token)

    assert identity.resolved is False
    assert identity.identity is None
    assert identity.reason == reason


@pytest.mark.asyncio
async def test_optional_gate_invalid_session(mock_uow):
    pair = issue_token_pair(2)

    identity = await ValidateSessionUseCase(mock_uow).resolve_optional(pair.refresh_token)

    assert identity.resolved is False
    assert identity.reason == "session_invalid"


@pytest.mark.asyncio
async def test_optional_gate_store_unavailable_does_not_raise(mock_uow):
    pair = issue_token_pair(2)
    mock_uow.sessions.find_by_refresh_token.side_effect = StoreUnavailableError("down")

    identity = await ValidateSessionUseCase(mock_uow).resolve_optional(pair.refresh_token)

    assert identity.resolved is False
    assert identity.reason == "store_unavailable"
