from datetime import datetime, timedelta

import pytest

from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.repositories.errors import DuplicateRecordError
from src.domain.entities import Session, User


@pytest.fixture
def sessions(db_session):
    return SessionRepository(db_session)


async def _user(db_session, email="ada@example.com") -> int:
    user = await UserRepository(db_session).create(
        User(email=email, name="Ada", password_hash="x")
    )
    return user.id


@pytest.mark.asyncio
async def test_create_and_find_by_refresh_token(db_session, sessions):
    user_id = await _user(db_session)

    created = await sessions.create(
        Session(user_id=user_id, refresh_token="token-a", user_agent="Phone")
    )
    found = await sessions.find_by_refresh_token("token-a")

    assert found is not None
    assert found.id == created.id
    assert found.is_valid is True
    assert found.user_agent == "Phone"
    assert await sessions.find_by_refresh_token("token-unknown") is None


@pytest.mark.asyncio
async def test_find_by_refresh_token_returns_invalidated_rows(db_session, sessions):
    user_id = await _user(db_session)
    created = await sessions.create(Session(user_id=user_id, refresh_token="token-a"))

    await sessions.invalidate(created.id)
    found = await sessions.find_by_refresh_token("token-a")

    assert found is not None
    assert found.is_valid is False


@pytest.mark.asyncio
async def test_refresh_token_is_unique(db_session, sessions):
    user_id = await _user(db_session)
    await sessions.create(Session(user_id=user_id, refresh_token="token-a"))

    with pytest.raises(DuplicateRecordError):
        await sessions.create(Session(user_id=user_id, refresh_token="token-a"))


@pytest.mark.asyncio
async def test_invalidate_is_idempotent(db_session, sessions):
    user_id = await _user(db_session)
    created = await sessions.create(Session(user_id=user_id, refresh_token="token-a"))

    assert await sessions.invalidate(created.id) is True
    assert await sessions.invalidate(created.id) is False

    session = await sessions.get_by_id(created.id)
    assert session.is_valid is False


@pytest.mark.asyncio
async def test_find_active_by_user_newest_first(db_session, sessions):
    user_id = await _user(db_session)
    other_user_id = await _user(db_session, "grace@example.com")
    now = datetime.utcnow()

    oldest = await sessions.create(
        Session(user_id=user_id, refresh_token="t1", created_at=now - timedelta(hours=2))
    )
    newest = await sessions.create(
        Session(user_id=user_id, refresh_token="t2", created_at=now)
    )
    middle = await sessions.create(
        Session(user_id=user_id, refresh_token="t3", created_at=now - timedelta(hours=1))
    )
    revoked = await sessions.create(Session(user_id=user_id, refresh_token="t4"))
    await sessions.create(Session(user_id=other_user_id, refresh_token="t5"))
    await sessions.invalidate(revoked.id)

    active = await sessions.find_active_by_user(user_id)

    assert [s.id for s in active] == [newest.id, middle.id, oldest.id]


@pytest.mark.asyncio
async def test_invalidate_all_except_current(db_session, sessions):
    user_id = await _user(db_session)
    other_user_id = await _user(db_session, "grace@example.com")
    keep = await sessions.create(Session(user_id=user_id, refresh_token="t1"))
    await sessions.create(Session(user_id=user_id, refresh_token="t2"))
    await sessions.create(Session(user_id=user_id, refresh_token="t3"))
    await sessions.create(Session(user_id=other_user_id, refresh_token="t4"))

    count = await sessions.invalidate_all_for_user(user_id, except_session_id=keep.id)

    assert count == 2
    active = await sessions.find_active_by_user(user_id)
    assert [s.id for s in active] == [keep.id]
    assert len(await sessions.find_active_by_user(other_user_id)) == 1


@pytest.mark.asyncio
async def test_invalidate_all_counts_only_valid_sessions(db_session, sessions):
    user_id = await _user(db_session)
    first = await sessions.create(Session(user_id=user_id, refresh_token="t1"))
    await sessions.create(Session(user_id=user_id, refresh_token="t2"))
    await sessions.invalidate(first.id)

    assert await sessions.invalidate_all_for_user(user_id) == 1
    assert await sessions.invalidate_all_for_user(user_id) == 0
