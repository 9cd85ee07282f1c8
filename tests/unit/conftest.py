import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_ids = AsyncMock(return_value=[])
    uow.users.list_all = AsyncMock(return_value=[])
    uow.users.create = AsyncMock()
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.get_by_id = AsyncMock(return_value=None)
    uow.sessions.find_by_refresh_token = AsyncMock(return_value=None)
    uow.sessions.find_active_by_user = AsyncMock(return_value=[])
    uow.sessions.invalidate = AsyncMock(return_value=True)
    uow.sessions.invalidate_all_for_user = AsyncMock(return_value=0)

    uow.blogs = MagicMock()
    uow.blogs.get_by_id = AsyncMock(return_value=None)
    uow.blogs.get_by_ids = AsyncMock(return_value=[])
    uow.blogs.list_all = AsyncMock(return_value=[])
    uow.blogs.list_by_author = AsyncMock(return_value=[])
    uow.blogs.create = AsyncMock()
    uow.blogs.update = AsyncMock(side_effect=lambda blog: blog)
    uow.blogs.delete = AsyncMock()

    uow.likes = MagicMock()
    uow.likes.get = AsyncMock(return_value=None)
    uow.likes.list_by_user = AsyncMock(return_value=[])
    uow.likes.create = AsyncMock(side_effect=lambda like: like)
    uow.likes.delete = AsyncMock()

    uow.saved_blogs = MagicMock()
    uow.saved_blogs.get = AsyncMock(return_value=None)
    uow.saved_blogs.list_by_user = AsyncMock(return_value=[])
    uow.saved_blogs.create = AsyncMock(side_effect=lambda saved: saved)
    uow.saved_blogs.delete = AsyncMock()
    return uow
