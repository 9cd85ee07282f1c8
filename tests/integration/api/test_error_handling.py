from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.app.repositories.errors import StoreUnavailableError
from src.depends import get_unit_of_work
from tests.integration.helpers import API


@pytest.fixture
def failing_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(side_effect=StoreUnavailableError("connection refused"))
    uow.sessions = MagicMock()
    uow.sessions.find_by_refresh_token = AsyncMock(
        side_effect=StoreUnavailableError("connection refused")
    )
    return uow


@pytest_asyncio.fixture
async def failing_client(app, failing_uow):
    async def override_get_unit_of_work():
        yield failing_uow

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_store_failure_is_a_server_error(failing_client: AsyncClient):
    response = await failing_client.post(
        f"{API}/auth/login", json={"email": "ada@example.com", "password": "secret123"}
    )

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"


@pytest.mark.asyncio
async def test_store_failure_on_refresh(failing_client: AsyncClient):
    from src.api.utils.jwt import issue_token_pair

    response = await failing_client.post(
        f"{API}/auth/refresh", json={"refresh_token": issue_token_pair(1).refresh_token}
    )

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    assert (await client.get("/health")).json() == {"status": "ok"}
    assert (await client.get("/")).json() == {"status": "ok"}
