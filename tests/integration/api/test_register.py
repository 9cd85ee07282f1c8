import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import Session, User
from tests.integration.helpers import API, register


@pytest.mark.asyncio
async def test_successful_register(client: AsyncClient, db_session, test_data):
    """Register creates the account, opens a session and sets both cookies"""
    ada = test_data.get("ada")

    response = await client.post(f"{API}/auth/register", json=ada)

    assert response.status_code == 201
    data = response.json()
    assert data["user"]["email"] == ada["email"]
    assert data["user"]["name"] == ada["name"]
    assert "refresh_token" not in data
    assert data["access_token"]

    assert client.cookies.get("accessToken") == data["access_token"]
    assert client.cookies.get("refreshToken")

    user = (await db_session.exec(select(User).where(User.email == ada["email"]))).one()
    assert user.password_hash != ada["password"]

    sessions = (await db_session.exec(select(Session).where(Session.user_id == user.id))).all()
    assert len(sessions) == 1
    assert str(sessions[0].id) == data["session_id"]
    assert sessions[0].is_valid is True
    assert sessions[0].refresh_token == client.cookies.get("refreshToken")


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, test_data):
    ada = test_data.get("ada")
    await register(client, ada)

    response = await client.post(f"{API}/auth/register", json=ada)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"email": "not-an-email", "name": "Ada", "password": "secret123"},
        {"email": "ada@example.com", "name": "A", "password": "secret123"},
        {"email": "ada@example.com", "name": "Ada", "password": "short"},
        {"email": "ada@example.com", "password": "secret123"},
    ],
)
async def test_register_invalid_payload(client: AsyncClient, payload):
    response = await client.post(f"{API}/auth/register", json=payload)

    assert response.status_code == 422
