from httpx import AsyncClient

API = "/api"


async def register(client: AsyncClient, user: dict) -> dict:
    response = await client.post(f"{API}/auth/register", json=user)
    assert response.status_code == 201, response.text
    return response.json()


async def login(client: AsyncClient, user: dict, user_agent: str = "pytest") -> dict:
    response = await client.post(
        f"{API}/auth/login",
        json={"email": user["email"], "password": user["password"]},
        headers={"User-Agent": user_agent},
    )
    assert response.status_code == 201, response.text
    return response.json()
