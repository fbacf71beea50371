import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test the liveness endpoint."""
    response = await client.get("/")
    assert response.status_code == 200
    assert response.text == "Backend server running successfully!"


@pytest.mark.asyncio
async def test_health_check_is_plain_text(client: AsyncClient):
    """Test that the liveness endpoint answers in plain text."""
    response = await client.get("/")
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_cors_allows_any_origin(client: AsyncClient):
    """Test that cross-origin requests are permitted."""
    response = await client.get("/", headers={"Origin": "http://frontend.example"})
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_unknown_route_returns_json_error(client: AsyncClient):
    """Test that even router-level 404s use the error envelope."""
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert "error" in response.json()
