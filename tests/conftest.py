import os
import pytest
from httpx import AsyncClient, ASGITransport
from app.config import Settings
from app.db.base import Base
from app.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway database for each test."""
    database_url = os.getenv(
        "TEST_DATABASE_URL",
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
    )
    return Settings(
        _env_file=None,
        database_url=database_url,
        bcrypt_rounds=4,
    )


@pytest.fixture
async def app(settings):
    """Application with its database connected, tables dropped afterwards."""
    application = create_app(settings)
    database = application.state.database
    await database.connect()

    yield application

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await database.close()


@pytest.fixture
async def client(app):
    """Create a test client bound to the app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(app):
    """A session on the app's database for arranging and inspecting records."""
    async with app.state.database.session() as session:
        yield session


@pytest.fixture
def signup(client):
    """Sign up a user through the API and return its id."""
    async def _signup(name="Alice", email="alice@example.com", password="p1", **extra):
        response = await client.post(
            "/api/signup",
            json={"name": name, "email": email, "password": password, **extra},
        )
        assert response.status_code == 200, response.text
        return response.json()["userId"]
    return _signup
