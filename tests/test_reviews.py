import pytest
from datetime import timedelta
from httpx import AsyncClient
from uuid import uuid4
from sqlalchemy import func, select
from app.db.models import Review
from app.utils.timezone import utcnow


@pytest.mark.asyncio
async def test_add_review(client: AsyncClient, signup):
    """Test adding a review and reading it back."""
    user_id = await signup(name="Rita")

    response = await client.post(
        "/api/review",
        json={"userId": user_id, "rating": 4, "comment": "Helpful app"},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Review added successfully!"}

    data = (await client.get("/api/reviews")).json()
    assert len(data) == 1
    assert data[0]["rating"] == 4
    assert data[0]["comment"] == "Helpful app"
    assert data[0]["user"] == {"id": user_id, "name": "Rita"}
    assert data[0]["date"]


@pytest.mark.asyncio
async def test_review_for_unknown_user_is_stored(client: AsyncClient):
    """Test that reviews do not check the reviewer exists."""
    response = await client.post("/api/review", json={"userId": str(uuid4()), "rating": 5})
    assert response.status_code == 200

    data = (await client.get("/api/reviews")).json()
    assert len(data) == 1
    assert data[0]["user"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [0, 6, -1])
async def test_review_rating_out_of_range(client: AsyncClient, db_session, rating):
    """Test that ratings outside 1-5 are rejected."""
    response = await client.post("/api/review", json={"userId": str(uuid4()), "rating": rating})
    assert response.status_code == 400
    assert "rating" in response.json()["error"]

    count = (await db_session.execute(select(func.count()).select_from(Review))).scalar()
    assert count == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
async def test_review_valid_ratings(client: AsyncClient, rating):
    """Test that ratings 1-5 are accepted."""
    response = await client.post("/api/review", json={"userId": str(uuid4()), "rating": rating})
    assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    {"rating": 3},
    {"userId": "123e4567-e89b-12d3-a456-426614174000"},
])
async def test_review_missing_fields(client: AsyncClient, body):
    """Test that userId and rating are required."""
    response = await client.post("/api/review", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing fields"}


@pytest.mark.asyncio
async def test_list_reviews_newest_first(client: AsyncClient, db_session):
    """Test that reviews are listed newest first."""
    now = utcnow()
    for days_ago, rating in [(5, 1), (1, 5), (3, 3)]:
        db_session.add(Review(user_id=uuid4(), rating=rating, date=now - timedelta(days=days_ago)))
    await db_session.commit()

    data = (await client.get("/api/reviews")).json()
    assert [item["rating"] for item in data] == [5, 3, 1]
