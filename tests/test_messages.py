import pytest
from datetime import timedelta
from httpx import AsyncClient
from uuid import UUID, uuid4
from app.db.models import Message
from app.utils.timezone import utcnow


@pytest.mark.asyncio
async def test_send_and_list_message(client: AsyncClient, signup):
    """Test sending a message and reading it from both sides."""
    alice = await signup(name="Alice", email="alice@x.com")
    bob = await signup(name="Bob", email="bob@x.com")

    response = await client.post("/api/message", json={"fromId": alice, "toId": bob, "text": "Hi Bob"})
    assert response.status_code == 200
    assert response.json() == {"message": "Message sent!"}

    for user_id in (alice, bob):
        data = (await client.get(f"/api/messages/{user_id}")).json()
        assert len(data) == 1
        message = data[0]
        assert message["text"] == "Hi Bob"
        assert message["read"] is False
        assert message["from"] == {"id": alice, "name": "Alice", "email": "alice@x.com"}
        assert message["to"] == {"id": bob, "name": "Bob", "email": "bob@x.com"}


@pytest.mark.asyncio
async def test_messages_oldest_first(client: AsyncClient, db_session):
    """Test that a user's messages are listed oldest first, sent and received mixed."""
    me, other = uuid4(), uuid4()
    now = utcnow()
    db_session.add(Message(from_id=me, to_id=other, text="second", date=now - timedelta(hours=2)))
    db_session.add(Message(from_id=other, to_id=me, text="first", date=now - timedelta(hours=3)))
    db_session.add(Message(from_id=me, to_id=other, text="third", date=now - timedelta(hours=1)))
    await db_session.commit()

    data = (await client.get(f"/api/messages/{me}")).json()
    assert [message["text"] for message in data] == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_message_to_self_listed_once(client: AsyncClient, signup):
    """Test that a note to oneself appears once, not once per side."""
    me = await signup()
    await client.post("/api/message", json={"fromId": me, "toId": me, "text": "reminder"})

    data = (await client.get(f"/api/messages/{me}")).json()
    assert len(data) == 1


@pytest.mark.asyncio
async def test_messages_exclude_other_conversations(client: AsyncClient):
    """Test that messages between two other users are not listed."""
    a, b, c = (str(uuid4()) for _ in range(3))
    await client.post("/api/message", json={"fromId": a, "toId": b, "text": "a to b"})
    await client.post("/api/message", json={"fromId": b, "toId": c, "text": "b to c"})

    data = (await client.get(f"/api/messages/{a}")).json()
    assert [message["text"] for message in data] == ["a to b"]


@pytest.mark.asyncio
async def test_message_between_unknown_users(client: AsyncClient):
    """Test that messages are stored without checking either user exists."""
    sender, recipient = str(uuid4()), str(uuid4())
    response = await client.post("/api/message", json={"fromId": sender, "toId": recipient, "text": "hello"})
    assert response.status_code == 200

    data = (await client.get(f"/api/messages/{recipient}")).json()
    assert len(data) == 1
    assert data[0]["from"] is None
    assert data[0]["to"] is None
    assert UUID(data[0]["id"])


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    {"toId": "123e4567-e89b-12d3-a456-426614174000", "text": "hi"},
    {"fromId": "123e4567-e89b-12d3-a456-426614174000", "text": "hi"},
    {"fromId": "123e4567-e89b-12d3-a456-426614174000", "toId": "123e4567-e89b-12d3-a456-426614174001"},
    {"fromId": "123e4567-e89b-12d3-a456-426614174000", "toId": "123e4567-e89b-12d3-a456-426614174001", "text": ""},
])
async def test_message_missing_fields(client: AsyncClient, body):
    """Test that fromId, toId and text are required."""
    response = await client.post("/api/message", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing fields"}


@pytest.mark.asyncio
async def test_messages_malformed_user_id(client: AsyncClient):
    """Test listing with a path id that is not a UUID."""
    response = await client.get("/api/messages/not-a-uuid")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}


@pytest.mark.asyncio
async def test_messages_none_for_user(client: AsyncClient):
    """Test listing for a user with no messages."""
    response = await client.get(f"/api/messages/{uuid4()}")
    assert response.status_code == 200
    assert response.json() == []
