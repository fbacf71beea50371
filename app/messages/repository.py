"""Message repository for database operations"""
from uuid import UUID
from typing import AsyncIterator
from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import Message
from app.db.repository import BaseRepository, Expanded

MESSAGE_USER_FIELDS = ("name", "email")


class MessageRepository(BaseRepository):
    """Repository for message database operations"""

    model = Message

    def __init__(self, db: AsyncSession):
        super().__init__(db)

    def list_for_user(self, user_id: UUID) -> AsyncIterator[Expanded]:
        """
        Messages sent or received by a user, oldest first.

        A single OR query, so a message to oneself is returned once.
        """
        return self.find_many_expanded(
            or_(Message.from_id == user_id, Message.to_id == user_id),
            expand={"from_id": MESSAGE_USER_FIELDS, "to_id": MESSAGE_USER_FIELDS},
            order_by="date",
        )
