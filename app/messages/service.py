"""Direct message service layer"""
import logging
from uuid import UUID
from typing import AsyncIterator
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import Message
from app.db.repository import Expanded
from app.messages.repository import MessageRepository

logger = logging.getLogger(__name__)


class MessageService:
    """Service layer for direct messages"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = MessageRepository(db)

    async def send_message(self, from_id: UUID, to_id: UUID, text: str) -> Message:
        """Persist a message. Neither user id is checked for existence."""
        message = await self.repository.create(
            Message(from_id=from_id, to_id=to_id, text=text)
        )
        logger.info(f"Message {message.id} sent from {from_id} to {to_id}")
        return message

    def list_messages(self, user_id: UUID) -> AsyncIterator[Expanded]:
        return self.repository.list_for_user(user_id)
