"""Direct message endpoints"""
from uuid import UUID
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.postgres import get_db
from app.db.repository import Expanded
from app.exceptions import ValidationError, endpoint_errors
from app.messages.service import MessageService
from app.messages.schemas import MessageResponse, MessageUser, SendMessageRequest
from app.utils.schemas import AckResponse
from app.utils.timezone import to_utc

router = APIRouter(
    prefix="/api",
    tags=["messages"],
)


def to_response(item: Expanded) -> MessageResponse:
    message = item.record
    sender = item.references["from_id"]
    recipient = item.references["to_id"]
    return MessageResponse(
        id=message.id,
        sender=MessageUser(**sender) if sender else None,
        recipient=MessageUser(**recipient) if recipient else None,
        text=message.text,
        date=to_utc(message.date),
        read=message.read,
    )


@router.post("/message", response_model=AckResponse)
async def send_message(
    request: SendMessageRequest,
    db: AsyncSession = Depends(get_db),
):
    """Send a direct message. fromId, toId and text are required."""
    with endpoint_errors("Message sending failed"):
        if not (request.from_id and request.to_id and request.text):
            raise ValidationError("Missing fields")

        service = MessageService(db)
        await service.send_message(
            from_id=request.from_id,
            to_id=request.to_id,
            text=request.text,
        )

    return AckResponse(message="Message sent!")


@router.get("/messages/{user_id}", response_model=List[MessageResponse])
async def list_messages(
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Messages the user sent or received, oldest first, with both parties' name and email."""
    with endpoint_errors("Failed to fetch messages"):
        service = MessageService(db)
        return [to_response(item) async for item in service.list_messages(user_id)]
