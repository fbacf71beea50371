"""Message Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import Field
from app.utils.schemas import CamelModel


class SendMessageRequest(CamelModel):
    """Request to send a direct message"""
    from_id: Optional[UUID] = None
    to_id: Optional[UUID] = None
    text: Optional[str] = None


class MessageUser(CamelModel):
    id: UUID
    name: str
    email: str


class MessageResponse(CamelModel):
    """Message response; sender and recipient appear as `from` and `to`"""
    id: UUID
    sender: Optional[MessageUser] = Field(None, alias="from")
    recipient: Optional[MessageUser] = Field(None, alias="to")
    text: str
    date: datetime
    read: bool
