"""Review Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import Field
from app.utils.schemas import CamelModel


class CreateReviewRequest(CamelModel):
    """Request to add a review"""
    user_id: Optional[UUID] = None
    rating: Optional[int] = Field(None, description="Rating from 1 to 5")
    comment: Optional[str] = Field(None, description="Optional comment")


class ReviewUser(CamelModel):
    id: UUID
    name: str


class ReviewResponse(CamelModel):
    """Review response"""
    id: UUID
    user: Optional[ReviewUser]
    rating: int
    comment: Optional[str] = None
    date: datetime
