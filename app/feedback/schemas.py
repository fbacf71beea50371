"""Feedback Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from app.utils.schemas import CamelModel


class CreateFeedbackRequest(CamelModel):
    """Request to submit a mood check-in"""
    user_id: Optional[UUID] = None
    mood: Optional[str] = Field(None, description="One of: Fine, Tired, Stressed")
    note: Optional[str] = Field(None, description="Optional free-text note")


class FeedbackUser(CamelModel):
    """Submitter fields shown with each feedback"""
    id: UUID
    name: str
    email: str
    school: Optional[str] = None


class FeedbackResponse(CamelModel):
    """Feedback response"""
    id: UUID
    user: Optional[FeedbackUser]
    role: str  # student | teacher
    mood: str
    note: Optional[str] = None
    date: datetime
    created_at: datetime
    updated_at: datetime


class MoodStatsResponse(BaseModel):
    """Mood counts over the trailing window"""
    Fine: int = 0
    Tired: int = 0
    Stressed: int = 0
