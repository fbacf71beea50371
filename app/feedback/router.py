"""Feedback REST API endpoints"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import Settings, get_app_settings
from app.db.postgres import get_db
from app.db.repository import Expanded
from app.exceptions import ValidationError, endpoint_errors
from app.feedback.service import FeedbackService
from app.feedback.schemas import (
    CreateFeedbackRequest,
    FeedbackResponse,
    FeedbackUser,
    MoodStatsResponse,
)
from app.utils.schemas import AckResponse
from app.utils.timezone import to_utc


router = APIRouter(
    prefix="/api",
    tags=["feedback"],
)


def to_response(item: Expanded) -> FeedbackResponse:
    """Convert an expanded Feedback record to response schema"""
    feedback = item.record
    user = item.references["user_id"]
    return FeedbackResponse(
        id=feedback.id,
        user=FeedbackUser(**user) if user else None,
        role=feedback.role,
        mood=feedback.mood,
        note=feedback.note,
        date=to_utc(feedback.date),
        created_at=to_utc(feedback.created_at),
        updated_at=to_utc(feedback.updated_at),
    )


@router.post("/feedback", response_model=AckResponse)
async def create_feedback(
    request: CreateFeedbackRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Submit a mood check-in.

    Business rules:
    - userId must resolve to a registered user (404 otherwise)
    - Mood: Fine, Tired or Stressed
    - Role is taken from the user's teacher flag at submission time
    """
    with endpoint_errors("Feedback submission failed"):
        if not (request.user_id and request.mood):
            raise ValidationError("Missing fields")

        service = FeedbackService(db)
        await service.submit_feedback(
            user_id=request.user_id,
            mood=request.mood,
            note=request.note,
        )

    return AckResponse(message="Feedback saved successfully!")


@router.get("/feedback", response_model=List[FeedbackResponse])
async def list_feedbacks(db: AsyncSession = Depends(get_db)):
    """All feedback, newest first, each with the submitter's name, email and school."""
    with endpoint_errors("Failed to fetch feedback"):
        service = FeedbackService(db)
        return [to_response(item) async for item in service.list_feedbacks()]


@router.get("/stats", response_model=MoodStatsResponse)
async def get_mood_stats(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Mood counts for feedback submitted over the trailing window (7 days by default).

    Always returns all three moods, with 0 for moods nobody reported.
    """
    with endpoint_errors("Failed to fetch stats"):
        service = FeedbackService(db)
        counts = await service.get_mood_stats(window_days=settings.stats_window_days)

    return MoodStatsResponse(**counts)
