"""Feedback service layer for business logic"""
import logging
from uuid import UUID
from typing import AsyncIterator, Dict, Optional
from datetime import datetime, timedelta
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import Feedback
from app.db.repository import Expanded
from app.feedback.repository import FeedbackRepository
from app.feedback.moods import mood_counts, role_for
from app.users.repository import UserRepository
from app.users.exceptions import UserNotFoundException
from app.utils.timezone import utcnow

logger = logging.getLogger(__name__)


class FeedbackService:
    """Service layer for feedback business logic"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = FeedbackRepository(db)
        self.user_repository = UserRepository(db)

    async def submit_feedback(
        self,
        user_id: UUID,
        mood: str,
        note: Optional[str] = None,
    ) -> Feedback:
        """
        Record a mood check-in for a user.

        Business rules:
        - The user must exist
        - Role is snapshotted from the user's teacher flag
        - Mood must be Fine, Tired or Stressed (checked by the repository)
        """
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id)

        feedback = Feedback(
            user_id=user.id,
            role=role_for(user).value,
            mood=mood,
            note=note,
        )
        feedback = await self.repository.create(feedback)
        logger.info(f"Feedback {feedback.id} saved for user {user.id} ({feedback.mood})")
        return feedback

    def list_feedbacks(self) -> AsyncIterator[Expanded]:
        """All feedback with submitter details, newest first."""
        return self.repository.list_with_users()

    async def get_mood_stats(
        self,
        window_days: int,
        now: Optional[datetime] = None,
    ) -> Dict[str, int]:
        """
        Mood counts over the trailing window.

        Args:
            window_days: Window length, ending now (the STATS_WINDOW_DAYS setting)
            now: End of the window (naive UTC), defaults to the current time

        Returns:
            Dictionary with exactly the keys Fine, Tired and Stressed
        """
        end = now or utcnow()
        start = end - timedelta(days=window_days)
        aggregated = await self.repository.count_by_mood(start, end)
        return mood_counts(aggregated)
