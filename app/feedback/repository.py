"""Feedback repository for database operations"""
from datetime import datetime
from typing import AsyncIterator, Dict
from sqlalchemy import and_
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import Feedback
from app.db.repository import BaseRepository, Expanded

FEEDBACK_USER_FIELDS = ("name", "email", "school")


class FeedbackRepository(BaseRepository):
    """Repository for feedback database operations"""

    model = Feedback

    def __init__(self, db: AsyncSession):
        super().__init__(db)

    def list_with_users(self) -> AsyncIterator[Expanded]:
        """All feedback, newest first, with the submitter's name, email and school."""
        return self.find_many_expanded(
            expand={"user_id": FEEDBACK_USER_FIELDS},
            order_by="created_at",
            descending=True,
        )

    async def count_by_mood(self, start: datetime, end: datetime) -> Dict[str, int]:
        """Feedback counts per mood for created_at within [start, end]."""
        return await self.aggregate(
            and_(Feedback.created_at >= start, Feedback.created_at <= end),
            group_by="mood",
        )
