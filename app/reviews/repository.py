"""Review repository for database operations"""
from typing import AsyncIterator
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import Review
from app.db.repository import BaseRepository, Expanded


class ReviewRepository(BaseRepository):
    """Repository for review database operations"""

    model = Review

    def __init__(self, db: AsyncSession):
        super().__init__(db)

    def list_with_users(self) -> AsyncIterator[Expanded]:
        """All reviews, newest first, with the reviewer's name."""
        return self.find_many_expanded(
            expand={"user_id": ("name",)},
            order_by="date",
            descending=True,
        )
