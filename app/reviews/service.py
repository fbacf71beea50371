"""Review service layer"""
import logging
from uuid import UUID
from typing import AsyncIterator, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import Review
from app.db.repository import Expanded
from app.reviews.repository import ReviewRepository

logger = logging.getLogger(__name__)


class ReviewService:
    """Service layer for review business logic"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = ReviewRepository(db)

    async def add_review(
        self,
        user_id: UUID,
        rating: int,
        comment: Optional[str] = None,
    ) -> Review:
        """
        Persist a review.

        The user id is stored as given and not checked against the users
        table, unlike feedback submission.
        """
        review = await self.repository.create(
            Review(user_id=user_id, rating=rating, comment=comment)
        )
        logger.info(f"Review {review.id} added by user {user_id} (rating={rating})")
        return review

    def list_reviews(self) -> AsyncIterator[Expanded]:
        return self.repository.list_with_users()
