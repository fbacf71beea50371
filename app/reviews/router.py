"""Review REST API endpoints"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.postgres import get_db
from app.db.repository import Expanded
from app.exceptions import ValidationError, endpoint_errors
from app.reviews.service import ReviewService
from app.reviews.schemas import CreateReviewRequest, ReviewResponse, ReviewUser
from app.utils.schemas import AckResponse
from app.utils.timezone import to_utc

router = APIRouter(
    prefix="/api",
    tags=["reviews"],
)


def to_response(item: Expanded) -> ReviewResponse:
    review = item.record
    user = item.references["user_id"]
    return ReviewResponse(
        id=review.id,
        user=ReviewUser(**user) if user else None,
        rating=review.rating,
        comment=review.comment,
        date=to_utc(review.date),
    )


@router.post("/review", response_model=AckResponse)
async def add_review(
    request: CreateReviewRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Add a review with a 1-5 rating.

    The reviewer id is not checked for existence.
    """
    with endpoint_errors("Review submission failed"):
        if request.user_id is None or request.rating is None:
            raise ValidationError("Missing fields")

        service = ReviewService(db)
        await service.add_review(
            user_id=request.user_id,
            rating=request.rating,
            comment=request.comment,
        )

    return AckResponse(message="Review added successfully!")


@router.get("/reviews", response_model=List[ReviewResponse])
async def list_reviews(db: AsyncSession = Depends(get_db)):
    """All reviews, newest first, each with the reviewer's name."""
    with endpoint_errors("Failed to fetch reviews"):
        service = ReviewService(db)
        return [to_response(item) async for item in service.list_reviews()]
