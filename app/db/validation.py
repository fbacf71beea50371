"""
Record validation run by the repositories before any write.

Each entity has one function taking the unsaved record and returning either
``Valid(record)`` or ``Invalid(failure, field, message)``. Nothing here touches
the database: uniqueness is enforced by the store itself.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Union
from uuid import UUID

from app.db.base import Base
from app.db.models import Feedback, Message, Mood, Review, Role, User

RATING_MIN = 1
RATING_MAX = 5

MOODS = [mood.value for mood in Mood]
ROLES = [role.value for role in Role]


class ValidationFailure(str, Enum):
    """Kinds of shape violation a record can have"""
    MISSING_FIELD = "missing_field"
    INVALID_CHOICE = "invalid_choice"
    OUT_OF_RANGE = "out_of_range"
    INVALID_TYPE = "invalid_type"


@dataclass
class Valid:
    record: Base

    def __bool__(self) -> bool:
        return True


@dataclass
class Invalid:
    failure: ValidationFailure
    field: str
    message: str

    def __bool__(self) -> bool:
        return False


ValidationResult = Union[Valid, Invalid]


def _missing(field: str) -> Invalid:
    return Invalid(ValidationFailure.MISSING_FIELD, field, f"{field} is required")


def _require_text(record: Base, field: str) -> Invalid | None:
    value = getattr(record, field)
    if value is None or value == "":
        return _missing(field)
    if not isinstance(value, str):
        return Invalid(ValidationFailure.INVALID_TYPE, field, f"{field} must be a string")
    return None


def _require_uuid(record: Base, field: str) -> Invalid | None:
    value = getattr(record, field)
    if value is None:
        return _missing(field)
    if not isinstance(value, UUID):
        return Invalid(ValidationFailure.INVALID_TYPE, field, f"{field} must be a UUID")
    return None


def validate_user(user: User) -> ValidationResult:
    for field in ("name", "email", "password"):
        problem = _require_text(user, field)
        if problem is not None:
            return problem
    if user.school is not None and not isinstance(user.school, str):
        return Invalid(ValidationFailure.INVALID_TYPE, "school", "school must be a string")
    return Valid(user)


def validate_feedback(feedback: Feedback) -> ValidationResult:
    """Mood must be one of the fixed set; role, when set, student or teacher."""
    problem = _require_uuid(feedback, "user_id")
    if problem is not None:
        return problem
    if feedback.mood is None or feedback.mood == "":
        return _missing("mood")
    if feedback.mood not in MOODS:
        return Invalid(
            ValidationFailure.INVALID_CHOICE,
            "mood",
            f"Invalid mood '{feedback.mood}'. Must be one of: {', '.join(MOODS)}",
        )
    if feedback.role is not None and feedback.role not in ROLES:
        return Invalid(
            ValidationFailure.INVALID_CHOICE,
            "role",
            f"Invalid role '{feedback.role}'. Must be one of: {', '.join(ROLES)}",
        )
    return Valid(feedback)


def validate_review(review: Review) -> ValidationResult:
    """Rating is an integer between 1 and 5 inclusive."""
    problem = _require_uuid(review, "user_id")
    if problem is not None:
        return problem
    if review.rating is None:
        return _missing("rating")
    # bool is an int subclass
    if isinstance(review.rating, bool) or not isinstance(review.rating, int):
        return Invalid(ValidationFailure.INVALID_TYPE, "rating", "rating must be an integer")
    if not RATING_MIN <= review.rating <= RATING_MAX:
        return Invalid(
            ValidationFailure.OUT_OF_RANGE,
            "rating",
            f"rating must be between {RATING_MIN} and {RATING_MAX}",
        )
    return Valid(review)


def validate_message(message: Message) -> ValidationResult:
    for field in ("from_id", "to_id"):
        problem = _require_uuid(message, field)
        if problem is not None:
            return problem
    problem = _require_text(message, "text")
    if problem is not None:
        return problem
    return Valid(message)


VALIDATORS: Dict[type, Callable[..., ValidationResult]] = {
    User: validate_user,
    Feedback: validate_feedback,
    Review: validate_review,
    Message: validate_message,
}


def validate(record: Base) -> ValidationResult:
    """Run the validation function registered for the record's type."""
    validator = VALIDATORS.get(type(record))
    if validator is None:
        raise TypeError(f"No validator registered for {type(record).__name__}")
    return validator(record)
