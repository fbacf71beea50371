from enum import Enum
from uuid import uuid4
from sqlalchemy import Column, String, DateTime, Text, Boolean, Integer, Uuid
from app.db.base import Base
from app.utils.timezone import utcnow


class Mood(str, Enum):
    """Fixed set of moods a feedback submission can report"""
    FINE = "Fine"
    TIRED = "Tired"
    STRESSED = "Stressed"


class Role(str, Enum):
    """Submitter classification snapshotted onto each feedback"""
    STUDENT = "student"
    TEACHER = "teacher"


class User(Base):
    """
    Registered student or teacher.
    Stores only the bcrypt hash of the password.
    """
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    school = Column(String(255), nullable=True)
    is_teacher = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class Feedback(Base):
    """
    Mood check-in submitted by a user.
    Role is copied from the user at submission time and never re-derived.
    """
    __tablename__ = "feedback"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    role = Column(String(20), default=Role.STUDENT.value, nullable=False)  # student | teacher
    mood = Column(String(20), nullable=False)  # Fine | Tired | Stressed
    note = Column(Text, nullable=True)
    date = Column(DateTime, default=utcnow, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class Review(Base):
    """Peer review of the app: 1-5 rating with an optional comment"""
    __tablename__ = "reviews"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    rating = Column(Integer, nullable=False)  # 1-5
    comment = Column(Text, nullable=True)
    date = Column(DateTime, default=utcnow, nullable=False, index=True)


class Message(Base):
    """
    Direct message between two users.
    Sender and recipient are not checked against the users table.
    """
    __tablename__ = "messages"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    from_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    to_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    text = Column(Text, nullable=False)
    date = Column(DateTime, default=utcnow, nullable=False, index=True)
    read = Column(Boolean, default=False, nullable=False)
