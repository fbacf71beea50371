"""User service layer: signup and login"""
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import User
from app.users.repository import UserRepository
from app.users.security import DEFAULT_ROUNDS, hash_password, verify_password
from app.users.exceptions import (
    EmailAlreadyRegisteredException,
    InvalidCredentialsException,
)

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for user business logic"""

    def __init__(self, db: AsyncSession, bcrypt_rounds: int = DEFAULT_ROUNDS):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds
        self.repository = UserRepository(db)

    async def signup(
        self,
        name: str,
        email: str,
        password: str,
        school: Optional[str] = None,
        is_teacher: bool = False,
    ) -> User:
        """
        Register a new user.

        Business rules:
        - Email must not be registered yet
        - Only the bcrypt hash of the password is stored
        """
        existing_user = await self.repository.get_by_email(email)
        if existing_user:
            raise EmailAlreadyRegisteredException()

        user = User(
            name=name,
            email=email,
            password=await hash_password(password, self.bcrypt_rounds),
            school=school,
            is_teacher=is_teacher,
        )
        user = await self.repository.create(user)
        logger.info(f"User {user.id} signed up (teacher={user.is_teacher})")
        return user

    async def login(self, email: str, password: str) -> User:
        """Return the user whose password matches, or raise."""
        user = await self.repository.get_by_email(email)
        if not user:
            logger.warning("Login attempt for unknown email")
            raise InvalidCredentialsException("User not found")

        if not await verify_password(password, user.password):
            logger.warning(f"Invalid password for user {user.id}")
            raise InvalidCredentialsException("Invalid password")

        return user
