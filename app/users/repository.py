"""User repository for database operations"""
from uuid import UUID
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import User
from app.db.repository import BaseRepository


class UserRepository(BaseRepository):
    """Repository for user database operations"""

    model = User
    conflict_message = "Email already registered"

    def __init__(self, db: AsyncSession):
        super().__init__(db)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        return await self.find_by_id(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return await self.find_by_field("email", email)
