"""Shared repository base: the generic store operations every entity gets."""
from contextlib import contextmanager
from typing import Any, AsyncIterator, Dict, Iterator, NamedTuple, Optional, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base
from app.db.models import User
from app.db.validation import validate
from app.exceptions import ConflictError, InfrastructureError, ValidationError


class Expanded(NamedTuple):
    """A record with its user references replaced by projected user fields"""
    record: Base
    references: Dict[str, Optional[Dict[str, Any]]]


@contextmanager
def store_errors() -> Iterator[None]:
    """Surface driver and network failures as InfrastructureError."""
    try:
        yield
    except (DBAPIError, OSError) as e:
        raise InfrastructureError("Database unavailable") from e


UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """True when the store rejected a write for a duplicate unique key."""
    if getattr(error.orig, "sqlstate", None) == UNIQUE_VIOLATION_SQLSTATE:
        return True
    return "unique" in str(error.orig).lower()


def project_user(user: Optional[User], fields: Sequence[str]) -> Optional[Dict[str, Any]]:
    """Subset of a user's attributes, always including its id."""
    if user is None:
        return None
    projection = {"id": user.id}
    for field in fields:
        projection[field] = getattr(user, field)
    return projection


class BaseRepository:
    """Base repository with common DB helpers."""

    model: type[Base] = Base
    conflict_message = "Record already exists"

    def __init__(self, db: AsyncSession):
        self.db = db

    def _column(self, name: str):
        return getattr(self.model, name)

    async def create(self, record: Base) -> Base:
        """Validate and persist a single record."""
        result = validate(record)
        if not result:
            raise ValidationError(result.message)

        self.db.add(record)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if is_unique_violation(e):
                raise ConflictError(self.conflict_message) from e
            # validation runs first, so any other constraint failure is a store fault
            raise InfrastructureError("Database rejected the record") from e
        except (DBAPIError, OSError) as e:
            await self.db.rollback()
            raise InfrastructureError("Database unavailable") from e

        with store_errors():
            await self.db.refresh(record)
        return record

    async def find_by_id(self, record_id: UUID) -> Optional[Base]:
        """Get record by ID"""
        with store_errors():
            return await self.db.get(self.model, record_id)

    async def find_by_field(self, field: str, value: Any) -> Optional[Base]:
        """First record whose `field` equals `value`"""
        stmt = select(self.model).where(self._column(field) == value).limit(1)
        with store_errors():
            result = await self.db.execute(stmt)
        return result.scalars().first()

    async def find_many(
        self,
        *criteria,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> AsyncIterator[Base]:
        """
        Stream matching records in the requested order.

        The iterator is consumed once; call again for a fresh pass.
        """
        stmt = select(self.model).where(*criteria)
        if order_by is not None:
            column = self._column(order_by)
            stmt = stmt.order_by(column.desc() if descending else column.asc())

        with store_errors():
            result = await self.db.stream_scalars(stmt)
            async for record in result:
                yield record

    async def find_many_expanded(
        self,
        *criteria,
        expand: Dict[str, Sequence[str]],
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> AsyncIterator[Expanded]:
        """
        Like `find_many`, with user references expanded.

        `expand` maps a reference column (e.g. ``"user_id"``) to the user
        fields to keep. All referenced users are loaded with a single query;
        a reference to a missing user expands to None.
        """
        records = [
            record
            async for record in self.find_many(*criteria, order_by=order_by, descending=descending)
        ]

        user_ids = {
            getattr(record, field)
            for record in records
            for field in expand
            if getattr(record, field) is not None
        }
        users: Dict[UUID, User] = {}
        if user_ids:
            with store_errors():
                result = await self.db.execute(select(User).where(User.id.in_(user_ids)))
            users = {user.id: user for user in result.scalars().all()}

        for record in records:
            references = {
                field: project_user(users.get(getattr(record, field)), fields)
                for field, fields in expand.items()
            }
            yield Expanded(record, references)

    async def aggregate(self, *criteria, group_by: str) -> Dict[Any, int]:
        """
        Count matching records per value of `group_by`.

        Only groups that occur are present in the result.
        """
        column = self._column(group_by)
        stmt = (
            select(column, func.count().label("count"))
            .select_from(self.model)
            .where(*criteria)
            .group_by(column)
        )
        with store_errors():
            result = await self.db.execute(stmt)
        return {row[0]: row[1] for row in result.all()}
