"""User Repository — SQLAlchemy implementation of core.repository_protocols.UserRepository.

Invariants:
    - One repository per request, bound to that request's AsyncSession
    - Every write commits before returning; a failed write rolls back first
    - Returns UserRead snapshots, so delete can hand back the removed row's values
    - SQLAlchemyError never escapes: mapped to DatabaseError with the operation name

Design Decisions:
    - session.get() for by-id lookups: identity map first, single SELECT otherwise
    - Uniqueness left to the database constraint (no pre-check SELECT, no race window)
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.core.domain_types import UserId
from users_api.core.errors import DatabaseError, ErrorContext, ResourceNotFoundError
from users_api.models.user import User
from users_api.schemas.user import UserRead


def _describe(exc: SQLAlchemyError) -> str:
    if isinstance(exc, IntegrityError):
        return "Integrity constraint violated"
    if isinstance(exc, OperationalError):
        return "Connection or operational error"
    return "Database operation failed"


class SqlAlchemyUserRepository:
    """User persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _store_errors(
        self, operation: str, user_id: UserId | None = None,
    ) -> AsyncGenerator[None, None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise DatabaseError(
                _describe(e), operation, ErrorContext(user_id=user_id),
            ) from e

    async def _get_or_raise(self, user_id: UserId) -> User:
        user = await self._db.get(User, user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user

    async def list_all(self) -> list[UserRead]:
        async with self._store_errors("list"):
            result = await self._db.execute(select(User))
            return [UserRead.model_validate(u) for u in result.scalars().all()]

    async def create(self, email: str, name: str) -> UserRead:
        async with self._store_errors("create"):
            user = User(email=email, name=name)
            self._db.add(user)
            await self._db.commit()
            await self._db.refresh(user)
            return UserRead.model_validate(user)

    async def get(self, user_id: UserId) -> UserRead:
        async with self._store_errors("get", user_id):
            return UserRead.model_validate(await self._get_or_raise(user_id))

    async def update(self, user_id: UserId, email: str, name: str) -> UserRead:
        async with self._store_errors("update", user_id):
            user = await self._get_or_raise(user_id)
            user.email = email
            user.name = name
            await self._db.commit()
            await self._db.refresh(user)
            return UserRead.model_validate(user)

    async def delete(self, user_id: UserId) -> UserRead:
        async with self._store_errors("delete", user_id):
            user = await self._get_or_raise(user_id)
            snapshot = UserRead.model_validate(user)
            await self._db.delete(user)
            await self._db.commit()
            return snapshot
