"""Request Dependencies — wires the per-request store handle into routes.

Invariants:
    - One repository per request, sharing the request's AsyncSession from get_db
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.infrastructure.database import get_db
from users_api.infrastructure.user_repository import SqlAlchemyUserRepository


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(db)
