"""Boundary Protocols — contract between the handler set and the store.

Invariants:
    - services/ never imports the SQLAlchemy implementation directly
    - Every method returns UserRead snapshots, never ORM objects
    - Missing ids raise ResourceNotFoundError; store failures raise DatabaseError

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, handlers await exactly one call
"""

from typing import Protocol

from users_api.core.domain_types import UserId
from users_api.schemas.user import UserRead


class UserRepository(Protocol):
    """Contract for user persistence — implemented by infrastructure/."""
    async def list_all(self) -> list[UserRead]: ...
    async def create(self, email: str, name: str) -> UserRead: ...
    async def get(self, user_id: UserId) -> UserRead: ...
    async def update(self, user_id: UserId, email: str, name: str) -> UserRead: ...
    async def delete(self, user_id: UserId) -> UserRead: ...
