"""User Repository — SQLAlchemy implementation against in-memory SQLite.

Invariants:
    - Missing ids raise ResourceNotFoundError
    - Constraint violations raise DatabaseError and leave the session usable
    - delete returns the removed row's values
"""

import pytest
from sqlalchemy import select

from users_api.core.errors import DatabaseError, ResourceNotFoundError
from users_api.infrastructure.user_repository import SqlAlchemyUserRepository
from users_api.models.user import User


@pytest.fixture
def repo(test_db):
    return SqlAlchemyUserRepository(test_db)


async def test_create_assigns_id(repo):
    user = await repo.create("a@b.com", "A")
    assert user.id >= 1
    assert (user.email, user.name) == ("a@b.com", "A")


async def test_list_all(repo):
    assert await repo.list_all() == []
    await repo.create("a@b.com", "A")
    await repo.create("c@d.com", "C")
    assert {u.email for u in await repo.list_all()} == {"a@b.com", "c@d.com"}


async def test_get_missing_raises_not_found(repo):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await repo.get(12345)
    assert exc_info.value.resource_id == 12345


async def test_duplicate_email_raises_database_error(repo):
    await repo.create("a@b.com", "A")
    with pytest.raises(DatabaseError) as exc_info:
        await repo.create("a@b.com", "B")
    assert exc_info.value.operation == "create"
    # session rolled back and still usable
    assert len(await repo.list_all()) == 1


async def test_update_replaces_fields(repo, test_db):
    user = await repo.create("a@b.com", "A")
    updated = await repo.update(user.id, "x@y.com", "X")
    assert updated.model_dump() == {"id": user.id, "email": "x@y.com", "name": "X"}
    row = (await test_db.execute(select(User).where(User.id == user.id))).scalar_one()
    assert (row.email, row.name) == ("x@y.com", "X")


async def test_update_missing_raises_not_found(repo):
    with pytest.raises(ResourceNotFoundError):
        await repo.update(99, "x@y.com", "X")


async def test_delete_returns_snapshot_and_removes_row(repo):
    user = await repo.create("a@b.com", "A")
    deleted = await repo.delete(user.id)
    assert deleted == user
    with pytest.raises(ResourceNotFoundError):
        await repo.get(user.id)


async def test_delete_missing_raises_not_found(repo):
    with pytest.raises(ResourceNotFoundError):
        await repo.delete(1)
