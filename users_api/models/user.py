"""User ORM — the single persisted entity.

Invariants:
    - id is an auto-incrementing integer primary key, never reused after delete
    - email and name are non-nullable; email is unique

Design Decisions:
    - sqlite_autoincrement: SQLite otherwise recycles the highest deleted rowid
    - 320 chars for email: RFC 5321 upper bound (64 local + @ + 255 domain)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from users_api.db.base import Base


class User(Base):
    """A user record."""
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
