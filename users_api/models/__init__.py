"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity; imported here so Base.metadata is complete for create_all
"""

from users_api.models.user import User  # noqa: F401
