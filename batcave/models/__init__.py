"""ORM Models — SQLAlchemy declarative models for users and tasks.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every Task is owned by exactly one User via user_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from batcave.models.user import User  # noqa: F401
from batcave.models.task import Task  # noqa: F401
