"""User ORM — identity record created on registration.

Invariants:
    - id is UUID text, generated when omitted
    - username is unique (enforced by the database, surfaced as ConflictError)
    - password is stored as given; hashing belongs to the auth layer
"""

import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from batcave.db.base import Base


def new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """Application user — owns tasks."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String, primary_key=True, default=new_id,
    )
    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
