"""Task ORM — a unit of work with server-computed rewards.

Invariants:
    - id is UUID text primary key (generated when omitted)
    - user_id is required; no FK cascade (ownership only, users are never deleted here)
    - estimated_hours / actual_hours are NUMERIC(4, 1): read back as Decimal
    - xp_reward, eu_reward, is_completed, completed_at are written only by the
      completion action, never from client input
    - updated_at refreshed on every UPDATE issued through the ORM

Design Decisions:
    - domain/priority stored as TEXT: the closed sets live in core/domain_types
      and are enforced by the schemas, keeping the column migration-free
    - ORM-side defaults mirror the migration's server defaults so rows built
      in Python and rows inserted by SQL look identical
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Text, Integer, Boolean, Numeric, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from batcave.core.domain_types import (
    DEFAULT_ESTIMATED_HOURS, HOURS_PRECISION, HOURS_SCALE, TaskPriority,
)
from batcave.db.base import Base
from batcave.models.user import new_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    """Task entity — owned by one user, carries XP/EU rewards."""
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(
        String, primary_key=True, default=new_id,
    )
    user_id: Mapped[str] = mapped_column(String, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    domain: Mapped[str] = mapped_column(Text, nullable=False)
    priority: Mapped[str] = mapped_column(
        Text, nullable=False, default=TaskPriority.MEDIUM.value,
    )

    # Fixed-point hours
    estimated_hours: Mapped[Decimal] = mapped_column(
        Numeric(HOURS_PRECISION, HOURS_SCALE),
        nullable=False, default=DEFAULT_ESTIMATED_HOURS,
    )
    actual_hours: Mapped[Decimal | None] = mapped_column(
        Numeric(HOURS_PRECISION, HOURS_SCALE), nullable=True,
    )

    # Server-controlled rewards and completion
    xp_reward: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    eu_reward: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )


Index("ix_tasks_user_id", Task.user_id)
