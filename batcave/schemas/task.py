"""Task Schemas — storage-side, client-side and response shapes for tasks.

Invariants:
    - xp_reward, eu_reward, is_completed, completed_at, created_at, updated_at
      and id never appear on a writable schema (create or update, storage or client)
    - Updates never carry user_id: ownership is fixed at creation
    - TaskCreate/TaskUpdate hours are Decimal NUMERIC(4, 1); client hours are
      strict floats with business bounds and steps
    - TaskResponse converts stored hours to float and fails closed on bad text;
      re-validating its own output yields the same values

Design Decisions:
    - Client variants convert to storage variants (to_insert/to_update) so the
      owner id and the due-date parse are applied in exactly one place
    - Non-nullable columns reject an explicit null on partial updates instead
      of letting the database raise later
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import ConfigDict, Field, field_validator

from batcave.core.domain_types import (
    ACTUAL_HOURS_MAX, ACTUAL_HOURS_MIN, ACTUAL_HOURS_STEP,
    DEFAULT_ESTIMATED_HOURS,
    ESTIMATED_HOURS_MAX, ESTIMATED_HOURS_MIN, ESTIMATED_HOURS_STEP,
    HOURS_PRECISION, HOURS_SCALE,
    TaskDomain, TaskPriority,
)
from batcave.core.hours import parse_hours, parse_optional_hours, to_fixed_point
from batcave.core.validation import validate_payload
from batcave.schemas.base import WireModel

_NON_NULLABLE = ("title", "domain", "priority", "estimated_hours")


StoredHours = Annotated[
    Decimal, Field(max_digits=HOURS_PRECISION, decimal_places=HOURS_SCALE),
]
EstimatedHours = Annotated[
    float,
    Field(
        strict=True, allow_inf_nan=False,
        ge=ESTIMATED_HOURS_MIN, le=ESTIMATED_HOURS_MAX,
        multiple_of=ESTIMATED_HOURS_STEP,
    ),
]
ActualHours = Annotated[
    float,
    Field(
        strict=True, allow_inf_nan=False,
        ge=ACTUAL_HOURS_MIN, le=ACTUAL_HOURS_MAX,
        multiple_of=ACTUAL_HOURS_STEP,
    ),
]


def _strip_title(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


def _reject_null(v):
    if v is None:
        raise ValueError("field cannot be null")
    return v


# --- Storage-side (validated rows about to be written) ------------------------

class TaskCreate(WireModel):
    """Insert payload — everything the storage layer needs except server fields."""
    user_id: str = Field(min_length=1)
    title: str
    description: str | None = None
    domain: TaskDomain
    priority: TaskPriority = TaskPriority.MEDIUM
    estimated_hours: StoredHours = DEFAULT_ESTIMATED_HOURS
    actual_hours: StoredHours | None = None
    due_date: datetime | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)

    def to_row(self) -> dict:
        """Constructor kwargs for the Task ORM model."""
        return self.column_values()


class TaskUpdate(WireModel):
    """Partial update — only fields the caller sent are applied."""
    title: str | None = None
    description: str | None = None
    domain: TaskDomain | None = None
    priority: TaskPriority | None = None
    estimated_hours: StoredHours | None = None
    actual_hours: StoredHours | None = None
    due_date: datetime | None = None

    @field_validator(*_NON_NULLABLE)
    @classmethod
    def reject_null(cls, v):
        return _reject_null(v)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return _strip_title(v)

    def changes(self) -> dict:
        """Column values to apply; absent fields are left untouched."""
        return self.column_values(exclude_unset=True)


# --- Client-side (literal wire payloads) --------------------------------------

class ClientTaskCreate(WireModel):
    """Client create payload — owner comes from the session, not the body."""
    title: str
    description: str | None = None
    domain: TaskDomain
    priority: TaskPriority = TaskPriority.MEDIUM
    estimated_hours: EstimatedHours
    due_date: str | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)

    def to_insert(self, user_id: str) -> TaskCreate:
        """Build the storage insert for the authenticated owner.

        Raises ValidationFailure if due_date is not a parseable timestamp.
        """
        return validate_payload(TaskCreate, {
            "user_id": user_id,
            "title": self.title,
            "description": self.description,
            "domain": self.domain,
            "priority": self.priority,
            "estimated_hours": to_fixed_point(self.estimated_hours),
            "due_date": self.due_date or None,
        })


class ClientTaskUpdate(WireModel):
    """Client partial update — adds actual_hours, never completion or rewards."""
    title: str | None = None
    description: str | None = None
    domain: TaskDomain | None = None
    priority: TaskPriority | None = None
    estimated_hours: EstimatedHours | None = None
    actual_hours: ActualHours | None = None
    due_date: str | None = None

    @field_validator(*_NON_NULLABLE)
    @classmethod
    def reject_null(cls, v):
        return _reject_null(v)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return _strip_title(v)

    def to_update(self) -> TaskUpdate:
        """Build the storage update from the fields the client sent."""
        data = self.model_dump(exclude_unset=True)
        for key in ("estimated_hours", "actual_hours"):
            if data.get(key) is not None:
                data[key] = to_fixed_point(data[key])
        if "due_date" in data and not data["due_date"]:
            data["due_date"] = None
        return validate_payload(TaskUpdate, data)


# --- Response -----------------------------------------------------------------

class TaskResponse(WireModel):
    """Task as shown to a client — stored hours become floats."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    description: str | None = None
    domain: TaskDomain
    priority: TaskPriority = TaskPriority.MEDIUM
    estimated_hours: float
    actual_hours: float | None = None
    xp_reward: int = 0
    eu_reward: int = 0
    is_completed: bool = False
    completed_at: datetime | None = None
    due_date: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("estimated_hours", mode="before")
    @classmethod
    def coerce_estimated_hours(cls, v: object) -> float:
        return parse_hours(v)

    @field_validator("actual_hours", mode="before")
    @classmethod
    def coerce_actual_hours(cls, v: object) -> float | None:
        return parse_optional_hours(v)


InsertTask = TaskCreate
UpdateTask = TaskUpdate
ClientTask = ClientTaskCreate
ClientUpdateTask = ClientTaskUpdate
