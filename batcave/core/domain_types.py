"""Domain Types — identifiers, closed enums and numeric bounds for tasks.

Invariants:
    - UserId and TaskId wrap UUID-formatted text (the storage key type)
    - TaskDomain and TaskPriority are closed sets; schemas reject anything else
    - Hour bounds are the business rules for client input, not storage limits

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and compare equal to the stored TEXT value
"""

from decimal import Decimal
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
TaskId = NewType("TaskId", str)


# ─── Enums ───────────────────────────────────────────────────────

class TaskDomain(str, Enum):
    """Life area a task belongs to — maps to DB `domain` column."""
    ACADEMIC = "academic"
    FITNESS = "fitness"
    CREATIVE = "creative"
    SOCIAL = "social"
    MAINTENANCE = "maintenance"


class TaskPriority(str, Enum):
    """Task urgency — maps to DB `priority` column (default medium)."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


# ─── Hour Bounds ─────────────────────────────────────────────────

# NUMERIC(4, 1) in storage
HOURS_PRECISION = 4
HOURS_SCALE = 1
HOURS_QUANTUM = Decimal("0.1")

DEFAULT_ESTIMATED_HOURS = Decimal("1.0")

ESTIMATED_HOURS_MIN = 0.5
ESTIMATED_HOURS_MAX = 24.0
ESTIMATED_HOURS_STEP = 0.5

ACTUAL_HOURS_MIN = 0.1
ACTUAL_HOURS_MAX = 100.0
ACTUAL_HOURS_STEP = 0.1
