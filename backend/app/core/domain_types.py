"""Domain Types — identity types and immutable records for activities and participations.

Invariants:
    - ActivityId, UserId wrap int — never use bare int in store/ledger signatures
    - Activity is immutable after creation (no update operation exists)
    - Participation identity is the (user_id, activity_id) pair

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Frozen dataclasses over ORM models: in-memory only, equality by value
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ActivityId = NewType("ActivityId", int)
UserId = NewType("UserId", int)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class ActivityFields:
    """Caller-supplied activity data — stored verbatim, no validation."""
    name: str | None = None
    creator_name: str | None = None
    description: str | None = None
    category: str | None = None
    duration_minutes: int | None = None


@dataclass(frozen=True)
class Activity:
    """A stored activity. `id` is assigned by ActivityStore.create."""
    id: ActivityId
    name: str | None = None
    creator_name: str | None = None
    description: str | None = None
    category: str | None = None
    duration_minutes: int | None = None

    @classmethod
    def from_fields(cls, activity_id: ActivityId, fields: ActivityFields) -> "Activity":
        return cls(
            id=activity_id,
            name=fields.name,
            creator_name=fields.creator_name,
            description=fields.description,
            category=fields.category,
            duration_minutes=fields.duration_minutes,
        )


@dataclass(frozen=True)
class Participation:
    """A user taking part in an activity."""
    user_id: UserId
    activity_id: ActivityId
