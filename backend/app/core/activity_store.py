"""Activity Store — in-memory owner of the activity collection.

Invariants:
    - Activities kept in insertion order; list() preserves it
    - Ids come from a monotonic counter: never decremented, never reused after delete
    - Every operation is one critical section under the store lock
    - Delete does not cascade to participations (ParticipationLedger owns those)

Design Decisions:
    - Counter over len(collection) + 1: deletes would otherwise reissue live or
      previously deleted ids (ADR: id stability)
    - threading.Lock over asyncio.Lock: holds whether handlers run on the event loop or in FastAPI's threadpool
    - Explicit object injected via Depends, not a module-level list (ADR: testability)
"""

import threading

from app.core.domain_types import Activity, ActivityFields, ActivityId
from app.core.errors import ActivityNotFoundError


class ActivityStore:
    """Create, fetch, list and delete activities."""

    def __init__(self) -> None:
        self._activities: dict[ActivityId, Activity] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def get(self, activity_id: int) -> Activity:
        """Exact id lookup. Raises ActivityNotFoundError."""
        with self._lock:
            activity = self._activities.get(ActivityId(activity_id))
        if activity is None:
            raise ActivityNotFoundError(activity_id)
        return activity

    def create(self, fields: ActivityFields) -> Activity:
        with self._lock:
            self._last_id += 1
            activity = Activity.from_fields(ActivityId(self._last_id), fields)
            self._activities[activity.id] = activity
        return activity

    def delete(self, activity_id: int) -> Activity:
        """Remove and return the activity. Raises ActivityNotFoundError."""
        with self._lock:
            activity = self._activities.pop(ActivityId(activity_id), None)
        if activity is None:
            raise ActivityNotFoundError(activity_id)
        return activity

    def list(self, creator_name: str | None = None) -> list[Activity]:
        """All activities, or those whose creator matches case-insensitively."""
        with self._lock:
            activities = tuple(self._activities.values())
        if not creator_name:
            return [*activities]
        wanted = creator_name.casefold()
        return [
            a for a in activities
            if a.creator_name is not None and a.creator_name.casefold() == wanted
        ]

    def __contains__(self, activity_id: int) -> bool:
        with self._lock:
            return ActivityId(activity_id) in self._activities

    def __len__(self) -> int:
        with self._lock:
            return len(self._activities)
