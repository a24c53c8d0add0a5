"""Participation Ledger — in-memory owner of (user, activity) participation pairs.

Invariants:
    - At most one Participation per (user_id, activity_id) pair
    - join requires the activity to exist in the ActivityStore at call time
    - Ledger reads the ActivityStore, never mutates it
    - Check-then-insert for join runs under a single lock acquisition

Design Decisions:
    - dict keyed by the pair: uniqueness by construction, insertion order kept
    - leave does not consult the ActivityStore: pairs left dangling by an
      activity delete can still be removed
    - Falsy user ids rejected here, not only at the HTTP boundary, so every
      caller gets the same InvalidInputError
"""

import threading

from app.core.activity_store import ActivityStore
from app.core.domain_types import Activity, ActivityId, Participation, UserId
from app.core.errors import (
    AlreadyJoinedError, InvalidInputError, NotParticipatingError,
)


class ParticipationLedger:
    """Join, leave and membership queries over participations."""

    def __init__(self, activity_store: ActivityStore) -> None:
        self._activity_store = activity_store
        self._participations: dict[tuple[UserId, ActivityId], Participation] = {}
        self._lock = threading.Lock()

    def is_participating(self, user_id: int, activity_id: int) -> bool:
        with self._lock:
            return (UserId(user_id), ActivityId(activity_id)) in self._participations

    def join(self, user_id: int | None, activity_id: int) -> Activity:
        """Register the user in the activity and return the activity.

        Raises InvalidInputError, ActivityNotFoundError or AlreadyJoinedError.
        """
        _require_user_id(user_id)
        key = (UserId(user_id), ActivityId(activity_id))
        with self._lock:
            activity = self._activity_store.get(activity_id)
            if key in self._participations:
                raise AlreadyJoinedError(user_id, activity_id)
            self._participations[key] = Participation(*key)
        return activity

    def leave(self, user_id: int | None, activity_id: int) -> Participation:
        """Remove the pair and return it. Raises NotParticipatingError."""
        _require_user_id(user_id)
        key = (UserId(user_id), ActivityId(activity_id))
        with self._lock:
            participation = self._participations.pop(key, None)
        if participation is None:
            raise NotParticipatingError(user_id, activity_id)
        return participation

    def activities_for(self, user_id: int) -> list[ActivityId]:
        """Activity ids the user has joined, in join order."""
        with self._lock:
            return [
                p.activity_id for p in self._participations.values()
                if p.user_id == user_id
            ]

    def participants_of(self, activity_id: int) -> list[UserId]:
        with self._lock:
            return [
                p.user_id for p in self._participations.values()
                if p.activity_id == activity_id
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._participations)


def _require_user_id(user_id: int | None) -> None:
    if not user_id:
        raise InvalidInputError("userId")
