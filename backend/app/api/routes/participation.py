"""Participation — join/leave an activity and list a user's activities.

Invariants:
    - userId resolved from JSON body first, then the query string
    - Missing/falsy userId → InvalidInputError (400) raised by the ledger
    - Join on a missing activity → 404; duplicate join → 400; leave without pair → 404

Design Decisions:
    - Two leave routes share one helper: /atividades/{id}/leave (body/query userId)
      and /usuarios/{userId}/atividades/{id}/leave (path userId)
    - Optional body over required body: front ends send userId either way
"""

import logging

from fastapi import APIRouter, Depends, Query

from app.core.activity_store import ActivityStore
from app.core.participation_ledger import ParticipationLedger
from app.infrastructure.stores import get_activity_store, get_participation_ledger
from app.schemas.activity import (
    ActivityResponse, JoinResponse, LeaveResponse, ParticipationRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Atividades"])


def _resolve_user_id(
    body: ParticipationRequest | None, query_user_id: int | None,
) -> int | None:
    if body is not None and body.user_id is not None:
        return body.user_id
    return query_user_id


@router.post(
    "/atividades/{activity_id}/join", response_model=JoinResponse,
    response_model_exclude_unset=True,
    summary="Participar de uma atividade",
)
async def join_activity(
    activity_id: int,
    body: ParticipationRequest | None = None,
    user_id: int | None = Query(None, alias="userId"),
    ledger: ParticipationLedger = Depends(get_participation_ledger),
):
    """Register the user as a participant of the activity."""
    resolved = _resolve_user_id(body, user_id)
    activity = ledger.join(resolved, activity_id)
    logger.info(
        "User joined activity",
        extra={"activity_id": activity_id, "user_id": resolved},
    )
    return JoinResponse(
        mensagem="Entrada na atividade realizada com sucesso",
        atividade=ActivityResponse.from_activity(activity),
        atividade_id=activity_id,
        user_id=resolved,
    )


@router.delete(
    "/atividades/{activity_id}/leave", response_model=LeaveResponse,
    summary="Sair de uma atividade",
)
async def leave_activity(
    activity_id: int,
    body: ParticipationRequest | None = None,
    user_id: int | None = Query(None, alias="userId"),
    ledger: ParticipationLedger = Depends(get_participation_ledger),
):
    """Remove the user from the activity (userId in body or query)."""
    return _leave(ledger, _resolve_user_id(body, user_id), activity_id)


@router.delete(
    "/usuarios/{user_id}/atividades/{activity_id}/leave",
    response_model=LeaveResponse,
    summary="Sair de uma atividade (usuário no caminho)",
)
async def leave_activity_for_user(
    user_id: int,
    activity_id: int,
    ledger: ParticipationLedger = Depends(get_participation_ledger),
):
    """Remove the user from the activity (userId in path)."""
    return _leave(ledger, user_id, activity_id)


@router.get(
    "/usuarios/{user_id}/atividades", response_model=list[ActivityResponse],
    summary="Lista as atividades das quais o usuário participa",
)
async def list_user_activities(
    user_id: int,
    store: ActivityStore = Depends(get_activity_store),
    ledger: ParticipationLedger = Depends(get_participation_ledger),
):
    """Joined activities still present in the store, in join order."""
    by_id = {a.id: a for a in store.list()}
    return [
        ActivityResponse.from_activity(by_id[activity_id], participa=True)
        for activity_id in ledger.activities_for(user_id)
        if activity_id in by_id
    ]


def _leave(
    ledger: ParticipationLedger, user_id: int | None, activity_id: int,
) -> LeaveResponse:
    participation = ledger.leave(user_id, activity_id)
    logger.info(
        "User left activity",
        extra={"activity_id": activity_id, "user_id": user_id},
    )
    return LeaveResponse(
        mensagem="Usuário saiu da atividade com sucesso",
        atividade_id=participation.activity_id,
        user_id=participation.user_id,
    )
