"""Activities — list, fetch, create and delete activity records.

Invariants:
    - `participa` is included only when the caller passes userId
    - Unknown ids surface as ActivityNotFoundError → 404 {"erro"} via global handler
    - Routes never touch collections directly (delegate to ActivityStore/ParticipationLedger)

Design Decisions:
    - response_model_exclude_unset: omits `participa` when it was never computed
    - creatorName is the only creator filter accepted (legacy `criador` dropped)
    - DELETE returns `removida` as a one-element list, the shape existing clients parse
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from app.core.activity_store import ActivityStore
from app.core.participation_ledger import ParticipationLedger
from app.infrastructure.stores import get_activity_store, get_participation_ledger
from app.schemas.activity import ActivityCreate, ActivityDeleted, ActivityResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/atividades", tags=["Atividades"])


@router.get(
    "", response_model=list[ActivityResponse],
    response_model_exclude_unset=True,
    summary="Lista todas as atividades ou filtra pelo criador",
)
async def list_activities(
    creator_name: str | None = Query(None, alias="creatorName"),
    user_id: int | None = Query(None, alias="userId"),
    store: ActivityStore = Depends(get_activity_store),
    ledger: ParticipationLedger = Depends(get_participation_ledger),
):
    """List activities, optionally filtered by creator (case-insensitive)."""
    activities = store.list(creator_name)
    return [
        ActivityResponse.from_activity(
            a,
            ledger.is_participating(user_id, a.id) if user_id is not None else None,
        )
        for a in activities
    ]


@router.get(
    "/{activity_id}", response_model=ActivityResponse,
    response_model_exclude_unset=True,
    summary="Busca uma atividade pelo ID",
)
async def get_activity(
    activity_id: int,
    user_id: int | None = Query(None, alias="userId"),
    store: ActivityStore = Depends(get_activity_store),
    ledger: ParticipationLedger = Depends(get_participation_ledger),
):
    """Get one activity; adds `participa` when userId is given."""
    activity = store.get(activity_id)
    participa = (
        ledger.is_participating(user_id, activity_id)
        if user_id is not None else None
    )
    return ActivityResponse.from_activity(activity, participa)


@router.post(
    "", response_model=ActivityResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    summary="Cadastra uma nova atividade",
)
async def create_activity(
    body: ActivityCreate, store: ActivityStore = Depends(get_activity_store),
):
    """Create an activity. The id is assigned by the store."""
    activity = store.create(body.to_fields())
    logger.info(
        f"Activity created: {activity.name}",
        extra={"activity_id": activity.id},
    )
    return ActivityResponse.from_activity(activity)


@router.delete(
    "/{activity_id}", response_model=ActivityDeleted,
    response_model_exclude_unset=True,
    summary="Remove uma atividade",
)
async def delete_activity(
    activity_id: int, store: ActivityStore = Depends(get_activity_store),
):
    """Delete an activity. Participations referencing it are kept."""
    removed = store.delete(activity_id)
    logger.info("Activity deleted", extra={"activity_id": activity_id})
    return ActivityDeleted(
        mensagem="Atividade removida",
        removida=[ActivityResponse.from_activity(removed)],
    )
