"""Activity Schemas — Pydantic models for the /atividades and /usuarios API boundaries.

Invariants:
    - Wire format is camelCase (creatorName, durationMinutes, userId); Python side is snake_case
    - ActivityCreate fields are all optional and stored verbatim (any subset of fields is accepted)
    - `participa` only appears in a response when a userId was supplied

Design Decisions:
    - alias_generator=to_camel + populate_by_name: one model serves both directions
    - userId / creatorName are the canonical names; legacy rm / criador are not accepted
    - No length/range limits: only JSON types are checked
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.core.domain_types import Activity, ActivityFields


class CamelModel(BaseModel):
    """Base model serializing to camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ActivityCreate(CamelModel):
    """Activity creation body."""
    name: str | None = None
    creator_name: str | None = None
    description: str | None = None
    category: str | None = None
    duration_minutes: int | None = None

    def to_fields(self) -> ActivityFields:
        return ActivityFields(
            name=self.name,
            creator_name=self.creator_name,
            description=self.description,
            category=self.category,
            duration_minutes=self.duration_minutes,
        )


class ActivityResponse(CamelModel):
    """Public activity representation."""
    id: int
    name: str | None = None
    creator_name: str | None = None
    description: str | None = None
    category: str | None = None
    duration_minutes: int | None = None
    participa: bool | None = None

    @classmethod
    def from_activity(
        cls, activity: Activity, participa: bool | None = None,
    ) -> "ActivityResponse":
        """Build a response; `participa` is left unset when not known.

        Routes use response_model_exclude_unset so an unset `participa`
        is omitted from the JSON body.
        """
        data = {
            "id": activity.id,
            "name": activity.name,
            "creator_name": activity.creator_name,
            "description": activity.description,
            "category": activity.category,
            "duration_minutes": activity.duration_minutes,
        }
        if participa is not None:
            data["participa"] = participa
        return cls(**data)


class ActivityDeleted(BaseModel):
    """DELETE /atividades/{id} response."""
    mensagem: str
    removida: list[ActivityResponse]


class ParticipationRequest(CamelModel):
    """Optional join/leave body — userId may also come from the query string."""
    user_id: int | None = None


class JoinResponse(CamelModel):
    """POST /atividades/{id}/join response."""
    mensagem: str
    atividade: ActivityResponse
    atividade_id: int
    user_id: int


class LeaveResponse(CamelModel):
    """Leave response for both leave routes."""
    mensagem: str
    atividade_id: int
    user_id: int
