from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DESCRIPTION_MIN_LENGTH = 10

ArchitectureChoice = Literal["modular-monolith", "microservices"]


class WireModel(BaseModel):
    """Immutable value object serialized with camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


def _reject_explicit_null(value: Any) -> Any:
    # Optional sections may be omitted, but an explicit null is not a value.
    if value is None:
        raise ValueError("Field may be omitted but must not be null")
    return value


class Constraints(WireModel):
    budget: str | None = None
    timeline: str | None = None
    scale: str | None = None

    @field_validator("budget", "timeline", "scale", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_explicit_null(value)


class Preferences(WireModel):
    stack: list[str] | None = None
    hosting: str | None = None

    @field_validator("stack", "hosting", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_explicit_null(value)


class ArchitectureRequest(WireModel):
    """Validated body of `POST /architecture`."""
    description: str = Field(
        min_length=DESCRIPTION_MIN_LENGTH,
        description="Free-text product idea to analyse",
    )
    constraints: Constraints | None = None
    preferences: Preferences | None = None

    @field_validator("constraints", "preferences", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_explicit_null(value)

    @field_validator("description")
    @classmethod
    def description_has_content(cls, value: str) -> str:
        # Padding with whitespace must not satisfy the length floor.
        if len(value.strip()) < DESCRIPTION_MIN_LENGTH:
            raise ValueError(
                f"Description must have at least {DESCRIPTION_MIN_LENGTH} characters besides surrounding whitespace"
            )
        return value


class SignalSet(WireModel):
    """Keyword themes detected in a description. All twelve flags are always present."""
    realtime: bool
    scale: bool
    compliance: bool
    offline: bool
    data_heavy: bool
    payments: bool
    mobile: bool
    web: bool
    mvp: bool
    marketplace: bool
    streaming: bool
    integration: bool

    def active(self) -> list[str]:
        """Wire names of the flags that are set, in declaration order."""
        return [
            to_camel(name)
            for name in type(self).model_fields
            if getattr(self, name)
        ]


class ComponentPlan(WireModel):
    clients: str
    backend: str
    data: list[str] = Field(description="Data stores, relational base first")
    infra: str
    security: str


class AgentRole(str, Enum):
    PLATFORM_ARCHITECT = "Platform Architect"
    BACKEND_SPECIALIST = "Backend Specialist"
    FRONTEND_MOBILE_EXPERT = "Frontend + Mobile Expert"
    DATA_AI_ENGINEER = "Data + AI Engineer"
    SECURITY_COMPLIANCE = "Security + Compliance"


class AgentOpinion(WireModel):
    name: str
    role: AgentRole
    focus: str
    recommendation: str
    risks: list[str] = Field(default_factory=list)


class Decision(WireModel):
    architecture: ArchitectureChoice
    rationale: str
    components: ComponentPlan
    risks: list[str] = Field(default_factory=list)
    next_steps: list[str]


class ArchitectureResponse(WireModel):
    """Artifact returned by the architecture pipeline."""
    input: ArchitectureRequest
    signals: SignalSet
    agents: list[AgentOpinion]
    decision: Decision
