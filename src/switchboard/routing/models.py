"""Pydantic models for routing results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from switchboard.catalog.models import AgentId
from switchboard.context.models import SerializableProjectContext

ScoreVector = dict[AgentId, float]


class RankedAgent(BaseModel):
    model_config = ConfigDict(frozen=True)

    agent: AgentId
    score: float


class AgentSelection(BaseModel):
    """The primary agent pick with confidence, reasoning and ranked alternates."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    selected_agent: AgentId = Field(alias="selectedAgent")
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str
    suggested_agents: tuple[AgentId, ...] = Field(default=(), alias="suggestedAgents")


class RouteResult(BaseModel):
    """Selection plus the context and scores it was derived from."""

    model_config = ConfigDict(frozen=True)

    selection: AgentSelection
    context: SerializableProjectContext
    scores: list[RankedAgent] = Field(default_factory=list)
