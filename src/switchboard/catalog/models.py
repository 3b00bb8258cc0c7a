"""Pydantic models for the agent catalog."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AgentId(StrEnum):
    FRONTEND_SPECIALIST = "frontend-specialist"
    BACKEND_ARCHITECT = "backend-architect"
    DATABASE_MASTER = "database-master"
    DEVOPS_COMMANDER = "devops-commander"
    DESIGN_GURU = "design-guru"
    PERFORMANCE_OPTIMIZER = "performance-optimizer"
    TESTING_SPECIALIST = "testing-specialist"
    GENERAL = "general"


FALLBACK_AGENT = AgentId.GENERAL


class AgentDescriptor(BaseModel):
    """Display metadata, vocabulary and system prompt for one agent."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: AgentId
    name: str
    description: str
    expertise: tuple[str, ...] = ()
    icon: str = ""  # opaque icon class for the UI
    color: str = ""  # opaque gradient class for the UI
    capabilities: tuple[str, ...] = ()
    prompt_template: str = Field(default="", alias="promptTemplate")
    keywords: tuple[str, ...] = ()

    @field_validator("keywords")
    @classmethod
    def _lowercase_keywords(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        seen: list[str] = []
        for kw in value:
            kw = kw.strip().lower()
            if kw and kw not in seen:
                seen.append(kw)
        return tuple(seen)

    def matching_keywords(self, text: str) -> list[str]:
        """Keywords occurring as substrings of ``text`` (case-insensitive), in catalog order."""
        lowered = text.lower()
        return [kw for kw in self.keywords if kw in lowered]
