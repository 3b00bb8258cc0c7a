"""Additive scoring tables for the four signal families."""

from __future__ import annotations

from switchboard.catalog.models import AgentId
from switchboard.context.models import ProjectType

GENERAL_FLOOR = 0.5
KEYWORD_HIT_WEIGHT = 0.2
SUGGESTION_THRESHOLD = 0.3
MAX_SUGGESTIONS = 3

# Family 1: project type
PROJECT_TYPE_WEIGHTS: dict[ProjectType, dict[AgentId, float]] = {
    ProjectType.FRONTEND: {
        AgentId.FRONTEND_SPECIALIST: 0.8,
        AgentId.DESIGN_GURU: 0.4,
        AgentId.PERFORMANCE_OPTIMIZER: 0.3,
    },
    ProjectType.BACKEND: {
        AgentId.BACKEND_ARCHITECT: 0.8,
        AgentId.DATABASE_MASTER: 0.4,
        AgentId.PERFORMANCE_OPTIMIZER: 0.3,
    },
    ProjectType.FULLSTACK: {
        AgentId.FRONTEND_SPECIALIST: 0.5,
        AgentId.BACKEND_ARCHITECT: 0.5,
        AgentId.DATABASE_MASTER: 0.3,
    },
    ProjectType.DATABASE: {
        AgentId.DATABASE_MASTER: 0.8,
        AgentId.BACKEND_ARCHITECT: 0.4,
    },
    ProjectType.DEVOPS: {
        AgentId.DEVOPS_COMMANDER: 0.8,
        AgentId.BACKEND_ARCHITECT: 0.3,
    },
    ProjectType.DESIGN: {
        AgentId.DESIGN_GURU: 0.8,
        AgentId.FRONTEND_SPECIALIST: 0.4,
    },
    ProjectType.UNKNOWN: {},
}

# Family 2: lowercased technologies/frameworks; each family fires at most once
TECH_FAMILY_WEIGHTS: tuple[tuple[frozenset[str], AgentId, float], ...] = (
    (frozenset({"react", "vue", "svelte", "angular"}), AgentId.FRONTEND_SPECIALIST, 0.6),
    (
        frozenset({"express", "fastapi", "django", "gin", "echo", "node"}),
        AgentId.BACKEND_ARCHITECT,
        0.6,
    ),
    (frozenset({"postgresql", "mysql", "mongodb", "redis"}), AgentId.DATABASE_MASTER, 0.6),
    (frozenset({"docker", "kubernetes", "k8s"}), AgentId.DEVOPS_COMMANDER, 0.6),
)

# Family 3: request substrings granting a bonus beyond catalog keyword hits
REQUEST_BONUSES: tuple[tuple[tuple[str, ...], AgentId, float], ...] = (
    (("performance", "optimize", "speed"), AgentId.PERFORMANCE_OPTIMIZER, 0.5),
    (("test", "testing", "qa"), AgentId.TESTING_SPECIALIST, 0.5),
    (("design", "ui", "ux"), AgentId.DESIGN_GURU, 0.5),
    (("deploy", "docker", "ci"), AgentId.DEVOPS_COMMANDER, 0.5),
)

# Family 4: feature flags
TESTS_FLAG_WEIGHT = (AgentId.TESTING_SPECIALIST, 0.3)
DATABASE_FLAG_WEIGHT = (AgentId.DATABASE_MASTER, 0.3)
# Docker and CI share one bump
INFRA_FLAG_WEIGHT = (AgentId.DEVOPS_COMMANDER, 0.3)
