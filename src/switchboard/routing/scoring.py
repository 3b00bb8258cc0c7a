"""Additive agent scoring over four independent signal families."""

from __future__ import annotations

from switchboard.catalog.loader import AgentCatalog, get_catalog
from switchboard.catalog.models import FALLBACK_AGENT, AgentId
from switchboard.context.models import ProjectContext, ProjectType
from switchboard.routing.models import ScoreVector
from switchboard.routing.weights import (
    DATABASE_FLAG_WEIGHT,
    GENERAL_FLOOR,
    INFRA_FLAG_WEIGHT,
    KEYWORD_HIT_WEIGHT,
    PROJECT_TYPE_WEIGHTS,
    REQUEST_BONUSES,
    TECH_FAMILY_WEIGHTS,
    TESTS_FLAG_WEIGHT,
)


def initial_scores() -> ScoreVector:
    scores = {agent_id: 0.0 for agent_id in AgentId}
    scores[FALLBACK_AGENT] = GENERAL_FLOOR
    return scores


def score(
    context: ProjectContext,
    user_request: str,
    catalog: AgentCatalog | None = None,
) -> ScoreVector:
    """Dense score vector over every AgentId. Deterministic and order-independent."""
    if catalog is None:
        catalog = get_catalog()

    scores = initial_scores()
    request = user_request.lower()
    score_project_type(scores, context.type)
    score_technologies(scores, context)
    score_request(scores, request, catalog)
    score_features(scores, context)
    return scores


def score_project_type(scores: ScoreVector, project_type: ProjectType) -> None:
    for agent_id, weight in PROJECT_TYPE_WEIGHTS.get(project_type, {}).items():
        scores[agent_id] += weight


def score_technologies(scores: ScoreVector, context: ProjectContext) -> None:
    all_tech = {t.lower() for t in (*context.technologies, *context.frameworks)}
    for family, agent_id, weight in TECH_FAMILY_WEIGHTS:
        if all_tech & family:
            scores[agent_id] += weight


def score_request(scores: ScoreVector, request: str, catalog: AgentCatalog) -> None:
    """Keyword hits per catalog agent, then fixed substring bonuses.

    ``request`` must already be lowercased.
    """
    for agent in catalog:
        hits = len(agent.matching_keywords(request))
        if hits:
            scores[agent.id] += KEYWORD_HIT_WEIGHT * hits

    for terms, agent_id, weight in REQUEST_BONUSES:
        if any(term in request for term in terms):
            scores[agent_id] += weight


def score_features(scores: ScoreVector, context: ProjectContext) -> None:
    if context.has_tests:
        agent_id, weight = TESTS_FLAG_WEIGHT
        scores[agent_id] += weight
    if context.has_database:
        agent_id, weight = DATABASE_FLAG_WEIGHT
        scores[agent_id] += weight
    if context.has_docker or context.has_ci:
        agent_id, weight = INFRA_FLAG_WEIGHT
        scores[agent_id] += weight
