"""Pick the winning agent from a score vector and explain why."""

from __future__ import annotations

from switchboard.catalog.loader import AgentCatalog, get_catalog
from switchboard.catalog.models import AgentId
from switchboard.context.models import ProjectContext, ProjectType
from switchboard.routing.models import AgentSelection, RankedAgent, ScoreVector
from switchboard.routing.weights import MAX_SUGGESTIONS, SUGGESTION_THRESHOLD

# Scores are sums of one-decimal weights; compare at this precision
_SCORE_PRECISION = 9


def rank(scores: ScoreVector) -> list[RankedAgent]:
    """Descending by score; ties keep AgentId enumeration order (stable sort)."""
    entries = [
        RankedAgent(agent=agent_id, score=round(scores.get(agent_id, 0.0), _SCORE_PRECISION))
        for agent_id in AgentId
    ]
    return sorted(entries, key=lambda e: -e.score)


def select(
    scores: ScoreVector,
    context: ProjectContext,
    user_request: str,
    catalog: AgentCatalog | None = None,
) -> AgentSelection:
    if catalog is None:
        catalog = get_catalog()

    ranked = rank(scores)
    top = ranked[0]
    suggested = [e.agent for e in ranked[1:] if e.score > SUGGESTION_THRESHOLD][:MAX_SUGGESTIONS]

    return AgentSelection(
        selected_agent=top.agent,
        confidence=max(0.0, min(top.score, 1.0)),
        reasoning=build_reasoning(top.agent, context, user_request, catalog),
        suggested_agents=tuple(suggested),
    )


def build_reasoning(
    agent_id: AgentId,
    context: ProjectContext,
    user_request: str,
    catalog: AgentCatalog,
) -> str:
    agent = catalog.lookup(agent_id)
    reasons: list[str] = []

    if context.type != ProjectType.UNKNOWN:
        reasons.append(f"Project appears to be {context.type.value}-focused")
    if context.technologies:
        reasons.append(f"Technologies detected: {', '.join(context.technologies)}")
    matched = agent.matching_keywords(user_request)
    if matched:
        reasons.append(f"Request contains keywords: {', '.join(matched)}")

    return f"Selected {agent.name} because: {'; '.join(reasons)}."
