"""Agent routing: score every agent against a project context and pick one."""

from switchboard.routing.models import AgentSelection, RankedAgent, RouteResult, ScoreVector
from switchboard.routing.router import AgentRouter, get_router, route, select_agent
from switchboard.routing.scoring import score
from switchboard.routing.selection import rank, select

__all__ = [
    "AgentRouter",
    "AgentSelection",
    "RankedAgent",
    "RouteResult",
    "ScoreVector",
    "get_router",
    "rank",
    "route",
    "score",
    "select",
    "select_agent",
]
