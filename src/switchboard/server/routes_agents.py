"""Agent routes: list and search the catalog, analyze a file set, route a request."""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from switchboard.catalog.models import AgentDescriptor, AgentId
from switchboard.context.models import to_serializable


class RouteRequest(BaseModel):
    files: dict[str, str] = Field(default_factory=dict)
    request: str = ""


def _dump_agent(agent: AgentDescriptor, *, include_prompt: bool) -> dict:
    exclude = None if include_prompt else {"prompt_template"}
    return agent.model_dump(mode="json", by_alias=True, exclude=exclude)


def _flag(request: Request, name: str) -> bool:
    return request.query_params.get(name, "").lower() in ("true", "1", "yes")


async def _parse_body(request: Request) -> RouteRequest | JSONResponse:
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse({"error": "Request body must be JSON"}, status_code=422)
    try:
        return RouteRequest.model_validate(body)
    except ValidationError as e:
        return JSONResponse(
            {
                "error": "Invalid route request",
                "details": e.errors(include_url=False, include_context=False),
            },
            status_code=422,
        )


async def list_agents(request: Request) -> JSONResponse:
    """GET /api/agents — list every agent in catalog order."""
    catalog = request.app.state.router.catalog
    include_prompt = _flag(request, "include_prompt")
    agents = [_dump_agent(a, include_prompt=include_prompt) for a in catalog.all()]
    return JSONResponse({"agents": agents, "count": len(agents)})


async def search_agents(request: Request) -> JSONResponse:
    """GET /api/agents/search?q=term — keyword, name and description search."""
    query = request.query_params.get("q", "")
    catalog = request.app.state.router.catalog
    agents = [_dump_agent(a, include_prompt=False) for a in catalog.search_by_keyword(query)]
    return JSONResponse({"agents": agents, "count": len(agents), "query": query})


async def get_agent(request: Request) -> JSONResponse:
    """GET /api/agents/{agent_id} — a single agent including its prompt template."""
    agent_id = request.path_params["agent_id"]
    if agent_id not in {a.value for a in AgentId}:
        return JSONResponse({"error": f"Agent '{agent_id}' not found"}, status_code=404)
    agent = request.app.state.router.lookup(agent_id)
    return JSONResponse(_dump_agent(agent, include_prompt=True))


async def analyze_context(request: Request) -> JSONResponse:
    """POST /api/context — derive the serializable project context for a file set."""
    parsed = await _parse_body(request)
    if isinstance(parsed, JSONResponse):
        return parsed
    context = request.app.state.router.analyze_project_context(parsed.files, parsed.request)
    return JSONResponse(to_serializable(context).model_dump(mode="json", by_alias=True))


async def route_request(request: Request) -> JSONResponse:
    """POST /api/route — select an agent for a file set and user request."""
    parsed = await _parse_body(request)
    if isinstance(parsed, JSONResponse):
        return parsed
    result = request.app.state.router.route(parsed.files, parsed.request)
    return JSONResponse(result.model_dump(mode="json", by_alias=True))


routes = [
    Route("/api/agents", list_agents),
    Route("/api/agents/search", search_agents),
    Route("/api/agents/{agent_id}", get_agent),
    Route("/api/context", analyze_context, methods=["POST"]),
    Route("/api/route", route_request, methods=["POST"]),
]
