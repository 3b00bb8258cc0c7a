"""Liveness and version routes for the router service."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from switchboard import __version__


async def health(request: Request) -> JSONResponse:
    """GET /health — liveness plus the size of the loaded agent catalog."""
    catalog = request.app.state.router.catalog
    return JSONResponse({"status": "ok", "agents": len(catalog)})


async def version(request: Request) -> JSONResponse:
    return JSONResponse({"version": __version__})


routes = [
    Route("/health", health),
    Route("/api/version", version),
]
