"""Starlette app factory with lifespan for catalog and router setup."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from starlette.applications import Starlette

from switchboard.catalog.loader import AgentCatalog
from switchboard.config import RouterConfig, default_config_path, load_config
from switchboard.routing.router import AgentRouter
from switchboard.server.routes_agents import routes as agent_routes
from switchboard.server.routes_system import routes as system_routes

logger = logging.getLogger(__name__)


def create_app(
    config: RouterConfig | None = None,
    catalog: AgentCatalog | None = None,
) -> Starlette:
    """Create a Starlette app serving the agent router.

    The catalog is built during startup; an incomplete catalog aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncGenerator[None, None]:
        resolved_config = config if config is not None else load_config(default_config_path())
        resolved_catalog = catalog if catalog is not None else AgentCatalog.load()
        app.state.router = AgentRouter(resolved_catalog, resolved_config)
        logger.info(f"Agent router ready with {len(resolved_catalog)} agents")
        yield

    return Starlette(routes=system_routes + agent_routes, lifespan=lifespan)
