"""AgentRouter: analyze a project and pick the agent best suited to a request."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache

from switchboard.catalog.loader import AgentCatalog, get_catalog
from switchboard.catalog.models import AgentDescriptor, AgentId
from switchboard.config import RouterConfig, default_config_path, load_config
from switchboard.context.extractor import analyze_project_context
from switchboard.context.models import ProjectContext, to_serializable
from switchboard.routing.models import AgentSelection, RouteResult, ScoreVector
from switchboard.routing.scoring import score
from switchboard.routing.selection import rank, select

logger = logging.getLogger(__name__)


class AgentRouter:
    """Stateless router over an immutable catalog; safe to share across callers."""

    def __init__(
        self,
        catalog: AgentCatalog | None = None,
        config: RouterConfig | None = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else get_catalog()
        self._config = config if config is not None else RouterConfig()

    @property
    def catalog(self) -> AgentCatalog:
        return self._catalog

    @property
    def config(self) -> RouterConfig:
        return self._config

    def analyze_project_context(
        self, files: Mapping[str, str], user_request: str = ""
    ) -> ProjectContext:
        return analyze_project_context(
            files,
            self._clip_request(user_request),
            max_content_bytes=self._config.max_content_bytes,
        )

    def score(self, context: ProjectContext, user_request: str) -> ScoreVector:
        return score(context, self._clip_request(user_request), self._catalog)

    def select_agent(self, context: ProjectContext, user_request: str) -> AgentSelection:
        request = self._clip_request(user_request)
        scores = score(context, request, self._catalog)
        selection = select(scores, context, request, self._catalog)
        logger.debug(
            f"Selected {selection.selected_agent} "
            f"(confidence={selection.confidence:.2f}, type={context.type})"
        )
        return selection

    def route(self, files: Mapping[str, str], user_request: str) -> RouteResult:
        """Analyze then select, returning the selection with its context and ranked scores."""
        request = self._clip_request(user_request)
        context = self.analyze_project_context(files, request)
        scores = score(context, request, self._catalog)
        return RouteResult(
            selection=select(scores, context, request, self._catalog),
            context=to_serializable(context),
            scores=rank(scores),
        )

    def lookup(self, agent_id: AgentId | str) -> AgentDescriptor:
        return self._catalog.lookup(agent_id)

    def _clip_request(self, user_request: str) -> str:
        limit = self._config.max_request_chars
        if limit > 0 and len(user_request) > limit:
            logger.debug(f"Request truncated: {len(user_request)} -> {limit} chars")
            return user_request[:limit]
        return user_request


@lru_cache(maxsize=1)
def get_router() -> AgentRouter:
    """Process-wide router over the bundled catalog and the working-directory config."""
    return AgentRouter(get_catalog(), load_config(default_config_path()))


def select_agent(context: ProjectContext, user_request: str) -> AgentSelection:
    return get_router().select_agent(context, user_request)


def route(files: Mapping[str, str], user_request: str) -> RouteResult:
    return get_router().route(files, user_request)
