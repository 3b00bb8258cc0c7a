"""Agent catalog: the fixed roster of specialist agents."""

from switchboard.catalog.loader import AgentCatalog, CatalogIncomplete, get_catalog
from switchboard.catalog.models import FALLBACK_AGENT, AgentDescriptor, AgentId

__all__ = [
    "FALLBACK_AGENT",
    "AgentCatalog",
    "AgentDescriptor",
    "AgentId",
    "CatalogIncomplete",
    "get_catalog",
]
