"""AgentCatalog: load and query the immutable agent catalog."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Iterator
from functools import lru_cache
from importlib import resources
from pathlib import Path

from switchboard.catalog.models import AgentDescriptor, AgentId

logger = logging.getLogger(__name__)

CATALOG_RESOURCE = "agent-catalog.json"
PROMPTS_DIR = "prompts"


class CatalogIncomplete(Exception):
    """Raised when the catalog does not hold exactly one descriptor per AgentId."""

    def __init__(self, missing: Iterable[AgentId] = (), duplicates: Iterable[AgentId] = ()) -> None:
        self.missing = sorted(missing, key=_catalog_position)
        self.duplicates = sorted(duplicates, key=_catalog_position)
        parts: list[str] = []
        if self.missing:
            parts.append("missing descriptors for " + ", ".join(a.value for a in self.missing))
        if self.duplicates:
            parts.append("duplicate descriptors for " + ", ".join(a.value for a in self.duplicates))
        super().__init__("Agent catalog incomplete: " + "; ".join(parts))


def _catalog_position(agent_id: AgentId) -> int:
    return list(AgentId).index(agent_id)


class AgentCatalog:
    """Read-only registry with one descriptor per AgentId, in enumeration order."""

    def __init__(self, descriptors: Iterable[AgentDescriptor]) -> None:
        by_id: dict[AgentId, AgentDescriptor] = {}
        duplicates: set[AgentId] = set()
        for descriptor in descriptors:
            if descriptor.id in by_id:
                duplicates.add(descriptor.id)
            by_id[descriptor.id] = descriptor

        missing = [agent_id for agent_id in AgentId if agent_id not in by_id]
        if missing or duplicates:
            raise CatalogIncomplete(missing=missing, duplicates=duplicates)

        self._by_id = by_id
        self._ordered: tuple[AgentDescriptor, ...] = tuple(by_id[a] for a in AgentId)

    @classmethod
    def load(cls) -> AgentCatalog:
        """Load from bundled package data."""
        pkg = resources.files("switchboard.catalog")
        data = json.loads(pkg.joinpath(CATALOG_RESOURCE).read_text(encoding="utf-8"))
        prompts = pkg.joinpath(PROMPTS_DIR)

        def read_prompt(agent_id: str) -> str:
            resource = prompts.joinpath(f"{agent_id}.md")
            if not resource.is_file():
                return ""
            return resource.read_text(encoding="utf-8").rstrip("\n")

        catalog = cls._from_dict(data, read_prompt)
        logger.info(f"Agent catalog loaded: {len(catalog)} agents")
        return catalog

    @classmethod
    def from_json(cls, path: Path, prompts_dir: Path | None = None) -> AgentCatalog:
        """Load from an explicit file path (for testing and custom deployments).

        Prompt templates come from ``promptTemplate`` in the JSON entry, or from
        ``<prompts_dir>/<agent-id>.md`` when the entry has none.
        """
        data = json.loads(path.read_text(encoding="utf-8"))

        def read_prompt(agent_id: str) -> str:
            if prompts_dir is None:
                return ""
            prompt_path = prompts_dir / f"{agent_id}.md"
            try:
                return prompt_path.read_text(encoding="utf-8").rstrip("\n")
            except OSError:
                return ""

        return cls._from_dict(data, read_prompt)

    @classmethod
    def _from_dict(cls, data: dict, read_prompt: Callable[[str], str]) -> AgentCatalog:
        descriptors: list[AgentDescriptor] = []
        for entry in data.get("agents", []):
            entry = dict(entry)
            if not entry.get("promptTemplate"):
                entry["promptTemplate"] = read_prompt(str(entry.get("id", "")))
            descriptors.append(AgentDescriptor.model_validate(entry))
        return cls(descriptors)

    def lookup(self, agent_id: AgentId | str) -> AgentDescriptor:
        """Total lookup; a plain string is coerced through AgentId (ValueError if unknown)."""
        return self._by_id[AgentId(agent_id)]

    def all(self) -> list[AgentDescriptor]:
        return list(self._ordered)

    def search_by_keyword(self, term: str) -> list[AgentDescriptor]:
        """Agents whose keywords, name or description contain ``term`` (case-insensitive)."""
        needle = term.strip().lower()
        if not needle:
            return []
        return [
            agent
            for agent in self._ordered
            if any(needle in kw for kw in agent.keywords)
            or needle in agent.name.lower()
            or needle in agent.description.lower()
        ]

    def prompt_for(self, agent_id: AgentId | str) -> str:
        return self.lookup(agent_id).prompt_template

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[AgentDescriptor]:
        return iter(self._ordered)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._by_id


@lru_cache(maxsize=1)
def get_catalog() -> AgentCatalog:
    """Process-wide catalog, built once on first use."""
    return AgentCatalog.load()
