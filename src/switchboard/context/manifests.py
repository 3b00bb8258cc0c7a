"""Dependency extraction from package.json, requirements.txt and go.mod."""

from __future__ import annotations

import json
import logging
import re

_VERSION_OPERATOR = re.compile(r"==|>=|<=")
_GO_REQUIRE = re.compile(r"require\s+(\S+)")

logger = logging.getLogger(__name__)


class ManifestError(ValueError):
    """A manifest could not be parsed; it contributes no dependencies."""


def parse_package_json(text: str) -> list[str]:
    """Keys of ``dependencies`` then ``devDependencies``; a non-object section is skipped."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(f"package.json is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError("package.json root is not an object")

    deps: list[str] = []
    for field in ("dependencies", "devDependencies"):
        section = data.get(field) or {}
        if not isinstance(section, dict):
            logger.debug(f"Skipping package.json '{field}': not an object")
            continue
        deps.extend(str(name) for name in section)
    return deps


def parse_requirements_txt(text: str) -> list[str]:
    """Requirement names with everything from the first version operator cut off."""
    deps: list[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        name = _VERSION_OPERATOR.split(line, maxsplit=1)[0].strip()
        if name:
            deps.append(name)
    return deps


def parse_go_mod(text: str) -> list[str]:
    """Every token following a literal ``require``, unmodified."""
    return _GO_REQUIRE.findall(text)
