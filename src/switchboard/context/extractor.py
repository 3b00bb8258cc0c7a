"""Project context extraction: classify a file set and detect its stack.

Pure functions over ``(files, user_request)``; no I/O. All content checks run
against a single lowercased buffer built once per call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping

from switchboard.context.manifests import (
    ManifestError,
    parse_go_mod,
    parse_package_json,
    parse_requirements_txt,
)
from switchboard.context.models import ProjectContext, ProjectType
from switchboard.context.vocabulary import (
    BUCKET_RULES,
    CI_PATH_RULE,
    DATABASE_CONTENT_TERMS,
    DATABASE_PATH_RULE,
    DESIGN_CONTENT_TERMS,
    DOCKER_PATH_RULE,
    FRAMEWORK_TERMS,
    GO_MOD,
    LANGUAGE_SUFFIXES,
    PACKAGE_JSON,
    REQUIREMENTS_TXT,
    TECHNOLOGY_TERMS,
    TEST_PATH_RULE,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONTENT_BYTES = 4 * 1024 * 1024

_MANIFEST_PARSERS: tuple[tuple[str, Callable[[str], list[str]]], ...] = (
    (PACKAGE_JSON, parse_package_json),
    (REQUIREMENTS_TXT, parse_requirements_txt),
    (GO_MOD, parse_go_mod),
)


def analyze_project_context(
    files: Mapping[str, str],
    user_request: str = "",
    *,
    max_content_bytes: int = DEFAULT_MAX_CONTENT_BYTES,
) -> ProjectContext:
    """Derive a ProjectContext from project files.

    ``user_request`` is accepted for interface symmetry with selection; the
    extracted context depends on the files only.
    """
    paths = list(files)
    content = aggregate_content(files.values(), max_content_bytes)

    return ProjectContext(
        type=detect_project_type(paths, content),
        technologies=detect_technologies(paths, content),
        frameworks=detect_frameworks(content),
        dependencies=extract_dependencies(files),
        has_tests=any(TEST_PATH_RULE.matches(p) for p in paths),
        has_database=any(DATABASE_PATH_RULE.matches(p) for p in paths)
        or _contains_any(content, DATABASE_CONTENT_TERMS),
        has_docker=any(DOCKER_PATH_RULE.matches(p) for p in paths),
        has_ci=any(CI_PATH_RULE.matches(p) for p in paths),
        file_count=len(paths),
    )


def aggregate_content(contents: Iterable[str], max_content_bytes: int) -> str:
    """Concatenate contents newline-separated, cap the length, then lowercase once."""
    joined = "\n".join(contents)
    if max_content_bytes > 0 and len(joined) > max_content_bytes:
        logger.debug(
            f"Content truncated for scanning: {len(joined)} -> {max_content_bytes} chars"
        )
        joined = joined[:max_content_bytes]
    return joined.lower()


def detect_project_type(paths: list[str], content: str) -> ProjectType:
    counts = {
        bucket: sum(1 for p in paths if rule.matches(p)) for bucket, rule in BUCKET_RULES.items()
    }
    frontend = counts[ProjectType.FRONTEND]
    backend = counts[ProjectType.BACKEND]

    if frontend > 0 and backend > 0:
        return ProjectType.FULLSTACK
    if frontend > 0:
        return ProjectType.FRONTEND
    if backend > 0:
        return ProjectType.BACKEND
    if counts[ProjectType.DATABASE] > 0:
        return ProjectType.DATABASE
    if counts[ProjectType.DEVOPS] > 0:
        return ProjectType.DEVOPS
    if _contains_any(content, DESIGN_CONTENT_TERMS):
        return ProjectType.DESIGN
    return ProjectType.UNKNOWN


def detect_technologies(paths: list[str], content: str) -> tuple[str, ...]:
    found: list[str] = []
    for suffixes, language in LANGUAGE_SUFFIXES:
        if any(p.endswith(suffixes) for p in paths):
            found.append(language)
    found.extend(_match_terms(content, TECHNOLOGY_TERMS))
    return _unique(found)


def detect_frameworks(content: str) -> tuple[str, ...]:
    return _unique(_match_terms(content, FRAMEWORK_TERMS))


def extract_dependencies(files: Mapping[str, str]) -> tuple[str, ...]:
    deps: list[str] = []
    for filename, parser in _MANIFEST_PARSERS:
        text = files.get(filename)
        if not text:
            continue
        try:
            deps.extend(parser(text))
        except ManifestError as e:
            logger.debug(f"Skipping malformed {filename}: {e}")
    return _unique(deps)


def _match_terms(content: str, table: tuple[tuple[tuple[str, ...], str], ...]) -> list[str]:
    return [name for terms, name in table if _contains_any(content, terms)]


def _contains_any(content: str, terms: Iterable[str]) -> bool:
    return any(term in content for term in terms)


def _unique(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))
