"""Pydantic models for the derived project context."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ProjectType(StrEnum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    DATABASE = "database"
    DEVOPS = "devops"
    DESIGN = "design"
    UNKNOWN = "unknown"


class ProjectContext(BaseModel):
    """Shape of a project, derived once per request from its files."""

    model_config = ConfigDict(frozen=True)

    type: ProjectType = ProjectType.UNKNOWN
    # First-detection order, deduplicated
    technologies: tuple[str, ...] = ()
    frameworks: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    has_tests: bool = False
    has_database: bool = False
    has_docker: bool = False
    has_ci: bool = False
    file_count: int = 0


class SerializableProjectContext(BaseModel):
    """Context as attached to chat messages: no raw file contents, camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: ProjectType
    technologies: list[str] = Field(default_factory=list)
    frameworks: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    has_tests: bool = Field(default=False, alias="hasTests")
    has_database: bool = Field(default=False, alias="hasDatabase")
    has_docker: bool = Field(default=False, alias="hasDocker")
    has_ci: bool = Field(default=False, alias="hasCI")
    file_count: int = Field(default=0, alias="fileCount")


def to_serializable(
    context: ProjectContext, file_count: int | None = None
) -> SerializableProjectContext:
    return SerializableProjectContext(
        type=context.type,
        technologies=list(context.technologies),
        frameworks=list(context.frameworks),
        dependencies=list(context.dependencies),
        has_tests=context.has_tests,
        has_database=context.has_database,
        has_docker=context.has_docker,
        has_ci=context.has_ci,
        file_count=context.file_count if file_count is None else file_count,
    )
