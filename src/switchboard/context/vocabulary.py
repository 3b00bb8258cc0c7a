"""Closed-vocabulary tables for project classification and technology detection.

Path rules are case-sensitive and applied to the path as given. Content terms
are matched against the lowercased, concatenated file contents.
"""

from __future__ import annotations

from dataclasses import dataclass

from switchboard.context.models import ProjectType


@dataclass(frozen=True)
class PathRule:
    """Matches a path containing any fragment or ending with any suffix."""

    contains: tuple[str, ...] = ()
    suffixes: tuple[str, ...] = ()

    def matches(self, path: str) -> bool:
        return any(f in path for f in self.contains) or path.endswith(self.suffixes)


# Project-type buckets, counted over all paths
BUCKET_RULES: dict[ProjectType, PathRule] = {
    ProjectType.FRONTEND: PathRule(
        contains=("src/components", "pages/"),
        suffixes=(".tsx", ".vue", ".svelte"),
    ),
    ProjectType.BACKEND: PathRule(
        contains=("api/", "server/", "routes/", "controllers/", "models/"),
    ),
    ProjectType.DATABASE: PathRule(
        contains=("migrations/", "schema", "database/"),
        suffixes=(".sql",),
    ),
    ProjectType.DEVOPS: PathRule(
        contains=("Dockerfile", "docker-compose", "k8s/", ".github/workflows/"),
        suffixes=(".yml",),
    ),
}

# Content fallback when no path bucket fires
DESIGN_CONTENT_TERMS: tuple[str, ...] = ("design", "ui", "ux")

# Language tags by file suffix
LANGUAGE_SUFFIXES: tuple[tuple[tuple[str, ...], str], ...] = (
    ((".ts", ".tsx"), "TypeScript"),
    ((".js", ".jsx"), "JavaScript"),
    ((".py",), "Python"),
    ((".go",), "Go"),
    ((".rs",), "Rust"),
)

# Content substrings -> canonical technology name
TECHNOLOGY_TERMS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("react",), "React"),
    (("vue",), "Vue"),
    (("svelte",), "Svelte"),
    (("angular",), "Angular"),
    (("express",), "Express"),
    (("fastify",), "Fastify"),
    (("next",), "Next.js"),
    (("nuxt",), "Nuxt"),
    (("postgresql", "postgres"), "PostgreSQL"),
    (("mysql",), "MySQL"),
    (("mongodb",), "MongoDB"),
    (("redis",), "Redis"),
)

# Content substrings -> canonical framework name
FRAMEWORK_TERMS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("remix",), "Remix"),
    (("nextjs", "next.js"), "Next.js"),
    (("nuxtjs", "nuxt.js"), "Nuxt.js"),
    (("sveltekit",), "SvelteKit"),
    (("astro",), "Astro"),
    (("gatsby",), "Gatsby"),
    (("fastapi",), "FastAPI"),
    (("django",), "Django"),
    (("flask",), "Flask"),
    (("gin",), "Gin"),
    (("echo",), "Echo"),
)

# Feature flags
TEST_PATH_RULE = PathRule(
    contains=("test", "spec", "__tests__"),
    suffixes=(".test.ts", ".test.js", ".spec.ts", ".spec.js"),
)
DATABASE_PATH_RULE = PathRule(contains=("migration", "schema"), suffixes=(".sql",))
DATABASE_CONTENT_TERMS: tuple[str, ...] = ("database", "db")
DOCKER_PATH_RULE = PathRule(contains=("Dockerfile", "docker-compose", ".dockerignore"))
CI_PATH_RULE = PathRule(
    contains=(".github/workflows/", ".gitlab-ci.yml", "jenkins", "circleci"),
)

# Manifests are read at the root of the file set only
PACKAGE_JSON = "package.json"
REQUIREMENTS_TXT = "requirements.txt"
GO_MOD = "go.mod"
