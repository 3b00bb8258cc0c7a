"""Shared fixtures for switchboard tests."""

from pathlib import Path

import pytest

from switchboard.catalog.loader import AgentCatalog
from switchboard.config import RouterConfig
from switchboard.routing.router import AgentRouter


def _write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture(scope="session")
def catalog() -> AgentCatalog:
    return AgentCatalog.load()


@pytest.fixture
def router(catalog: AgentCatalog) -> AgentRouter:
    return AgentRouter(catalog, RouterConfig())


@pytest.fixture
def frontend_files() -> dict[str, str]:
    return {"src/components/App.tsx": "import React from 'react'"}


@pytest.fixture
def backend_files() -> dict[str, str]:
    return {
        "api/server.py": "from fastapi import FastAPI",
        "requirements.txt": "fastapi==0.110\nredis>=5.0",
    }


@pytest.fixture
def devops_files() -> dict[str, str]:
    return {"Dockerfile": "FROM node", ".github/workflows/ci.yml": "..."}


@pytest.fixture
def database_files() -> dict[str, str]:
    return {"migrations/001.sql": "CREATE TABLE ...", "schema.sql": ""}


@pytest.fixture
def fullstack_files() -> dict[str, str]:
    return {
        "src/components/Nav.tsx": "",
        "api/users.ts": "import express from 'express'",
    }


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A small fullstack project on disk."""
    root = tmp_path / "shop"
    _write(root / "src" / "components" / "Cart.tsx", "import React from 'react'")
    _write(root / "api" / "orders.ts", "import express from 'express'")
    _write(
        root / "package.json",
        '{"dependencies": {"react": "^18", "express": "^4"}, "devDependencies": {"jest": "^29"}}',
    )
    _write(root / "node_modules" / "react" / "index.js", "module.exports = {}")
    return root
