"""Tests for the router HTTP API routes."""

from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from switchboard import __version__
from switchboard.catalog.loader import AgentCatalog, CatalogIncomplete
from switchboard.catalog.models import AgentDescriptor, AgentId
from switchboard.config import RouterConfig
from switchboard.server.app import create_app


@pytest.fixture
def client(catalog):
    app = create_app(config=RouterConfig(), catalog=catalog)
    with TestClient(app) as c:
        yield c


class TestSystemRoutes:
    @pytest.mark.unit
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "agents": len(AgentId)}

    @pytest.mark.unit
    def test_version(self, client):
        assert client.get("/api/version").json() == {"version": __version__}


class TestAgentRoutes:
    @pytest.mark.unit
    def test_list_agents(self, client):
        resp = client.get("/api/agents")
        assert resp.status_code == 200
        data = resp.json()
        assert data["count"] == 8
        assert [a["id"] for a in data["agents"]] == [a.value for a in AgentId]
        assert "promptTemplate" not in data["agents"][0]

    @pytest.mark.unit
    def test_list_agents_with_prompts(self, client):
        data = client.get("/api/agents", params={"include_prompt": "true"}).json()
        assert all(a["promptTemplate"].startswith("You are") for a in data["agents"])

    @pytest.mark.unit
    def test_search(self, client):
        data = client.get("/api/agents/search", params={"q": "kubernetes"}).json()
        assert data["query"] == "kubernetes"
        assert data["count"] == 1
        assert data["agents"][0]["id"] == "devops-commander"

    @pytest.mark.unit
    def test_search_without_term(self, client):
        data = client.get("/api/agents/search").json()
        assert data["count"] == 0

    @pytest.mark.unit
    def test_get_agent(self, client):
        resp = client.get("/api/agents/design-guru")
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Design Guru"
        assert data["keywords"][:3] == ["design", "ui", "ux"]
        assert "Design Guru" in data["promptTemplate"]

    @pytest.mark.unit
    def test_get_unknown_agent(self, client):
        resp = client.get("/api/agents/wizard")
        assert resp.status_code == 404
        assert "wizard" in resp.json()["error"]


class TestContextRoute:
    @pytest.mark.unit
    def test_context(self, client, backend_files):
        resp = client.post("/api/context", json={"files": backend_files, "request": ""})
        assert resp.status_code == 200
        data = resp.json()
        assert data["type"] == "backend"
        assert data["frameworks"] == ["FastAPI"]
        assert data["fileCount"] == 2

    @pytest.mark.unit
    def test_empty_body_object(self, client):
        data = client.post("/api/context", json={}).json()
        assert data["type"] == "unknown"
        assert data["fileCount"] == 0


class TestRouteEndpoint:
    @pytest.mark.unit
    def test_route(self, client, devops_files):
        resp = client.post("/api/route", json={"files": devops_files, "request": "set up CI"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["selection"]["selectedAgent"] == "devops-commander"
        assert data["selection"]["confidence"] == 1.0
        assert data["context"]["hasDocker"] is True
        assert data["context"]["hasCI"] is True
        assert data["scores"][0]["agent"] == "devops-commander"

    @pytest.mark.unit
    def test_route_empty(self, client):
        data = client.post("/api/route", json={}).json()
        assert data["selection"] == {
            "selectedAgent": "general",
            "confidence": 0.5,
            "reasoning": "Selected General Assistant because: .",
            "suggestedAgents": [],
        }

    @pytest.mark.unit
    def test_invalid_json(self, client):
        resp = client.post(
            "/api/route", content=b"{not json", headers={"content-type": "application/json"}
        )
        assert resp.status_code == 422
        assert "error" in resp.json()

    @pytest.mark.unit
    def test_body_not_utf8(self, client):
        resp = client.post(
            "/api/route",
            content=b'{"request": "\xff\xfe"}',
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 422
        assert resp.json()["error"] == "Request body must be JSON"

    @pytest.mark.unit
    def test_invalid_schema(self, client):
        resp = client.post("/api/route", json={"files": ["a.py"], "request": "x"})
        assert resp.status_code == 422
        assert resp.json()["error"] == "Invalid route request"

    @pytest.mark.unit
    def test_get_not_allowed(self, client):
        assert client.get("/api/route").status_code == 405


class TestStartup:
    @pytest.mark.unit
    def test_incomplete_catalog_aborts_startup(self, monkeypatch):
        def broken_load(cls):
            return cls(
                [AgentDescriptor(id=AgentId.GENERAL, name="General Assistant", description="")]
            )

        monkeypatch.setattr(AgentCatalog, "load", classmethod(broken_load))
        app = create_app(config=RouterConfig())
        with pytest.raises(CatalogIncomplete):
            with TestClient(app):
                pass
