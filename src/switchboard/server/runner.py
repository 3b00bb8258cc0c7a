"""Uvicorn launcher for the router HTTP API."""

from __future__ import annotations

from switchboard.config import RouterConfig, default_config_path, load_config


def run_server(config: RouterConfig | None = None) -> None:
    """Start the HTTP API server with uvicorn."""
    import uvicorn

    if config is None:
        config = load_config(default_config_path())

    uvicorn.run(
        "switchboard.server.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
    )
