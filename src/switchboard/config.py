"""Router configuration: defaults, config file loading, and environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from switchboard.context.extractor import DEFAULT_MAX_CONTENT_BYTES
from switchboard.context.files import DEFAULT_MAX_FILE_BYTES, DEFAULT_MAX_FILES

logger = logging.getLogger(__name__)

# Server defaults
DEFAULT_PORT = 41888
DEFAULT_HOST = "127.0.0.1"

CONFIG_FILENAME = ".switchboard.json"

_INT_FIELDS = ("max_content_bytes", "max_request_chars", "max_file_bytes", "max_files", "port")

_ENV_OVERRIDES = {
    "SWITCHBOARD_MAX_CONTENT_BYTES": "max_content_bytes",
    "SWITCHBOARD_MAX_REQUEST_CHARS": "max_request_chars",
    "SWITCHBOARD_PORT": "port",
}


@dataclass
class RouterConfig:
    max_content_bytes: int = DEFAULT_MAX_CONTENT_BYTES
    max_request_chars: int = 0  # 0 = no cap
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES
    max_files: int = DEFAULT_MAX_FILES
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST


def default_config_path() -> Path:
    return Path.cwd() / CONFIG_FILENAME


def load_config(path: Path | None = None) -> RouterConfig:
    """Load the "router" section of a JSON config file, then apply env var overrides."""
    config = RouterConfig()
    if path and path.exists():
        try:
            data = json.loads(path.read_text())
            section = data.get("router", {}) if isinstance(data, dict) else {}
            if isinstance(section, dict):
                _apply(config, section)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load router config from {path}: {e}")

    for env_name, field in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if not raw:
            continue
        try:
            setattr(config, field, int(raw))
        except ValueError:
            logger.warning(f"Ignoring non-integer {env_name}={raw!r}")
    if env_host := os.environ.get("SWITCHBOARD_HOST"):
        config.host = env_host
    return config


def _apply(config: RouterConfig, data: dict[str, object]) -> None:
    for field in _INT_FIELDS:
        value = data.get(field)
        # bool is an int subclass
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            setattr(config, field, value)
    if "host" in data and isinstance(data["host"], str):
        config.host = data["host"]
