"""switchboard: project-aware agent routing for AI-assisted app builders."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("switchboard")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
