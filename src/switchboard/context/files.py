"""Load a project directory into an in-memory file set."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

SKIP_DIRS = {
    "node_modules",
    ".git",
    "dist",
    "build",
    "__pycache__",
    ".venv",
    "venv",
    ".tox",
    "coverage",
}

DEFAULT_MAX_FILE_BYTES = 1024 * 1024
DEFAULT_MAX_FILES = 5000


class FileSetError(Exception):
    """Raised when a project root cannot be read as a file set."""


def load_file_set(
    root: Path,
    *,
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES,
    max_files: int = DEFAULT_MAX_FILES,
) -> dict[str, str]:
    """Map POSIX relative paths under ``root`` to their text contents.

    Walk order is sorted. Files over ``max_file_bytes`` keep their path with empty
    content so path heuristics still see them. Stops after ``max_files`` files.
    """
    if not root.exists():
        raise FileSetError(f"Path not found: {root}")
    if not root.is_dir():
        raise FileSetError(f"Not a directory: {root}")

    files: dict[str, str] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
        for filename in sorted(filenames):
            if len(files) >= max_files:
                logger.warning(f"File limit reached ({max_files}); remaining files skipped")
                return files
            path = Path(dirpath) / filename
            rel = path.relative_to(root).as_posix()
            files[rel] = _read_text(path, max_file_bytes)
    return files


def _read_text(path: Path, max_file_bytes: int) -> str:
    try:
        if path.stat().st_size > max_file_bytes:
            logger.debug(f"Skipping content of large file: {path}")
            return ""
        return path.read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"Unreadable file {path}: {e}")
        return ""
