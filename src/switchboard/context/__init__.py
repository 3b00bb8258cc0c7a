"""Project context extraction from a file set."""

from switchboard.context.extractor import (
    DEFAULT_MAX_CONTENT_BYTES,
    analyze_project_context,
)
from switchboard.context.files import FileSetError, load_file_set
from switchboard.context.manifests import ManifestError
from switchboard.context.models import (
    ProjectContext,
    ProjectType,
    SerializableProjectContext,
    to_serializable,
)

__all__ = [
    "DEFAULT_MAX_CONTENT_BYTES",
    "FileSetError",
    "ManifestError",
    "ProjectContext",
    "ProjectType",
    "SerializableProjectContext",
    "analyze_project_context",
    "load_file_set",
    "to_serializable",
]
