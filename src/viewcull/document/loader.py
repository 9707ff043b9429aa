"""JSON snapshot loading and serialization."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from viewcull.document.exceptions import DocumentLoadError
from viewcull.document.types import Project


def load_project(path: Path | str) -> Project:
    """Load a document snapshot from a JSON file.

    Args:
        path: Path to a camelCase JSON snapshot.

    Returns:
        Parsed Project.

    Raises:
        DocumentLoadError: If the file is missing, unreadable, not JSON,
            or does not match the document schema.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(f"Cannot read snapshot: {e.strerror or e}", path) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(
            f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}", path
        ) from e

    if not isinstance(data, dict):
        raise DocumentLoadError(
            f"Snapshot root must be an object, got {type(data).__name__}", path
        )

    try:
        return Project.model_validate(data)
    except ValidationError as e:
        raise DocumentLoadError(
            f"Snapshot does not match schema ({e.error_count()} errors): {e}", path
        ) from e


def dump_project(project: Project, *, indent: int | None = 2) -> str:
    """Serialize a snapshot to camelCase JSON.

    Only fields present in the source snapshot (or replaced by culling) are
    written, so optional keys such as ``page`` and ``designScale`` stay
    absent rather than becoming ``null``.

    Args:
        project: Snapshot to serialize.
        indent: JSON indentation (None for compact output).

    Returns:
        JSON text.
    """
    return project.model_dump_json(by_alias=True, exclude_unset=True, indent=indent)
