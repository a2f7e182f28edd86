"""JSON utilities with Path support."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _json_default(obj: Any) -> Any:
    """JSON serializer for types not supported by default (Path and friends -> str)."""
    return str(obj)


def dumps_json(obj: Any, indent: int | None = None) -> str:
    """Serialize object to a JSON string.

    Args:
        obj: Object to serialize
        indent: Pretty-print indent, or None for compact output

    Returns:
        JSON text
    """
    return json.dumps(obj, indent=indent, ensure_ascii=False, default=_json_default)


def write_json(path: str | Path, obj: Any, indent: int | None = 2) -> None:
    """Write object to JSON file.

    Args:
        path: Output file path (parent directories are created)
        obj: Object to serialize (must be JSON-serializable)
        indent: Pretty-print indent, or None for compact output
    """
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    path_obj.write_text(dumps_json(obj, indent=indent), encoding="utf-8")


def read_json(path: str | Path) -> dict[str, Any]:
    """Read and parse a JSON object file.

    Args:
        path: Input file path

    Returns:
        Parsed JSON as dictionary

    Raises:
        ValueError: If the document is not a JSON object
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
