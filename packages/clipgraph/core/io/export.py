"""Serialize inferred animation graphs to JSON."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from clipgraph.core.animation.models import Animation
from clipgraph.core.utils.json import dumps_json, write_json


def animations_to_records(animations: Iterable[Animation | None]) -> list[dict[str, Any]]:
    """Dump animations as `Name`/`NextAnimations`/`AlternateAnimations`/`PreviousAnimation` dicts."""
    return [
        animation.model_dump(by_alias=True) for animation in animations if animation is not None
    ]


def dump_animations(animations: Iterable[Animation | None], indent: int | None = None) -> str:
    """Serialize animations to a JSON array string."""
    return dumps_json(animations_to_records(animations), indent=indent)


def write_animations(
    path: str | Path, animations: Iterable[Animation | None], indent: int | None = 2
) -> None:
    """Write animations as a JSON array to `path`."""
    write_json(path, animations_to_records(animations), indent=indent)
