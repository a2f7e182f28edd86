"""Pattern lookups over the clip collection."""

from __future__ import annotations

from collections.abc import Iterable
import re

from clipgraph.core.animation.models import Animation

Pattern = str | re.Pattern[str]


def _compile(pattern: Pattern) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def primary_pattern(name: str) -> str:
    """Pattern for `name` itself or its primary forms (`name_A`, `nameA`, `name_`)."""
    return f"^{re.escape(name)}_?A?$"


def family_pattern(name: str) -> str:
    """Pattern for `name` followed by an optional underscore and alternate letter."""
    return f"^{re.escape(name)}_?[A-Z]?$"


def find_animation(pattern: Pattern, animations: Iterable[Animation | None]) -> Animation | None:
    """Return the first animation whose name matches `pattern`.

    The pattern is searched, so callers anchor it themselves.

    Args:
        pattern: Regular expression (string or compiled)
        animations: Clip collection in order; None entries are skipped

    Returns:
        First matching animation, or None
    """
    regex = _compile(pattern)
    for animation in animations:
        if animation is None:
            continue
        if regex.search(animation.name):
            return animation
    return None


def filter_animations(pattern: Pattern, animations: Iterable[Animation | None]) -> list[Animation]:
    """Return every animation whose name matches `pattern`, in collection order."""
    regex = _compile(pattern)
    return [
        animation
        for animation in animations
        if animation is not None and regex.search(animation.name)
    ]
