"""Two-pass sequencing graph inference over a clip collection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from clipgraph.core.animation.models import Animation
from clipgraph.core.animation.naming import parse_clip_name
from clipgraph.core.animation.rules import (
    alternate_animations,
    next_animations,
    previous_animation,
)
from clipgraph.core.utils.logging import get_logger

logger = get_logger(__name__)


def fetch_animations(animations: Sequence[Animation | None]) -> Sequence[Animation | None]:
    """Infer next, alternate and previous clips for every animation.

    Pass 1 fills next and alternate clips, pass 2 fills the previous clip.
    Derived fields are overwritten rather than appended to, so running this
    twice over the same collection gives the same result. Names outside the
    naming convention keep empty fields.

    Args:
        animations: Clip collection in order; None entries are skipped

    Returns:
        The same list, with derived fields populated

    Example:
        >>> clips = [Animation(name="A_intro_01"), Animation(name="A_intro_02")]
        >>> clips = fetch_animations(clips)
        >>> clips[0].next_animations
        ['A_intro_02']
        >>> clips[1].previous_animation
        'A_intro_01'
    """
    processed = 0
    unparsed = 0
    for animation in animations:
        if animation is None:
            continue
        processed += 1
        if parse_clip_name(animation.name) is None:
            unparsed += 1
            logger.debug(f"Skipping clip outside naming convention: {animation.name}")
        animation.next_animations = next_animations(animation.name, animations)
        animation.alternate_animations = alternate_animations(animation.name, animations)

    for animation in animations:
        if animation is None:
            continue
        animation.previous_animation = previous_animation(animation.name, animations)

    logger.info(
        f"Inferred sequencing graph for {processed} clip(s) ({unparsed} unparsed)"
    )
    return animations


def build_animation_graph(names: Iterable[str]) -> list[Animation]:
    """Create Animation records for `names` and infer their graph."""
    animations = [Animation(name=name) for name in names]
    fetch_animations(animations)
    return animations
