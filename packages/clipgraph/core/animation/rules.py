"""Sequencing rules: next, alternate and previous clips of an animation.

Each rule parses the clip's own name and searches the other clips' names.
Nothing here mutates an Animation; `graph.fetch_animations` assigns results.
"""

from __future__ import annotations

from collections.abc import Sequence
import re

from clipgraph.core.animation.lookup import (
    family_pattern,
    filter_animations,
    find_animation,
    primary_pattern,
)
from clipgraph.core.animation.models import Animation, ClipName
from clipgraph.core.animation.naming import parse_clip_name
from clipgraph.core.utils.logging import get_logger

logger = get_logger(__name__)

Collection = Sequence[Animation | None]


def next_animations(name: str, animations: Collection) -> list[str]:
    """Names of the clips that follow `name`.

    A transition clip originating from this clip wins over the plain
    increment: with `A_intro_01-02` present, `A_intro_01` leads to the
    transition, never straight to `A_intro_02`.

    Non-primary alternates (`_B`, `C`, ...) have no next clip; they are only
    reached through the alternate relation.
    """
    clip = parse_clip_name(name)
    if clip is None or not clip.is_primary:
        return []

    if clip.transition is not None:
        return resolve_transition(clip, animations)

    origin = clip.matched.removesuffix("_A")
    found = find_animation(f"^{re.escape(origin)}-", animations)
    if found is None:
        found = find_animation(primary_pattern(clip.base_name(clip.clip_index + 1)), animations)

    if found is None:
        return []
    logger.debug(f"{name} -> {found.name}")
    return [found.name]


def resolve_transition(clip: ClipName, animations: Collection) -> list[str]:
    """Destination of a transition clip.

    `A_intro_01-02` lands on `A_intro_02` (same group, character kept);
    `A_intro_01-relax_01` lands on `A_relax_01`.
    """
    transition = clip.transition
    if transition is None:
        return []

    if transition.next_name is None:
        destination = clip.group_prefix() + transition.next_clip_text
    else:
        destination = f"A_{transition.raw}"

    found = find_animation(primary_pattern(destination), animations)
    if found is None:
        return []
    logger.debug(f"{clip.matched} -> {found.name} (transition)")
    return [found.name]


def alternate_animations(name: str, animations: Collection) -> list[str]:
    """Names of the other members of this clip's alternate family.

    The unlettered form and the `A` form are the same primary clip, so
    `A_intro_01` and `A_intro_01_A` share the same alternates and do not
    list each other. A non-primary alternate lists every other member,
    primaries included. Transition clips have no alternates.
    """
    clip = parse_clip_name(name)
    if clip is None or clip.is_transition:
        return []

    alternates = []
    for animation in filter_animations(family_pattern(clip.base_name()), animations):
        if animation.name == name:
            continue
        if clip.is_primary and _is_primary_name(animation.name):
            continue
        alternates.append(animation.name)
    return alternates


def _is_primary_name(name: str) -> bool:
    member = parse_clip_name(name)
    return member is not None and member.is_primary


def previous_animation(name: str, animations: Collection) -> str | None:
    """Name of the clip this one follows in a plain sequence.

    Only the plain increment is inverted: transitions cannot be played
    backwards, and non-primary alternates have no previous clip. Clip 00 has
    no previous clip.
    """
    clip = parse_clip_name(name)
    if clip is None or clip.is_transition or not clip.is_primary:
        return None
    if clip.clip_index == 0:
        return None

    found = find_animation(primary_pattern(clip.base_name(clip.clip_index - 1)), animations)
    return found.name if found is not None else None
