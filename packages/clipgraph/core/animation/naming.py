"""Clip name decomposition.

Animation clips follow a fixed naming convention. The leading `A` stands for
"Animation":

- `A_intro_01` -> `A_intro_02` -> `A_intro_03` (plain sequence)
- `A_intro_01-02` is a transition from clip 01 to clip 02 of the same group
- `A_intro_01-relax_01` is a transition into another group
- `A_intro_01_A`, `A_intro_01_B` are alternates of clip 01. The `_A` is
  sometimes omitted (`A_intro_01` + `A_intro_01_B`) and so is the
  underscore (`A_intro_01B`)
- `A_dance_A_01` and `A_dance_B_01` belong to two characters; they are two
  different sequences, not alternates
"""

from __future__ import annotations

import re

from clipgraph.core.animation.models import ClipName, TransitionTarget

CLIP_NAME_PATTERN = re.compile(
    r"A_(?P<action>[a-z]+)_"
    r"(?:(?P<char>[A-Z]?)_?(?P<clip>[0-9]{2}))"
    r"_?(?P<alternate>[A-Z]?)"
    r"(?:-(?P<transition>(?P<next_name>[a-z]+)?_?(?P<next_clip>[0-9]{2})))?"
)


def to_int(text: str) -> int:
    """Parse a clip index, treating anything malformed as 0."""
    try:
        return int(text)
    except ValueError:
        return 0


def parse_clip_name(name: str) -> ClipName | None:
    """Decompose a clip name into its fields.

    The pattern is searched, not anchored, so text around the convention
    (e.g. a project prefix) is ignored.

    Args:
        name: Raw clip name without extension

    Returns:
        Parsed ClipName, or None if the name does not follow the convention

    Example:
        >>> parse_clip_name("A_intro_01-relax_01").transition.next_name
        'relax'
        >>> parse_clip_name("intro_01") is None
        True
    """
    match = CLIP_NAME_PATTERN.search(name)
    if match is None:
        return None

    transition = None
    if match.group("transition"):
        transition = TransitionTarget(
            raw=match.group("transition"),
            next_name=match.group("next_name") or None,
            next_clip_index=to_int(match.group("next_clip")),
            next_clip_text=match.group("next_clip"),
        )

    return ClipName(
        matched=match.group(0),
        action=match.group("action"),
        character=match.group("char") or None,
        clip_index=to_int(match.group("clip")),
        clip_text=match.group("clip"),
        alternate=match.group("alternate") or None,
        transition=transition,
    )
