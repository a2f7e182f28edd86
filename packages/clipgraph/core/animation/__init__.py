"""Animation clip naming and sequencing graph inference."""

from clipgraph.core.animation.graph import build_animation_graph, fetch_animations
from clipgraph.core.animation.lookup import filter_animations, find_animation
from clipgraph.core.animation.models import Animation, ClipName, TransitionTarget
from clipgraph.core.animation.naming import CLIP_NAME_PATTERN, parse_clip_name
from clipgraph.core.animation.rules import (
    alternate_animations,
    next_animations,
    previous_animation,
    resolve_transition,
)

__all__ = [
    # Models
    "Animation",
    "ClipName",
    "TransitionTarget",
    # Naming
    "CLIP_NAME_PATTERN",
    "parse_clip_name",
    # Lookups
    "filter_animations",
    "find_animation",
    # Rules
    "alternate_animations",
    "next_animations",
    "previous_animation",
    "resolve_transition",
    # Graph
    "build_animation_graph",
    "fetch_animations",
]
