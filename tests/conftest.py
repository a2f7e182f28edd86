"""Shared pytest fixtures for clipgraph tests."""

from __future__ import annotations

from collections.abc import Callable
import logging

import pytest

from clipgraph.core.animation.models import Animation

# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers installed by configure_logging (pytest's own handlers are subclasses)."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)


# ============================================================================
# Clip Collection Fixtures
# ============================================================================


@pytest.fixture
def make_animations() -> Callable[..., list[Animation]]:
    """Factory building fresh Animation records from clip names."""

    def _make(*names: str) -> list[Animation]:
        return [Animation(name=name) for name in names]

    return _make


@pytest.fixture
def intro_sequence() -> list[str]:
    """Plain three-clip sequence."""
    return ["A_intro_01", "A_intro_02", "A_intro_03"]


@pytest.fixture
def mixed_library() -> list[str]:
    """Clip names exercising every naming rule, plus one stray file."""
    return [
        "A_intro_01",
        "A_intro_01-02",
        "A_intro_02",
        "A_intro_02_B",
        "A_intro_02-relax_01",
        "A_relax_01",
        "A_relax_02A",
        "A_dance_A_01",
        "A_dance_A_02",
        "A_dance_B_01",
        "readme",
    ]
