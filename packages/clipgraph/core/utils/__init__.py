"""Shared utilities for clipgraph."""

from clipgraph.core.utils.json import dumps_json, read_json, write_json
from clipgraph.core.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "dumps_json",
    "get_logger",
    "read_json",
    "write_json",
]
