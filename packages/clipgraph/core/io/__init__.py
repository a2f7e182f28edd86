"""Input and output around the sequencing graph: folder enumeration and JSON export."""

from .export import animations_to_records, dump_animations, write_animations
from .folder import read_from_folder

__all__ = [
    "animations_to_records",
    "dump_animations",
    "read_from_folder",
    "write_animations",
]
