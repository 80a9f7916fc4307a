"""Filesystem tree reconstructed from a transcript, plus queries over it.

This package contains:
- immutable file/directory node datatypes with aggregated sizes
- the recursive-descent builder consuming transcript tokens
- read-only aggregate queries (small-directory sum, smallest deletion)
- box-drawing tree rendering with size labels
"""

from __future__ import annotations

from .types import Directory, File, FsItem
from .build import build, build_tree
from .queries import (
    DISK_CAPACITY,
    REQUIRED_FREE_SPACE,
    SMALL_DIRECTORY_THRESHOLD,
    directory_sizes,
    iter_directories,
    smallest_directory_at_least,
    space_to_free,
    sum_small_directories,
)
from .rendering import format_size_label, render_tree

__all__ = [
    "Directory",
    "File",
    "FsItem",
    "build",
    "build_tree",
    "SMALL_DIRECTORY_THRESHOLD",
    "DISK_CAPACITY",
    "REQUIRED_FREE_SPACE",
    "iter_directories",
    "directory_sizes",
    "sum_small_directories",
    "smallest_directory_at_least",
    "space_to_free",
    "format_size_label",
    "render_tree",
]
