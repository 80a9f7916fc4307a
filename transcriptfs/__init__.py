"""Public package surface for transcriptfs.

Exports the transcript builder, both directory-size queries, and ``main``
for programmatic CLI invocation.
"""

from __future__ import annotations

from .errors import ClassificationError, NoCandidateError, StructureError, TranscriptError
from .fs_tree import Directory, File, FsItem, build, smallest_directory_at_least, sum_small_directories
from .solver import TranscriptSolver


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "build",
    "sum_small_directories",
    "smallest_directory_at_least",
    "Directory",
    "File",
    "FsItem",
    "TranscriptSolver",
    "TranscriptError",
    "ClassificationError",
    "StructureError",
    "NoCandidateError",
]
