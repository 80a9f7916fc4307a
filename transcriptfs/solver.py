"""Build-once facade answering both directory-size queries for a transcript."""

from __future__ import annotations

from dataclasses import dataclass

from .config import Settings
from .errors import NoCandidateError
from .fs_tree import Directory, build, smallest_directory_at_least, space_to_free, sum_small_directories


@dataclass(frozen=True)
class TranscriptSolver:
    """Immutable tree plus the settings both queries read."""

    root: Directory
    settings: Settings = Settings()

    @classmethod
    def from_text(cls, text: str, settings: Settings | None = None) -> "TranscriptSolver":
        """Classify and build ``text`` once; raises ``TranscriptError`` on bad input."""
        settings = settings or Settings()
        root = build(text, strict_names=settings.strict_names)
        return cls(root=root, settings=settings)

    @property
    def used_space(self) -> int:
        return self.root.total_size

    @property
    def space_to_free(self) -> int:
        return space_to_free(self.root, self.settings.disk_capacity, self.settings.required_free_space)

    def part1(self) -> int:
        """Sum of all directories below the small-directory threshold."""
        return sum_small_directories(self.root, self.settings.small_directory_threshold)

    def part2(self) -> int:
        """Size of the smallest directory whose deletion frees enough space."""
        needed = self.space_to_free
        smallest = smallest_directory_at_least(self.root, needed)
        if smallest is None:
            raise NoCandidateError(f"no directory frees at least {needed} bytes")
        return smallest
