"""Read-only aggregate queries over a reconstructed directory tree."""

from __future__ import annotations

from collections.abc import Iterator

from .types import Directory

SMALL_DIRECTORY_THRESHOLD = 100_000
DISK_CAPACITY = 70_000_000
REQUIRED_FREE_SPACE = 30_000_000


def iter_directories(root: Directory, root_path: str = "/") -> Iterator[tuple[str, Directory]]:
    """Yield ``(path, directory)`` for ``root`` and every nested directory, pre-order."""
    yield root_path, root
    for child in root.subdirectories:
        child_path = f"{root_path.rstrip('/')}/{child.name}"
        yield from iter_directories(child, child_path)


def directory_sizes(root: Directory) -> dict[str, int]:
    """Map each directory path to its ``total_size``."""
    return {path: directory.total_size for path, directory in iter_directories(root)}


def sum_small_directories(root: Directory, threshold: int = SMALL_DIRECTORY_THRESHOLD) -> int:
    """Sum ``total_size`` of every directory strictly below ``threshold``.

    Nested directories are counted on their own as well as inside their
    parents' totals. Files never contribute directly.
    """
    nested = sum(sum_small_directories(child, threshold) for child in root.subdirectories)
    if root.total_size < threshold:
        return nested + root.total_size
    return nested


def smallest_directory_at_least(root: Directory, space_to_free: int) -> int | None:
    """Return the smallest directory size ``>= space_to_free``, or ``None``."""
    best: int | None = root.total_size if root.total_size >= space_to_free else None
    for child in root.subdirectories:
        candidate = smallest_directory_at_least(child, space_to_free)
        if candidate is not None and (best is None or candidate < best):
            best = candidate
    return best


def space_to_free(
    root: Directory,
    disk_capacity: int = DISK_CAPACITY,
    required_free_space: int = REQUIRED_FREE_SPACE,
) -> int:
    """Bytes that must be deleted so ``required_free_space`` is available."""
    return root.total_size - (disk_capacity - required_free_space)


__all__ = [
    "SMALL_DIRECTORY_THRESHOLD",
    "DISK_CAPACITY",
    "REQUIRED_FREE_SPACE",
    "iter_directories",
    "directory_sizes",
    "sum_small_directories",
    "smallest_directory_at_least",
    "space_to_free",
]
