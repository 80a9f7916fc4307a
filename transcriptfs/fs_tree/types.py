"""Immutable file/directory nodes reconstructed from a transcript."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class File:
    """Leaf node with a known byte size."""

    name: str
    size: int


@dataclass(frozen=True)
class Directory:
    """Directory node owning its children and their aggregated byte size."""

    name: str
    children: tuple["FsItem", ...] = ()
    total_size: int = 0

    @classmethod
    def from_children(cls, name: str, children: Iterable["FsItem"]) -> "Directory":
        """Create a directory whose ``total_size`` sums its immediate children."""
        owned = tuple(children)
        return cls(name=name, children=owned, total_size=sum(child.size for child in owned))

    @property
    def size(self) -> int:
        return self.total_size

    @property
    def subdirectories(self) -> tuple["Directory", ...]:
        return tuple(child for child in self.children if isinstance(child, Directory))

    @property
    def files(self) -> tuple[File, ...]:
        return tuple(child for child in self.children if isinstance(child, File))


FsItem = Directory | File


__all__ = [
    "File",
    "Directory",
    "FsItem",
]
