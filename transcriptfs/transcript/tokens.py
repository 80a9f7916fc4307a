"""Token datatypes produced by classifying transcript lines."""

from __future__ import annotations

from dataclasses import dataclass, field

CD_ROOT = "/"
CD_UP = ".."


@dataclass(frozen=True)
class ChangeDirectory:
    """``$ cd <target>`` where target is ``/``, ``..`` or a directory name."""

    target: str
    line_number: int | None = field(default=None, compare=False)

    @property
    def is_root(self) -> bool:
        return self.target == CD_ROOT

    @property
    def is_up(self) -> bool:
        return self.target == CD_UP

    @property
    def name(self) -> str | None:
        """Directory name for named targets, otherwise ``None``."""
        if self.is_root or self.is_up:
            return None
        return self.target


@dataclass(frozen=True)
class ListCommand:
    """``$ ls``."""

    line_number: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class DirectoryEntry:
    """``dir <name>`` row of a listing; size is unknown until entered."""

    name: str
    line_number: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class FileEntry:
    """``<size> <name>`` row of a listing."""

    name: str
    size: int
    line_number: int | None = field(default=None, compare=False)


Token = ChangeDirectory | ListCommand | DirectoryEntry | FileEntry
ListingEntry = DirectoryEntry | FileEntry


def describe_token(token: Token) -> str:
    """Render ``token`` back to its transcript line form for messages."""
    if isinstance(token, ChangeDirectory):
        return f"$ cd {token.target}"
    if isinstance(token, ListCommand):
        return "$ ls"
    if isinstance(token, DirectoryEntry):
        return f"dir {token.name}"
    return f"{token.size} {token.name}"


__all__ = [
    "CD_ROOT",
    "CD_UP",
    "ChangeDirectory",
    "ListCommand",
    "DirectoryEntry",
    "FileEntry",
    "Token",
    "ListingEntry",
    "describe_token",
]
