"""Recursive-descent reconstruction of a directory tree from transcript tokens.

Every directory body has the shape ``$ ls``, listing rows, then zero or more
``$ cd <name>`` subdirectory bodies, closed by ``$ cd ..`` or end of input.
Tokens are consumed through one shared cursor so nested calls never copy the
remaining token sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..errors import StructureError
from ..transcript import (
    CD_ROOT,
    ChangeDirectory,
    DirectoryEntry,
    FileEntry,
    LineClassifier,
    ListCommand,
    ListingEntry,
    Token,
    describe_token,
    tokenize_transcript,
)
from .types import Directory, File, FsItem

logger = logging.getLogger(__name__)


class _TokenCursor:
    """Read position into a token sequence shared across recursive calls."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self._tokens)

    def peek(self) -> Token | None:
        if self.exhausted:
            return None
        return self._tokens[self.position]

    def advance(self) -> Token:
        token = self._tokens[self.position]
        self.position += 1
        return token


def _child_path(parent_path: str, name: str) -> str:
    if parent_path == CD_ROOT:
        return f"/{name}"
    return f"{parent_path}/{name}"


def _structure_error(message: str, token: Token | None) -> StructureError:
    if token is None:
        return StructureError(message)
    return StructureError(message, line_number=token.line_number, line=describe_token(token))


def _read_listing(cursor: _TokenCursor, path: str) -> list[ListingEntry]:
    """Consume ``$ ls`` and the maximal run of listing rows after it."""
    token = cursor.peek()
    if not isinstance(token, ListCommand):
        raise _structure_error(f"expected `$ ls` after entering {path}", token)
    cursor.advance()

    listing: list[ListingEntry] = []
    while isinstance(cursor.peek(), (FileEntry, DirectoryEntry)):
        listing.append(cursor.advance())
    return listing


def _check_entered_name(
    token: ChangeDirectory,
    announced: set[str],
    entered: dict[str, Directory],
    path: str,
) -> None:
    name = token.target
    if name not in announced:
        raise _structure_error(f"`$ cd {name}` enters a directory not listed in {path}", token)
    if name in entered:
        raise _structure_error(f"directory {_child_path(path, name)} is entered twice", token)


def _assemble_children(
    listing: list[ListingEntry],
    entered: dict[str, Directory],
    entered_order: list[Directory],
    path: str,
    strict_names: bool,
) -> list[FsItem]:
    """Order children by listing (strict) or files-then-``cd``-order (positional)."""
    if not strict_names:
        files: list[FsItem] = [
            File(name=entry.name, size=entry.size) for entry in listing if isinstance(entry, FileEntry)
        ]
        return files + list(entered_order)

    children: list[FsItem] = []
    for entry in listing:
        if isinstance(entry, FileEntry):
            children.append(File(name=entry.name, size=entry.size))
            continue
        directory = entered.get(entry.name)
        if directory is None:
            raise _structure_error(
                f"directory {_child_path(path, entry.name)} is listed but never entered",
                entry,
            )
        children.append(directory)
    return children


def _build_directory(cursor: _TokenCursor, name: str, path: str, strict_names: bool) -> Directory:
    """Build one directory body; the caller already consumed its ``$ cd``."""
    is_root = path == CD_ROOT
    listing = _read_listing(cursor, path)
    announced: set[str] = set()
    for entry in listing:
        if not isinstance(entry, DirectoryEntry):
            continue
        if strict_names and entry.name in announced:
            raise _structure_error(f"directory {_child_path(path, entry.name)} is listed twice", entry)
        announced.add(entry.name)
    entered: dict[str, Directory] = {}
    entered_order: list[Directory] = []

    while True:
        token = cursor.peek()
        if token is None:
            # End of input closes every directory still open.
            break
        if not isinstance(token, ChangeDirectory):
            raise _structure_error(
                f"unexpected {describe_token(token)!r} in {path}; expected `$ cd <name>` or `$ cd ..`",
                token,
            )
        if token.is_up:
            if is_root:
                raise _structure_error("`$ cd ..` has no open directory to close", token)
            cursor.advance()
            break
        if token.is_root:
            raise _structure_error("`$ cd /` is only allowed as the first command", token)

        cursor.advance()
        if strict_names:
            _check_entered_name(token, announced, entered, path)
        child = _build_directory(cursor, token.target, _child_path(path, token.target), strict_names)
        entered[token.target] = child
        entered_order.append(child)

    children = _assemble_children(listing, entered, entered_order, path, strict_names)
    return Directory.from_children(name, children)


def build_tree(tokens: Sequence[Token], strict_names: bool = True) -> Directory:
    """Reconstruct the root directory from a full token sequence.

    The sequence must open with ``$ cd /``. With ``strict_names`` every
    ``$ cd <name>`` is reconciled against the enclosing listing; otherwise
    subdirectories are trusted positionally.
    """
    cursor = _TokenCursor(tokens)
    first = cursor.peek()
    if first is None:
        raise StructureError("empty transcript; expected `$ cd /`")
    if not (isinstance(first, ChangeDirectory) and first.is_root):
        raise _structure_error("transcript must start with `$ cd /`", first)
    cursor.advance()

    try:
        root = _build_directory(cursor, CD_ROOT, CD_ROOT, strict_names)
    except RecursionError as exc:
        raise StructureError("transcript nests too deeply") from exc
    if not cursor.exhausted:
        raise _structure_error("leftover tokens after the root directory closed", cursor.peek())
    logger.debug("Built filesystem tree from %d tokens (%d bytes used)", len(tokens), root.total_size)
    return root


def build(text: str, strict_names: bool = True, classifier: LineClassifier | None = None) -> Directory:
    """Classify ``text`` and reconstruct its root directory."""
    tokens = tokenize_transcript(text, classifier)
    return build_tree(tokens, strict_names=strict_names)


__all__ = [
    "build",
    "build_tree",
]
