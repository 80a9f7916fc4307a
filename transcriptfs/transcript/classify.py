"""Classify raw transcript lines into structured tokens.

Each recognized line shape has one anchored pattern. A ``LineClassifier``
compiles the patterns once and can be reused for any number of lines;
``classify_line`` and ``tokenize_transcript`` share a default instance.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from ..errors import ClassificationError
from .tokens import ChangeDirectory, DirectoryEntry, FileEntry, ListCommand, Token

_CD_PATTERN = r"^\$ cd (?P<target>/|\.\.|\w+)$"
_LS_PATTERN = r"^\$ ls$"
_DIR_PATTERN = r"^dir (?P<name>\w+)$"
_FILE_PATTERN = r"^(?P<size>\d+) (?P<name>[\w.]+)$"


def _change_directory(match: re.Match[str], line_number: int | None) -> Token:
    target = match.group("target")
    return ChangeDirectory(target=target, line_number=line_number)


def _list_command(match: re.Match[str], line_number: int | None) -> Token:
    return ListCommand(line_number=line_number)


def _directory_entry(match: re.Match[str], line_number: int | None) -> Token:
    return DirectoryEntry(name=match.group("name"), line_number=line_number)


def _file_entry(match: re.Match[str], line_number: int | None) -> Token:
    return FileEntry(name=match.group("name"), size=int(match.group("size")), line_number=line_number)


class LineClassifier:
    """Compiled line patterns mapping each transcript line to one token."""

    def __init__(self) -> None:
        self._shapes: tuple[tuple[re.Pattern[str], Callable[[re.Match[str], int | None], Token]], ...] = (
            (re.compile(_CD_PATTERN), _change_directory),
            (re.compile(_LS_PATTERN), _list_command),
            (re.compile(_DIR_PATTERN), _directory_entry),
            (re.compile(_FILE_PATTERN), _file_entry),
        )

    def classify(self, line: str, line_number: int | None = None) -> Token:
        """Return the token for ``line`` or raise ``ClassificationError``."""
        for pattern, make_token in self._shapes:
            match = pattern.match(line)
            if match is not None:
                return make_token(match, line_number)
        raise ClassificationError("unrecognized transcript line", line_number=line_number, line=line)

    def tokenize(self, text: str) -> list[Token]:
        """Classify every non-blank line of ``text`` in order."""
        return list(self.iter_tokens(text.splitlines()))

    def iter_tokens(self, lines: Iterable[str]) -> Iterable[Token]:
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip()
            if not line:
                continue
            yield self.classify(line, line_number)


_DEFAULT_CLASSIFIER = LineClassifier()


def classify_line(line: str, line_number: int | None = None) -> Token:
    """Classify one line with the shared default classifier."""
    return _DEFAULT_CLASSIFIER.classify(line, line_number)


def tokenize_transcript(text: str, classifier: LineClassifier | None = None) -> list[Token]:
    """Classify a whole transcript, skipping blank lines."""
    return (classifier or _DEFAULT_CLASSIFIER).tokenize(text)


__all__ = [
    "LineClassifier",
    "classify_line",
    "tokenize_transcript",
]
