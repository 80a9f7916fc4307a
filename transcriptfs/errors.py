"""Error taxonomy for transcript parsing and tree queries."""

from __future__ import annotations


class TranscriptError(ValueError):
    """Base error for malformed transcripts and failed queries.

    ``line_number`` is 1-based and, together with ``line``, is appended to the
    message when known.
    """

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line_number is None:
            return self.message
        if self.line is None:
            return f"line {self.line_number}: {self.message}"
        return f"line {self.line_number}: {self.message} ({self.line!r})"


class ClassificationError(TranscriptError):
    """A transcript line matches none of the recognized shapes."""


class StructureError(TranscriptError):
    """The token sequence violates the ``cd``/``ls`` nesting grammar."""


class NoCandidateError(TranscriptError):
    """No directory is large enough to free the requested space."""


__all__ = [
    "TranscriptError",
    "ClassificationError",
    "StructureError",
    "NoCandidateError",
]
