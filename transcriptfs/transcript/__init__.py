"""Transcript tokens and the line classifier that produces them."""

from __future__ import annotations

from .classify import LineClassifier, classify_line, tokenize_transcript
from .tokens import (
    CD_ROOT,
    CD_UP,
    ChangeDirectory,
    DirectoryEntry,
    FileEntry,
    ListCommand,
    ListingEntry,
    Token,
    describe_token,
)

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
    "LineClassifier",
    "classify_line",
    "tokenize_transcript",
]
