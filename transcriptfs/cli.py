"""Command-line front door for transcriptfs.

Parses CLI options, loads the transcript text, and merges flags over the
persisted settings. Then prints the optional tree view and both query results.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import replace
from pathlib import Path

from .config import Settings, load_settings, save_settings
from .errors import TranscriptError
from .fs_tree import render_tree
from .fs_tree.rendering import TREE_DEFAULT_DEPTH
from .logging_setup import LOG_LEVELS, configure_logging
from .solver import TranscriptSolver

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def read_text(path: Path) -> str:
    """Read transcript text, tolerating a BOM or non-UTF-8 bytes."""
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def _load_transcript(raw_path: str) -> str:
    if raw_path == STDIN_PATH:
        return sys.stdin.read()
    path = Path(raw_path)
    if not path.is_file():
        raise SystemExit(f"Path not found: {path}")
    try:
        return read_text(path)
    except OSError as exc:
        raise SystemExit(f"Failed to open input file: {path} ({exc})") from exc


def _merge_settings(base: Settings, args: argparse.Namespace) -> Settings:
    """Overlay explicitly passed flags on top of persisted settings."""
    overrides: dict[str, object] = {}
    if args.threshold is not None:
        overrides["small_directory_threshold"] = args.threshold
    if args.disk_capacity is not None:
        overrides["disk_capacity"] = args.disk_capacity
    if args.required_free is not None:
        overrides["required_free_space"] = args.required_free
    if args.name_matching is not None:
        overrides["strict_names"] = args.name_matching == "strict"
    settings = replace(base, **overrides)
    if settings.disk_capacity < settings.required_free_space:
        raise SystemExit("--disk-capacity must be at least --required-free.")
    return settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rebuild a filesystem from a shell transcript and report directory-size queries."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=STDIN_PATH,
        help="Transcript file. Defaults to reading standard input.",
    )
    parser.add_argument(
        "--threshold",
        type=_positive_int,
        default=None,
        help="Directories strictly below this size count as small (default: 100000).",
    )
    parser.add_argument("--disk-capacity", type=_positive_int, default=None, help="Total disk size in bytes.")
    parser.add_argument(
        "--required-free",
        type=_positive_int,
        default=None,
        help="Free space in bytes the deletion must make available.",
    )
    parser.add_argument(
        "--name-matching",
        choices=("strict", "positional"),
        default=None,
        help="Reconcile `cd <name>` against listings by name (strict) or trust their order (positional).",
    )
    parser.add_argument("--tree", action="store_true", help="Print the reconstructed tree before the results.")
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=TREE_DEFAULT_DEPTH,
        help=f"Depth limit for --tree output (default: {TREE_DEFAULT_DEPTH}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color in --tree output.")
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Persist the effective threshold, disk sizes and name matching as defaults.",
    )
    parser.add_argument("--log-level", choices=tuple(LOG_LEVELS), default="warning", help="Logging verbosity.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, solve the transcript, and print both results.

    Malformed transcripts and the no-candidate outcome exit with a message
    instead of a traceback.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    settings = _merge_settings(load_settings(), args)
    if args.save_settings:
        save_settings(settings)

    text = _load_transcript(args.path)
    logger.info("Using input: %s", args.path)

    try:
        build_start = time.perf_counter()
        solver = TranscriptSolver.from_text(text, settings)
        logger.info("Built tree in %.6fs", time.perf_counter() - build_start)

        if args.tree:
            tree_text, _truncated = render_tree(solver.root, no_color=args.no_color, max_depth=args.max_depth)
            sys.stdout.write(tree_text + "\n\n")

        part1_start = time.perf_counter()
        part1 = solver.part1()
        logger.info("Small-directory sum took %.6fs", time.perf_counter() - part1_start)

        part2_start = time.perf_counter()
        part2 = solver.part2()
        logger.info("Smallest deletion took %.6fs", time.perf_counter() - part2_start)
    except TranscriptError as exc:
        raise SystemExit(str(exc)) from exc

    sys.stdout.write(f"Sum of small directories: {part1}\n")
    sys.stdout.write(f"Smallest sufficient deletion: {part2}\n")


if __name__ == "__main__":
    main()
