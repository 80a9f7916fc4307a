"""Render a reconstructed tree as box-drawing text with size labels.

Output mirrors a directory preview: one row per entry, directories suffixed
with ``/``, optional ANSI coloring, and a truncation note once the entry
budget runs out.
"""

from __future__ import annotations

from .types import Directory, FsItem

TREE_DEFAULT_DEPTH = 32
TREE_DEFAULT_MAX_ENTRIES = 1_000

_DIR_COLOR = "\033[1;34m"
_FILE_COLOR = "\033[38;5;252m"
_BRANCH_COLOR = "\033[2;38;5;245m"
_NOTE_COLOR = "\033[2;38;5;250m"
_SIZE_COLOR = "\033[38;5;109m"
_RESET = "\033[0m"


def format_size_label(size_bytes: int) -> str:
    """Return a short human size such as ``584 B``, ``92 KB`` or ``23 MB``."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes // 1024} KB"
    return f"{size_bytes // (1024 * 1024)} MB"


def render_tree(
    root: Directory,
    no_color: bool = False,
    max_depth: int = TREE_DEFAULT_DEPTH,
    max_entries: int = TREE_DEFAULT_MAX_ENTRIES,
    show_size_labels: bool = True,
) -> tuple[str, bool]:
    """Render ``root`` and return ``(text, truncated)``."""

    def paint(color: str, text: str) -> str:
        if no_color:
            return text
        return f"{color}{text}{_RESET}"

    def size_label(item: FsItem) -> str:
        if not show_size_labels:
            return ""
        return paint(_SIZE_COLOR, f" [{format_size_label(item.size)}]")

    lines_out: list[str] = [f"{paint(_DIR_COLOR, '/')}{size_label(root)}"]
    emitted = 0
    truncated = False

    def walk(directory: Directory, prefix: str, depth: int) -> None:
        """Emit rows depth-first until depth/entry limits are reached."""
        nonlocal emitted, truncated
        if depth > max_depth:
            return

        children = directory.children
        for idx, child in enumerate(children):
            if emitted >= max_entries:
                truncated = True
                break
            last = idx == len(children) - 1
            branch = "└─ " if last else "├─ "
            is_dir = isinstance(child, Directory)
            label = f"{child.name}/" if is_dir else child.name
            name_color = _DIR_COLOR if is_dir else _FILE_COLOR
            lines_out.append(f"{paint(_BRANCH_COLOR, prefix + branch)}{paint(name_color, label)}{size_label(child)}")
            emitted += 1
            if is_dir:
                walk(child, prefix + ("   " if last else "│  "), depth + 1)

    walk(root, "", 1)
    if truncated:
        lines_out.append("")
        lines_out.append(paint(_NOTE_COLOR, f"... truncated after {max_entries} entries ..."))

    return "\n".join(lines_out), truncated


__all__ = [
    "TREE_DEFAULT_DEPTH",
    "TREE_DEFAULT_MAX_ENTRIES",
    "format_size_label",
    "render_tree",
]
