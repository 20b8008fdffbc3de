"""File walker for discovering notes under the notes root."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 32
DEFAULT_MAX_ENTRIES = 10000


@dataclass
class FileInfo:
    """Information about a discovered file."""

    path: Path  # Absolute path
    relative_path: str  # Relative to the notes root, POSIX separators
    filename: str


@dataclass
class WalkResult:
    """Files found by a walk, and whether the walk stopped early."""

    files: list[FileInfo] = field(default_factory=list)
    truncated: bool = False

    def __iter__(self) -> Iterator[FileInfo]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)


def _list_dir(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning("Cannot list directory %s: %s", directory, e)
        return []


def walk_notes_root(
    root: Path,
    extension: str = ".md",
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_entries: int = DEFAULT_MAX_ENTRIES,
) -> WalkResult:
    """
    Walk the notes root and collect every file ending with ``extension``.

    Hidden entries (names starting with '.') and symbolic links are skipped;
    only real subdirectories are descended into. Files come out depth-first,
    sorted by name within each directory.

    The walk is iterative. It stops descending below ``max_depth`` (the root's
    direct children are at depth 0) and stops entirely after visiting
    ``max_entries`` directory entries. In both cases the files found so far are
    returned with ``truncated`` set.
    """
    result = WalkResult()
    if not root.is_dir():
        return result

    # Stack of (remaining entries, depth) per open directory
    stack: list[tuple[Iterator[Path], int]] = [(iter(_list_dir(root)), 0)]
    visited = 0

    while stack:
        entries, depth = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        visited += 1
        if visited > max_entries:
            logger.warning(
                "Stopped walking %s after %d entries; results are truncated",
                root,
                max_entries,
            )
            result.truncated = True
            break

        if entry.name.startswith("."):
            continue
        if entry.is_symlink():
            continue

        if entry.is_dir():
            if depth + 1 > max_depth:
                logger.warning(
                    "Not descending into %s: deeper than %d levels", entry, max_depth
                )
                result.truncated = True
                continue
            stack.append((iter(_list_dir(entry)), depth + 1))
        elif entry.is_file() and entry.name.endswith(extension):
            result.files.append(
                FileInfo(
                    path=entry,
                    relative_path=entry.relative_to(root).as_posix(),
                    filename=entry.name,
                )
            )

    return result
