"""Filesystem queries and mutations for path-like values.

Queries (``is_file``, ``is_dir``, ``walk_dir``) never raise for filesystem
problems and fall back to ``False`` or a shortened walk. Mutations
(``create_parent_dir_all``, ``mkdir_after_remove``) propagate the first
``OSError`` to the caller without rollback.
"""

from __future__ import annotations

import os
import shutil
import stat
from collections.abc import Callable, Iterator
from pathlib import Path

from pathext.platform.logging import logger

from .pathlike import PathInput, as_path

EntryFilter = Callable[[Path], bool]


def _stat_mode(path: Path) -> int | None:
    """Return the ``st_mode`` of ``path`` following links, or None when unreadable."""

    try:
        return os.stat(path).st_mode
    except (OSError, ValueError) as exc:
        logger.debug("Metadata unavailable for %s: %s", path, exc)
        return None


def is_file(path: PathInput) -> bool:
    """Return whether ``path`` points to a regular file."""

    mode = _stat_mode(as_path(path))
    return mode is not None and stat.S_ISREG(mode)


def is_dir(path: PathInput) -> bool:
    """Return whether ``path`` points to a directory."""

    mode = _stat_mode(as_path(path))
    return mode is not None and stat.S_ISDIR(mode)


def create_parent_dir_all(path: PathInput) -> None:
    """Ensure every ancestor directory of ``path`` exists.

    Raises:
        OSError: If a missing ancestor cannot be created.
    """
    target = as_path(path)
    parent = target.parent
    if parent == target or parent.exists():
        return

    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error(
            "Failed to create parent directories for %s: %s",
            target,
            exc,
            extra={"path_event": "path.error", "target_path": str(parent), "error_message": str(exc)},
        )
        raise
    logger.debug(
        "Created parent directories %s",
        parent,
        extra={"path_event": "path.parents.create", "target_path": str(parent)},
    )


def mkdir_after_remove(path: PathInput) -> Path:
    """Reset ``path`` to a fresh empty directory.

    An existing file is deleted, an existing directory tree is removed
    recursively and a symlink to a directory is unlinked. The new directory
    is created without parents. When deletion succeeds but creation fails
    the location is left absent.

    Args:
        path: Location to reset. Its parent must exist.

    Returns:
        Path: The recreated directory.

    Raises:
        OSError: If removal or creation fails.
    """
    target = as_path(path)
    try:
        if target.exists():
            if target.is_file():
                kind = "file"
                target.unlink()
            elif target.is_symlink():
                kind = "link"
                target.unlink()
            else:
                kind = "directory"
                shutil.rmtree(target)
            logger.debug(
                "Removed existing %s at %s",
                kind,
                target,
                extra={"path_event": "path.reset.remove", "target_path": str(target), "entry_kind": kind},
            )
        target.mkdir()
    except OSError as exc:
        logger.error(
            "Failed to reset directory %s: %s",
            target,
            exc,
            extra={"path_event": "path.error", "target_path": str(target), "error_message": str(exc)},
        )
        raise

    logger.info(
        "Reset directory %s",
        target,
        extra={"path_event": "path.reset.complete", "target_path": str(target)},
    )
    return target


def _directory_key(path: Path) -> tuple[int, int] | None:
    try:
        info = os.stat(path)
    except OSError:
        return None
    return info.st_dev, info.st_ino


def _list_entries(directory: Path, *, sort: bool, base: Path) -> list[os.DirEntry[str]]:
    """Read the entries of ``directory`` fully, returning an empty list on failure."""

    try:
        with os.scandir(directory) as iterator:
            entries = list(iterator)
    except OSError as exc:
        logger.debug(
            "Skipping unreadable directory %s: %s",
            directory,
            exc,
            extra={
                "path_event": "path.walk.skip",
                "target_path": str(directory),
                "base_path": str(base),
                "error_message": str(exc),
            },
        )
        return []
    if sort:
        entries.sort(key=lambda entry: entry.name)
    return entries


def _descends(entry: os.DirEntry[str], *, follow_links: bool) -> bool:
    try:
        return entry.is_dir(follow_symlinks=follow_links)
    except OSError:
        return False


def walk_dir(
    path: PathInput,
    entry_filter: EntryFilter,
    *,
    follow_links: bool = False,
    max_depth: int | None = None,
    sort: bool = False,
) -> Iterator[Path]:
    """Walk ``path`` depth-first, pruning entries rejected by ``entry_filter``.

    The filter runs once per visited entry, including the root. A rejected
    entry is not yielded and, when it is a directory, not descended. The root
    is yielded first, then each accepted entry before its own children.

    The root is resolved through symlinks; inner links are only descended
    with ``follow_links``, in which case a link back to one of its ancestors
    is skipped entirely. Unreadable directories and entries that vanish
    mid-walk are skipped.

    Args:
        path: Root of the walk.
        entry_filter: Predicate deciding whether an entry is kept.
        follow_links: Descend into symlinked directories below the root.
        max_depth: Deepest level to yield, the root being depth 0.
        sort: Visit siblings in file-name order instead of filesystem order.

    Returns:
        Iterator[Path]: Every accepted entry, produced lazily.

    Raises:
        ValueError: If ``max_depth`` is negative.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must not be negative, got {max_depth}")
    return _walk(as_path(path), entry_filter, follow_links=follow_links, max_depth=max_depth, sort=sort)


def _walk(
    root: Path,
    entry_filter: EntryFilter,
    *,
    follow_links: bool,
    max_depth: int | None,
    sort: bool,
) -> Iterator[Path]:
    root_mode = _stat_mode(root)
    if root_mode is None:
        return
    if not entry_filter(root):
        return
    yield root

    if not stat.S_ISDIR(root_mode) or max_depth == 0:
        return

    # Each frame holds the remaining siblings, their depth and the identity of
    # the directory they were listed from.
    stack: list[tuple[Iterator[os.DirEntry[str]], int, tuple[int, int] | None]] = [
        (iter(_list_entries(root, sort=sort, base=root)), 1, _directory_key(root)),
    ]
    while stack:
        entries, depth, _ = stack[-1]
        entry = next(entries, None)
        if entry is None:
            _ = stack.pop()
            continue

        child = Path(entry.path)
        descends = _descends(entry, follow_links=follow_links)
        key = _directory_key(child) if follow_links and descends else None
        if key is not None and any(frame[2] == key for frame in stack):
            logger.debug(
                "Skipping %s: link loops back to an ancestor",
                child,
                extra={
                    "path_event": "path.walk.skip",
                    "target_path": str(child),
                    "base_path": str(root),
                    "entry_kind": "loop",
                },
            )
            continue

        if not entry_filter(child):
            continue
        yield child

        if not descends or (max_depth is not None and depth >= max_depth):
            continue
        stack.append((iter(_list_entries(child, sort=sort, base=root)), depth + 1, key))


__all__ = [
    "EntryFilter",
    "create_parent_dir_all",
    "is_dir",
    "is_file",
    "mkdir_after_remove",
    "walk_dir",
]
