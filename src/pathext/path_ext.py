"""
Summary: Wrapper value type exposing every path operation as a method.
Why: Let callers chain operations on one value instead of threading free functions.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import final, override

from pathext.core import filesystem, names
from pathext.core.filesystem import EntryFilter
from pathext.core.pathlike import PathInput, as_path


@final
class PathExt:
    """Immutable path wrapper carrying the pathext capability set.

    The raw text the wrapper was built from is kept so ``full_str`` reports
    the path exactly as supplied rather than its normalized form.
    """

    __slots__ = ("_path", "_raw")

    _path: Path
    _raw: str | bytes

    def __init__(self, value: PathInput) -> None:
        if isinstance(value, PathExt):
            self._path = value._path
            self._raw = value._raw
            return
        self._raw = os.fspath(value)
        self._path = as_path(self._raw)

    @property
    def path(self) -> Path:
        """The wrapped ``pathlib.Path``."""

        return self._path

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    @override
    def __str__(self) -> str:
        return str(self._path)

    @override
    def __repr__(self) -> str:
        return f"PathExt({str(self._path)!r})"

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathExt):
            return self._path == other._path
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash(self._path)

    def full_str(self) -> str:
        return names.full_str(self._raw)

    def ext_str(self) -> str:
        return names.ext_str(self._path)

    def stem_str(self) -> str:
        return names.stem_str(self._path)

    def name_str(self) -> str:
        return names.name_str(self._path)

    def merge(self, append: PathInput) -> PathExt:
        """Return a new wrapper with ``append`` merged beneath this path."""

        return PathExt(names.merge(self._path, append))

    def is_file(self) -> bool:
        return filesystem.is_file(self._path)

    def is_dir(self) -> bool:
        return filesystem.is_dir(self._path)

    def create_parent_dir_all(self) -> None:
        filesystem.create_parent_dir_all(self._path)

    def mkdir_after_remove(self) -> PathExt:
        """Reset this location to an empty directory and return ``self``."""

        _ = filesystem.mkdir_after_remove(self._path)
        return self

    def walk_dir(
        self,
        entry_filter: EntryFilter,
        *,
        follow_links: bool = False,
        max_depth: int | None = None,
        sort: bool = False,
    ) -> Iterator[Path]:
        """Walk this path depth-first; see ``pathext.core.filesystem.walk_dir``."""

        return filesystem.walk_dir(
            self._path,
            entry_filter,
            follow_links=follow_links,
            max_depth=max_depth,
            sort=sort,
        )


__all__ = ["PathExt"]
