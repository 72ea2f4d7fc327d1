"""
Summary: String accessors and component merging for path-like values.
Why: Give call sites best-effort text views that never raise on odd encodings.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import cast

from .pathlike import PathInput, as_path, to_text

_PARENT_DIR = ".."
_SEPARATORS: frozenset[str] = frozenset(sep for sep in (os.sep, os.altsep) if sep)


def full_str(path: PathInput) -> str:
    """Return the path exactly as supplied, or ``""`` when it is not valid text."""

    return to_text(os.fspath(path))


def _raw_name(path: PathInput) -> str:
    """Return the final component, possibly carrying surrogate escapes."""

    name = as_path(path).name
    if name == _PARENT_DIR:
        return ""
    return name


def name_str(path: PathInput) -> str:
    """Return the final path component, or ``""`` for roots and ``..`` endings."""

    return to_text(_raw_name(path))


def _split_name(name: str) -> tuple[str, str]:
    """Split ``name`` into stem and extension at the last dot.

    A dot in first position belongs to the stem, so ``.bashrc`` has no
    extension while ``archive.`` has an empty one.
    """

    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return name, ""
    return stem, extension


def stem_str(path: PathInput) -> str:
    """Return the file name without its extension."""

    return to_text(_split_name(_raw_name(path))[0])


def ext_str(path: PathInput) -> str:
    """Return the extension of the final component without the leading dot.

    Stem and extension are decoded separately, so a valid extension survives
    an undecodable stem.
    """

    return to_text(_split_name(_raw_name(path))[1])


def _is_absolute_marker(component: str, separators: frozenset[str]) -> bool:
    """Return whether ``component`` must be dropped when appended to another path.

    Empty components and components that are not valid text are dropped along
    with separator-led roots.
    """

    if not to_text(component):
        return True
    return component[0] in separators


def _merge_pure(
    base: PurePath,
    append: PurePath,
    separators: frozenset[str] = _SEPARATORS,
) -> PurePath:
    """Merge two paths of the same flavour."""

    kept = [
        component
        for component in append.parts
        if not _is_absolute_marker(component, separators)
    ]
    return type(base)(*base.parts, *kept)


def merge(path: PathInput, append: PathInput) -> Path:
    """Append the components of ``append`` to ``path``.

    Components of ``append`` starting with a path separator (the root of an
    absolute suffix) are skipped, so ``/Show/episode.mkv`` lands beneath the
    base instead of replacing it. Drive prefixes such as ``D:`` do not start
    with a separator and are kept.

    Args:
        path: Base path.
        append: Path whose components are appended.

    Returns:
        Path: The merged path.
    """
    return cast(Path, _merge_pure(as_path(path), as_path(append)))


__all__ = ["ext_str", "full_str", "merge", "name_str", "stem_str"]
