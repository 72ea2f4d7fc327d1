"""Coercion helpers for the path-like values accepted across pathext."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TypeAlias

PathInput: TypeAlias = str | bytes | os.PathLike[str] | os.PathLike[bytes]


def as_path(value: PathInput) -> Path:
    """Return ``value`` as a host ``Path``, decoding bytes with the filesystem codec."""

    if isinstance(value, Path):
        return value
    return Path(os.fsdecode(os.fspath(value)))


def to_text(raw: str | bytes) -> str:
    """Return ``raw`` as valid UTF-8 text, or an empty string when it is not representable.

    ``str`` values may carry lone surrogates produced by ``surrogateescape``
    decoding of undecodable file names; those are treated as unrepresentable.
    """

    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            return ""
    try:
        _ = raw.encode("utf-8")
    except UnicodeEncodeError:
        return ""
    return raw


__all__ = ["PathInput", "as_path", "to_text"]
