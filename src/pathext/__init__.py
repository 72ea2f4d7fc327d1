"""pathext: convenience accessors and filesystem helpers for path-like values."""

from pathext.core import (
    EntryFilter,
    PathInput,
    create_parent_dir_all,
    ext_str,
    full_str,
    is_dir,
    is_file,
    merge,
    mkdir_after_remove,
    name_str,
    stem_str,
    walk_dir,
)
from pathext.path_ext import PathExt

__version__ = "0.1.0"

__all__ = [
    "EntryFilter",
    "PathExt",
    "PathInput",
    "create_parent_dir_all",
    "ext_str",
    "full_str",
    "is_dir",
    "is_file",
    "merge",
    "mkdir_after_remove",
    "name_str",
    "stem_str",
    "walk_dir",
]
