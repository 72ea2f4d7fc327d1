"""Core path operations shared by the free-function API and ``PathExt``."""

from .filesystem import (
    EntryFilter,
    create_parent_dir_all,
    is_dir,
    is_file,
    mkdir_after_remove,
    walk_dir,
)
from .names import ext_str, full_str, merge, name_str, stem_str
from .pathlike import PathInput, as_path, to_text

__all__ = [
    "EntryFilter",
    "PathInput",
    "as_path",
    "create_parent_dir_all",
    "ext_str",
    "full_str",
    "is_dir",
    "is_file",
    "merge",
    "mkdir_after_remove",
    "name_str",
    "stem_str",
    "to_text",
    "walk_dir",
]
