"""Platform abstraction layer."""

from .files import (
    FileOpError,
    copy_file,
    create_dir,
    make_executable,
    merge_tree,
    move_file,
    rename_dir,
)

__all__ = [
    "FileOpError",
    "copy_file",
    "create_dir",
    "make_executable",
    "merge_tree",
    "move_file",
    "rename_dir",
]
