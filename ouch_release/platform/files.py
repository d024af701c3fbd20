"""Filesystem helpers returning Results instead of raising.

Every helper catches ``OSError`` at this seam and converts it into a
``FileOpError`` so callers can propagate failures with ``Err``.
"""

from __future__ import annotations

import os
import shutil
import stat
from dataclasses import dataclass
from pathlib import Path

from ouch_release.core.result import Err, Ok, Result

__all__ = [
    "FileOpError",
    "copy_file",
    "create_dir",
    "make_executable",
    "merge_tree",
    "move_file",
    "rename_dir",
]

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True, slots=True)
class FileOpError:
    """A filesystem operation that failed.

    Attributes:
        operation: Short verb for the operation (e.g. "copy", "mkdir").
        path: The path the operation was acting on.
        reason: The OS error message.
    """

    operation: str
    path: Path
    reason: str

    def __str__(self) -> str:
        return f"{self.operation} {self.path}: {self.reason}"


def _fail(operation: str, path: Path, e: OSError) -> Err[FileOpError]:
    return Err(FileOpError(operation, path, e.strerror or str(e)))


def create_dir(path: Path, *, exist_ok: bool = False) -> Result[Path, FileOpError]:
    """Create a single directory (parents must exist)."""
    try:
        path.mkdir(exist_ok=exist_ok)
    except OSError as e:
        return _fail("mkdir", path, e)
    return Ok(path)


def copy_file(src: Path, dst: Path) -> Result[Path, FileOpError]:
    """Copy a file with its metadata. ``dst`` may be a directory."""
    try:
        out = shutil.copy2(src, dst)
    except OSError as e:
        return _fail("copy", src, e)
    return Ok(Path(out))


def move_file(src: Path, dst_dir: Path) -> Result[Path, FileOpError]:
    """Move a file into ``dst_dir``, keeping its name."""
    dst = dst_dir / src.name
    try:
        shutil.move(src, dst)
    except OSError as e:
        return _fail("move", src, e)
    return Ok(dst)


def merge_tree(src: Path, dst: Path) -> Result[Path, FileOpError]:
    """Copy the contents of ``src`` into ``dst``, merging with what is there.

    Existing files in ``dst`` with the same relative path are overwritten.
    """
    try:
        shutil.copytree(src, dst, dirs_exist_ok=True)
    except (OSError, shutil.Error) as e:
        return Err(FileOpError("copytree", src, str(e)))
    return Ok(dst)


def rename_dir(src: Path, dst: Path) -> Result[Path, FileOpError]:
    """Rename a directory. Fails if ``dst`` already exists."""
    if dst.exists():
        return Err(FileOpError("rename", dst, "destination already exists"))
    try:
        src.rename(dst)
    except OSError as e:
        return _fail("rename", src, e)
    return Ok(dst)


def make_executable(path: Path) -> Result[Path, FileOpError]:
    """Set the execute bits on ``path`` (like ``chmod +x``)."""
    try:
        mode = path.stat().st_mode
        os.chmod(path, mode | _EXEC_BITS)
    except OSError as e:
        return _fail("chmod", path, e)
    return Ok(path)
