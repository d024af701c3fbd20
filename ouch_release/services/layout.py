"""Artifact directory discovery.

The build jobs upload one directory per target into the artifacts root:

    artifacts/
        ouch-x86_64-unknown-linux-musl/
            ouch
            completions/
        ouch-x86_64-pc-windows-msvc.exe/
            ouch.exe
            completions/

A trailing ``.exe`` on the directory name marks a Windows target.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ouch_release.core.result import Err, Ok, Result
from ouch_release.services.package_errors import ArtifactsRootMissing, IoFailed, PackageError

__all__ = [
    "ArtifactDir",
    "Discovery",
    "TargetKind",
    "WINDOWS_SUFFIX",
    "archive_base_name",
    "classify",
    "describe_tree",
    "discover_artifacts",
]

WINDOWS_SUFFIX = ".exe"


class TargetKind(Enum):
    UNIX = "unix"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return self.value

    @property
    def archive_suffix(self) -> str:
        return ".zip" if self is TargetKind.WINDOWS else ".tar.gz"


def classify(name: str) -> TargetKind:
    if name.endswith(WINDOWS_SUFFIX):
        return TargetKind.WINDOWS
    return TargetKind.UNIX


def archive_base_name(name: str) -> str:
    """Archive name without extension: the directory name minus ``.exe``."""
    return name.removesuffix(WINDOWS_SUFFIX)


@dataclass(frozen=True, slots=True)
class ArtifactDir:
    path: Path
    kind: TargetKind
    executable: str

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def base_name(self) -> str:
        return archive_base_name(self.name)

    @property
    def executable_name(self) -> str:
        if self.kind is TargetKind.WINDOWS:
            return f"{self.executable}{WINDOWS_SUFFIX}"
        return self.executable

    @property
    def archive_name(self) -> str:
        return f"{self.base_name}{self.kind.archive_suffix}"


@dataclass(frozen=True, slots=True)
class Discovery:
    """Result of scanning the artifacts root.

    Attributes:
        artifacts: Matching directories, sorted by name.
        skipped: Names of entries that did not match (files, other dirs).
    """

    artifacts: tuple[ArtifactDir, ...]
    skipped: tuple[str, ...]


def _list_dir(directory: Path) -> Result[list[Path], IoFailed]:
    try:
        return Ok(sorted(directory.iterdir()))
    except OSError as e:
        return Err(IoFailed(operation="list", path=directory, reason=e.strerror or str(e)))


def discover_artifacts(
    artifacts_root: Path,
    *,
    prefix: str = "ouch-",
    executable: str = "ouch",
) -> Result[Discovery, PackageError]:
    if not artifacts_root.is_dir():
        return Err(ArtifactsRootMissing(path=artifacts_root))

    entries = _list_dir(artifacts_root)
    if isinstance(entries, Err):
        return entries

    artifacts: list[ArtifactDir] = []
    skipped: list[str] = []
    for entry in entries.value:
        if entry.is_dir() and entry.name.startswith(prefix):
            artifacts.append(
                ArtifactDir(path=entry, kind=classify(entry.name), executable=executable)
            )
        else:
            skipped.append(entry.name)

    return Ok(Discovery(artifacts=tuple(artifacts), skipped=tuple(skipped)))


def _marker(path: Path) -> str:
    if path.is_symlink():
        return "@"
    if path.is_dir():
        return "/"
    if os.access(path, os.X_OK):
        return "*"
    return ""


def describe_tree(root: Path) -> Result[list[str], IoFailed]:
    """Indented listing of ``root`` with ``ls -F`` style type markers."""
    lines = [f"{root.name}/"]

    def walk(directory: Path, depth: int) -> IoFailed | None:
        entries = _list_dir(directory)
        if isinstance(entries, Err):
            return entries.error
        for entry in entries.value:
            lines.append(f"{'  ' * depth}{entry.name}{_marker(entry)}")
            if entry.is_dir() and not entry.is_symlink():
                failed = walk(entry, depth + 1)
                if failed is not None:
                    return failed
        return None

    if root.is_dir():
        failed = walk(root, 1)
        if failed is not None:
            return Err(failed)
    return Ok(lines)
