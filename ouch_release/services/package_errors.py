from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ReleaseDirExists:
    path: Path


@dataclass(frozen=True, slots=True)
class ArtifactsRootMissing:
    path: Path


@dataclass(frozen=True, slots=True)
class DocMissing:
    path: Path


@dataclass(frozen=True, slots=True)
class CompletionsMissing:
    artifact: str
    path: Path


@dataclass(frozen=True, slots=True)
class ManPagesMissing:
    artifact: str
    path: Path


@dataclass(frozen=True, slots=True)
class PayloadMissing:
    artifact: str
    path: Path


@dataclass(frozen=True, slots=True)
class TargetExists:
    artifact: str
    path: Path


@dataclass(frozen=True, slots=True)
class ArchiveFailed:
    archive: Path
    reason: str
    artifact: str | None = None


@dataclass(frozen=True, slots=True)
class IoFailed:
    operation: str
    path: Path
    reason: str
    artifact: str | None = None


PackageError = (
    ReleaseDirExists
    | ArtifactsRootMissing
    | DocMissing
    | CompletionsMissing
    | ManPagesMissing
    | PayloadMissing
    | TargetExists
    | ArchiveFailed
    | IoFailed
)
