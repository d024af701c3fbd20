"""Error presentation utilities.

Centralized error formatting and exit code mapping for packaging errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ouch_release.core.errors import ErrorCode
from ouch_release.output.console import Style
from ouch_release.services.package_errors import (
    ArchiveFailed,
    ArtifactsRootMissing,
    CompletionsMissing,
    DocMissing,
    IoFailed,
    ManPagesMissing,
    PackageError,
    PayloadMissing,
    ReleaseDirExists,
    TargetExists,
)

if TYPE_CHECKING:
    from ouch_release.output.console import ConsoleProtocol

__all__ = ["print_package_error", "package_error_exit_code"]


def print_package_error(error: PackageError, console: ConsoleProtocol) -> None:
    """Print a packaging error, prefixed with the failing artifact if known."""
    match error:
        case ReleaseDirExists(path=path):
            console.error(f"release directory already exists: {path}")
            console.print("hint: remove it or pass --release <dir>", Style.DIM)
        case ArtifactsRootMissing(path=path):
            console.error(f"artifacts directory not found: {path}")
        case DocMissing(path=path):
            console.error(f"documentation file missing: {path}")
        case CompletionsMissing(artifact=artifact, path=path):
            console.error(f"{artifact}: completions directory missing: {path}")
        case ManPagesMissing(artifact=artifact, path=path):
            console.error(f"{artifact}: no man pages (*.1) in {path}")
        case PayloadMissing(artifact=artifact, path=path):
            console.error(f"{artifact}: executable missing: {path}")
        case TargetExists(artifact=artifact, path=path):
            console.error(f"{artifact}: cannot rename, {path} already exists")
        case ArchiveFailed(archive=archive, reason=reason, artifact=artifact):
            prefix = f"{artifact}: " if artifact else ""
            console.error(f"{prefix}failed to write {archive}: {reason}")
        case IoFailed(operation=operation, path=path, reason=reason, artifact=artifact):
            prefix = f"{artifact}: " if artifact else ""
            console.error(f"{prefix}{operation} {path} failed: {reason}")


def package_error_exit_code(error: PackageError) -> int:
    """Get exit code for a packaging error."""
    match error:
        case ReleaseDirExists():
            return int(ErrorCode.USER_ERROR)
        case (
            ArtifactsRootMissing()
            | DocMissing()
            | CompletionsMissing()
            | ManPagesMissing()
            | PayloadMissing()
        ):
            return int(ErrorCode.ENV_ERROR)
        case TargetExists() | ArchiveFailed() | IoFailed():
            return int(ErrorCode.IO_ERROR)
