from __future__ import annotations

from pathlib import Path

import pytest

from ouch_release.core.errors import ErrorCode
from ouch_release.output.console import MockConsole
from ouch_release.output.errors import package_error_exit_code, print_package_error
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

P = Path("/work/artifacts/ouch-x86_64-linux")


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ReleaseDirExists(Path("/work/release")), ErrorCode.USER_ERROR),
        (ArtifactsRootMissing(Path("/work/artifacts")), ErrorCode.ENV_ERROR),
        (DocMissing(Path("/work/LICENSE")), ErrorCode.ENV_ERROR),
        (CompletionsMissing("ouch-x86_64-linux", P / "completions"), ErrorCode.ENV_ERROR),
        (ManPagesMissing("ouch-x86_64-linux", P / "completions"), ErrorCode.ENV_ERROR),
        (PayloadMissing("ouch-x86_64-linux", P / "ouch"), ErrorCode.ENV_ERROR),
        (TargetExists("ouch-win.exe", Path("/work/artifacts/ouch-win")), ErrorCode.IO_ERROR),
        (ArchiveFailed(Path("/work/release/a.zip"), "disk full"), ErrorCode.IO_ERROR),
        (IoFailed("copy", P, "Permission denied"), ErrorCode.IO_ERROR),
    ],
)
def test_exit_codes(error: PackageError, code: ErrorCode) -> None:
    assert package_error_exit_code(error) == int(code)


def test_artifact_errors_name_the_directory() -> None:
    console = MockConsole()
    print_package_error(ManPagesMissing("ouch-x86_64-linux", P / "completions"), console)

    assert console.has_error()
    assert console.messages[0].startswith("error: ouch-x86_64-linux: no man pages")


def test_archive_failure_with_and_without_artifact() -> None:
    console = MockConsole()
    archive = Path("/work/release/ouch-win.zip")
    print_package_error(ArchiveFailed(archive, "disk full", artifact="ouch-win.exe"), console)
    print_package_error(ArchiveFailed(archive, "disk full"), console)

    assert console.messages == [
        f"error: ouch-win.exe: failed to write {archive}: disk full",
        f"error: failed to write {archive}: disk full",
    ]


def test_release_exists_has_hint() -> None:
    console = MockConsole()
    print_package_error(ReleaseDirExists(Path("/work/release")), console)

    assert console.find("already exists")
    assert console.find("hint:")
