from __future__ import annotations

import os
import stat
from pathlib import Path

from ouch_release.core.result import Err, Ok
from ouch_release.platform.files import (
    FileOpError,
    copy_file,
    create_dir,
    make_executable,
    merge_tree,
    move_file,
    rename_dir,
)


def test_create_dir_fails_if_present(tmp_path: Path) -> None:
    target = tmp_path / "man"
    assert create_dir(target) == Ok(target)

    result = create_dir(target)
    assert isinstance(result, Err)
    assert result.error.operation == "mkdir"
    assert result.error.path == target


def test_create_dir_exist_ok(tmp_path: Path) -> None:
    target = tmp_path / "release"
    target.mkdir()
    assert create_dir(target, exist_ok=True) == Ok(target)


def test_copy_file_into_directory(tmp_path: Path) -> None:
    src = tmp_path / "LICENSE"
    src.write_text("MIT\n", encoding="utf-8")
    dst_dir = tmp_path / "out"
    dst_dir.mkdir()

    result = copy_file(src, dst_dir)

    assert result == Ok(dst_dir / "LICENSE")
    assert (dst_dir / "LICENSE").read_text(encoding="utf-8") == "MIT\n"


def test_copy_missing_file(tmp_path: Path) -> None:
    result = copy_file(tmp_path / "CHANGELOG.md", tmp_path / "out.md")
    assert isinstance(result, Err)
    assert result.error.operation == "copy"


def test_move_file(tmp_path: Path) -> None:
    src = tmp_path / "ouch.1"
    src.write_text(".TH\n", encoding="utf-8")
    man = tmp_path / "man"
    man.mkdir()

    assert move_file(src, man) == Ok(man / "ouch.1")
    assert not src.exists()


def test_merge_tree_overlays_existing(tmp_path: Path) -> None:
    src = tmp_path / "shared"
    src.mkdir()
    (src / "ouch.fish").write_text("new\n", encoding="utf-8")
    dst = tmp_path / "completions"
    dst.mkdir()
    (dst / "ouch.fish").write_text("old\n", encoding="utf-8")
    (dst / "ouch.bash").write_text("bash\n", encoding="utf-8")

    assert merge_tree(src, dst) == Ok(dst)
    assert (dst / "ouch.fish").read_text(encoding="utf-8") == "new\n"
    assert (dst / "ouch.bash").is_file()


def test_rename_dir_refuses_existing_target(tmp_path: Path) -> None:
    src = tmp_path / "ouch-win.exe"
    src.mkdir()
    dst = tmp_path / "ouch-win"
    dst.mkdir()

    result = rename_dir(src, dst)

    assert result == Err(FileOpError("rename", dst, "destination already exists"))
    assert src.is_dir()


def test_rename_dir(tmp_path: Path) -> None:
    src = tmp_path / "ouch-win.exe"
    src.mkdir()
    dst = tmp_path / "ouch-win"

    assert rename_dir(src, dst) == Ok(dst)
    assert dst.is_dir() and not src.exists()


def test_make_executable(tmp_path: Path) -> None:
    exe = tmp_path / "ouch"
    exe.write_bytes(b"bin")
    os.chmod(exe, 0o644)

    assert make_executable(exe) == Ok(exe)
    mode = exe.stat().st_mode
    assert mode & stat.S_IXUSR
    assert stat.S_IMODE(mode) == 0o755


def test_make_executable_missing(tmp_path: Path) -> None:
    result = make_executable(tmp_path / "ouch")
    assert isinstance(result, Err)
    assert str(result.error).startswith("chmod ")
