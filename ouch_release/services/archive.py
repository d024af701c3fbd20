"""Archive writers for release assets.

Both writers put the source directory itself at the root of the archive,
so extracting ``ouch-x86_64-unknown-linux-musl.tar.gz`` yields a single
``ouch-x86_64-unknown-linux-musl/`` directory.
"""

from __future__ import annotations

import tarfile
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile

from ouch_release.core.result import Err, Ok, Result
from ouch_release.services.package_errors import ArchiveFailed

__all__ = ["write_tar_gz", "write_zip"]


def _discard_partial(archive_path: Path) -> None:
    try:
        archive_path.unlink(missing_ok=True)
    except OSError:
        pass


def write_tar_gz(source_dir: Path, archive_path: Path) -> Result[Path, ArchiveFailed]:
    """Write ``source_dir`` to a new gzip-compressed tarball.

    File modes are stored as-is, so the executable bit on the payload
    survives extraction. An existing ``archive_path`` is never overwritten.
    """
    if archive_path.exists():
        return Err(ArchiveFailed(archive=archive_path, reason="archive already exists"))

    try:
        with tarfile.open(archive_path, "x:gz") as tar:
            tar.add(source_dir, arcname=source_dir.name)
    except FileExistsError:
        return Err(ArchiveFailed(archive=archive_path, reason="archive already exists"))
    except (OSError, tarfile.TarError) as e:
        _discard_partial(archive_path)
        return Err(ArchiveFailed(archive=archive_path, reason=str(e)))
    return Ok(archive_path)


def write_zip(source_dir: Path, archive_path: Path) -> Result[Path, ArchiveFailed]:
    """Write ``source_dir`` to a new deflate zip, including directory entries.

    An existing ``archive_path`` is never overwritten.
    """
    if archive_path.exists():
        return Err(ArchiveFailed(archive=archive_path, reason="archive already exists"))

    root = source_dir.name
    try:
        # Build outputs restored from CI caches can carry mtime=0, which ZIP
        # cannot represent (no timestamps before 1980).
        with ZipFile(archive_path, "x", compression=ZIP_DEFLATED, strict_timestamps=False) as zf:
            zf.write(source_dir, arcname=root)
            for p in sorted(source_dir.rglob("*")):
                rel = p.relative_to(source_dir).as_posix()
                zf.write(p, arcname=f"{root}/{rel}")
    except FileExistsError:
        return Err(ArchiveFailed(archive=archive_path, reason="archive already exists"))
    except OSError as e:
        _discard_partial(archive_path)
        return Err(ArchiveFailed(archive=archive_path, reason=str(e)))
    return Ok(archive_path)
