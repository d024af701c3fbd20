"""Release packaging pass.

Turns every ``artifacts/ouch-<target>[.exe]`` directory into one archive in
``release/``:

- shared completions are merged into ``completions/``
- ``*.1`` man pages move from ``completions/`` to a fresh ``man/``
- README.md, LICENSE and CHANGELOG.md are copied in
- Unix targets: ``ouch`` is made executable, ``<name>.tar.gz`` is written
- Windows targets: the directory loses its ``.exe`` suffix, ``<base>.zip``
  is written

Artifact directories are mutated in place. The run stops at the first
error; archives already written stay in ``release/``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from ouch_release.core.config import Config
from ouch_release.core.result import Err, Ok, Result
from ouch_release.output.console import ConsoleProtocol, Style
from ouch_release.platform.files import (
    FileOpError,
    copy_file,
    create_dir,
    make_executable,
    merge_tree,
    move_file,
    rename_dir,
)
from ouch_release.services.archive import write_tar_gz, write_zip
from ouch_release.services.layout import ArtifactDir, TargetKind, describe_tree, discover_artifacts
from ouch_release.services.package_errors import (
    CompletionsMissing,
    DocMissing,
    IoFailed,
    ManPagesMissing,
    PackageError,
    PayloadMissing,
    ReleaseDirExists,
    TargetExists,
)

__all__ = ["PackagedArchive", "ReleasePackager", "package_release"]

MAN_SUFFIX = ".1"


@dataclass(frozen=True, slots=True)
class PackagedArchive:
    artifact: str
    kind: TargetKind
    archive: Path

    @property
    def base_name(self) -> str:
        return self.archive.name.removesuffix(self.kind.archive_suffix)


def _io_error(artifact: str | None) -> Callable[[FileOpError], PackageError]:
    def convert(error: FileOpError) -> PackageError:
        return IoFailed(
            operation=error.operation,
            path=error.path,
            reason=error.reason,
            artifact=artifact,
        )

    return convert


class ReleasePackager:
    """Package every artifact directory under a project root.

    All paths derive from ``project_root`` and ``config``; the process
    working directory is never consulted.
    """

    def __init__(
        self,
        *,
        project_root: Path,
        config: Config,
        console: ConsoleProtocol,
    ) -> None:
        self._root = project_root
        self._config = config
        self._console = console

    @property
    def artifacts_root(self) -> Path:
        return self._config.artifacts_root(self._root)

    @property
    def release_dir(self) -> Path:
        return self._config.release_dir(self._root)

    @property
    def doc_paths(self) -> list[Path]:
        # Docs live one level above the artifacts root.
        docs_root = self.artifacts_root.parent
        return [docs_root / name for name in self._config.layout.docs]

    def run(self) -> Result[list[PackagedArchive], PackageError]:
        release_dir = self.release_dir
        if release_dir.exists():
            return Err(ReleaseDirExists(path=release_dir))

        layout = self._config.layout
        discovery = discover_artifacts(
            self.artifacts_root,
            prefix=layout.prefix,
            executable=layout.executable,
        )
        if isinstance(discovery, Err):
            return discovery
        artifacts = discovery.value.artifacts

        if artifacts:
            for doc in self.doc_paths:
                if not doc.is_file():
                    return Err(DocMissing(path=doc))

        created = create_dir(release_dir)
        if isinstance(created, Err):
            return created.map_err(_io_error(None))

        self._console.header(f"Packaging {len(artifacts)} artifact(s) into {release_dir}")
        listing = describe_tree(self.artifacts_root)
        if isinstance(listing, Err):
            return listing
        for line in listing.value:
            self._console.print(line, Style.DIM)
        for name in discovery.value.skipped:
            self._console.print(f"skip: {name}", Style.DIM)

        packaged: list[PackagedArchive] = []
        for artifact in artifacts:
            result = self._package_one(artifact)
            if isinstance(result, Err):
                return result
            packaged.append(result.value)
            self._console.success(str(result.value.archive))

        return Ok(packaged)

    def _package_one(self, artifact: ArtifactDir) -> Result[PackagedArchive, PackageError]:
        self._console.info(f"{artifact.name} ({artifact.kind})")

        prepared = self._prepare(artifact)
        if isinstance(prepared, Err):
            return prepared

        if artifact.kind is TargetKind.WINDOWS:
            return self._archive_windows(artifact)
        return self._archive_unix(artifact)

    def _prepare(self, artifact: ArtifactDir) -> Result[None, PackageError]:
        to_error = _io_error(artifact.name)
        completions = artifact.path / "completions"
        man_dir = artifact.path / "man"

        overlay = self._overlay_completions(artifact, completions)
        if isinstance(overlay, Err):
            return overlay

        if not completions.is_dir():
            return Err(CompletionsMissing(artifact=artifact.name, path=completions))

        man_pages = sorted(
            p for p in completions.iterdir() if p.is_file() and p.name.endswith(MAN_SUFFIX)
        )
        if not man_pages:
            return Err(ManPagesMissing(artifact=artifact.name, path=completions))

        made = create_dir(man_dir)
        if isinstance(made, Err):
            return made.map_err(to_error)

        for page in man_pages:
            moved = move_file(page, man_dir)
            if isinstance(moved, Err):
                return moved.map_err(to_error)

        for doc in self.doc_paths:
            copied = copy_file(doc, artifact.path / doc.name)
            if isinstance(copied, Err):
                return copied.map_err(to_error)

        return Ok(None)

    def _overlay_completions(
        self, artifact: ArtifactDir, completions: Path
    ) -> Result[None, PackageError]:
        layout = self._config.layout
        if not layout.overlay_completions:
            return Ok(None)

        shared = self.artifacts_root / layout.completions_source
        if not shared.is_dir():
            return Ok(None)

        merged = merge_tree(shared, completions)
        if isinstance(merged, Err):
            return merged.map_err(_io_error(artifact.name))
        return Ok(None)

    def _archive_windows(self, artifact: ArtifactDir) -> Result[PackagedArchive, PackageError]:
        target = artifact.path.with_name(artifact.base_name)
        if target.exists():
            return Err(TargetExists(artifact=artifact.name, path=target))

        renamed = rename_dir(artifact.path, target)
        if isinstance(renamed, Err):
            return renamed.map_err(_io_error(artifact.name))

        archive = write_zip(renamed.value, self.release_dir / artifact.archive_name)
        if isinstance(archive, Err):
            return Err(replace(archive.error, artifact=artifact.name))
        return Ok(PackagedArchive(artifact=artifact.name, kind=artifact.kind, archive=archive.value))

    def _archive_unix(self, artifact: ArtifactDir) -> Result[PackagedArchive, PackageError]:
        payload = artifact.path / artifact.executable_name
        if not payload.is_file():
            return Err(PayloadMissing(artifact=artifact.name, path=payload))

        chmod = make_executable(payload)
        if isinstance(chmod, Err):
            return chmod.map_err(_io_error(artifact.name))

        archive = write_tar_gz(artifact.path, self.release_dir / artifact.archive_name)
        if isinstance(archive, Err):
            return Err(replace(archive.error, artifact=artifact.name))
        return Ok(PackagedArchive(artifact=artifact.name, kind=artifact.kind, archive=archive.value))


def package_release(
    *,
    project_root: Path,
    config: Config,
    console: ConsoleProtocol,
) -> Result[list[PackagedArchive], PackageError]:
    """Package every artifact directory under ``project_root``.

    Returns the archives written, in processing order, or the first error.
    """
    return ReleasePackager(project_root=project_root, config=config, console=console).run()
