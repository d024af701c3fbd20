"""Release packaging services.

Services implement the packaging logic on top of the core types (core/) and
the filesystem helpers (platform/). They report through an injected console
and return Results; the CLI decides how to present errors.
"""

from ouch_release.services.layout import ArtifactDir, TargetKind, discover_artifacts
from ouch_release.services.package_errors import PackageError
from ouch_release.services.packager import PackagedArchive, ReleasePackager, package_release

__all__ = [
    "ArtifactDir",
    "PackageError",
    "PackagedArchive",
    "ReleasePackager",
    "TargetKind",
    "discover_artifacts",
    "package_release",
]
