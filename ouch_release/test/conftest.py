from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

DOCS = ("README.md", "LICENSE", "CHANGELOG.md")

MakeArtifact = Callable[..., Path]


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with the shared docs and an empty artifacts/ dir."""
    for name in DOCS:
        (tmp_path / name).write_text(f"{name} contents\n", encoding="utf-8")
    (tmp_path / "artifacts").mkdir()
    return tmp_path


@pytest.fixture
def make_artifact(project: Path) -> MakeArtifact:
    """Create ``artifacts/<name>`` with a payload and a completions dir."""

    def _make(
        name: str,
        *,
        man_pages: tuple[str, ...] = ("ouch.1",),
        completions: tuple[str, ...] = ("ouch.bash", "_ouch"),
        with_completions_dir: bool = True,
        with_payload: bool = True,
    ) -> Path:
        artifact = project / "artifacts" / name
        artifact.mkdir()
        if with_payload:
            payload = "ouch.exe" if name.endswith(".exe") else "ouch"
            (artifact / payload).write_bytes(b"\x7fELF binary")
        if with_completions_dir:
            comp = artifact / "completions"
            comp.mkdir()
            for page in man_pages:
                (comp / page).write_text(f".TH {page}\n", encoding="utf-8")
            for script in completions:
                (comp / script).write_text("# completion\n", encoding="utf-8")
        return artifact

    return _make
