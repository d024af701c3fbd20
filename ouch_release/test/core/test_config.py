"""Tests for ouch_release.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from ouch_release.core.config import (
    DEFAULT_DOCS,
    Config,
    LayoutConfig,
    PathsConfig,
    load_config,
)
from ouch_release.core.result import Err, Ok


class TestDefaults:
    def test_paths(self) -> None:
        config = Config()
        assert config.paths == PathsConfig(artifacts="artifacts", release="release")

    def test_layout(self) -> None:
        layout = LayoutConfig()
        assert layout.prefix == "ouch-"
        assert layout.executable == "ouch"
        assert layout.docs == ("README.md", "LICENSE", "CHANGELOG.md")
        assert layout.completions_source == "artifacts"
        assert layout.overlay_completions is True

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.paths = PathsConfig()  # type: ignore[misc]

    def test_resolved_dirs(self, tmp_path: Path) -> None:
        config = Config()
        assert config.artifacts_root(tmp_path) == tmp_path / "artifacts"
        assert config.release_dir(tmp_path) == tmp_path / "release"


class TestFromDict:
    def test_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_full(self) -> None:
        config = Config.from_dict(
            {
                "paths": {"artifacts": "dist/in", "release": "dist/out"},
                "layout": {
                    "prefix": "tool-",
                    "executable": "tool",
                    "docs": ["README.md", "NOTICE"],
                    "completions_source": "shared",
                    "overlay_completions": False,
                },
            }
        )
        assert config.paths.artifacts == "dist/in"
        assert config.paths.release == "dist/out"
        assert config.layout == LayoutConfig(
            prefix="tool-",
            executable="tool",
            docs=("README.md", "NOTICE"),
            completions_source="shared",
            overlay_completions=False,
        )

    def test_blank_strings_fall_back(self) -> None:
        config = Config.from_dict({"paths": {"artifacts": "  "}, "layout": {"prefix": ""}})
        assert config.paths.artifacts == "artifacts"
        assert config.layout.prefix == "ouch-"

    def test_docs_must_be_strings(self) -> None:
        with pytest.raises(TypeError):
            Config.from_dict({"layout": {"docs": ["README.md", 3]}})


class TestOverrides:
    def test_none_keeps_values(self) -> None:
        config = Config.from_dict({"paths": {"release": "out"}})
        assert config.with_overrides() == config

    def test_overrides_apply(self) -> None:
        config = Config().with_overrides(
            artifacts="in", release="out", overlay_completions=False
        )
        assert config.paths == PathsConfig(artifacts="in", release="out")
        assert config.layout.overlay_completions is False
        assert config.layout.docs == DEFAULT_DOCS


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "release.toml"
        path.write_text(
            '[paths]\nrelease = "out"\n\n[layout]\noverlay_completions = false\n',
            encoding="utf-8",
        )
        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.paths.release == "out"
        assert result.value.layout.overlay_completions is False

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "release.toml"
        result = load_config(path)
        assert isinstance(result, Err)
        assert "not found" in result.error.message
        assert result.error.path == path

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "release.toml"
        path.write_text("[paths\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "release.toml"
        path.write_text('[layout]\ndocs = "README.md"\n', encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message

