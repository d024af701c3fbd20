"""Typed configuration for the release packager.

Configuration is optional. Without a ``release.toml`` the packager uses the
fixed layout CI expects: ``artifacts/`` in, ``release/`` out, and the three
shared docs at the project root.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_str_tuple, get_table

__all__ = [
    "Config",
    "ConfigError",
    "LayoutConfig",
    "PathsConfig",
    "CONFIG_FILENAME",
    "DEFAULT_DOCS",
    "load_config",
]

CONFIG_FILENAME = "release.toml"

DEFAULT_ARTIFACTS_DIR = "artifacts"
DEFAULT_RELEASE_DIR = "release"
DEFAULT_PREFIX = "ouch-"
DEFAULT_EXECUTABLE = "ouch"
DEFAULT_DOCS = ("README.md", "LICENSE", "CHANGELOG.md")
DEFAULT_COMPLETIONS_SOURCE = "artifacts"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Input and output directories, relative to the project root."""

    artifacts: str = DEFAULT_ARTIFACTS_DIR
    release: str = DEFAULT_RELEASE_DIR


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Shape of an artifact directory.

    ``completions_source`` names a directory inside the artifacts root whose
    contents are merged into every artifact's ``completions/`` before man
    pages are split out.
    """

    prefix: str = DEFAULT_PREFIX
    executable: str = DEFAULT_EXECUTABLE
    docs: tuple[str, ...] = DEFAULT_DOCS
    completions_source: str = DEFAULT_COMPLETIONS_SOURCE
    overlay_completions: bool = True


@dataclass(frozen=True, slots=True)
class Config:
    paths: PathsConfig = field(default_factory=PathsConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a parsed TOML mapping."""
        paths: StrDict = get_table(data, "paths") or {}
        layout: StrDict = get_table(data, "layout") or {}

        docs = get_str_tuple(layout, "docs")
        overlay = get_bool(layout, "overlay_completions")

        return cls(
            paths=PathsConfig(
                artifacts=get_str(paths, "artifacts") or DEFAULT_ARTIFACTS_DIR,
                release=get_str(paths, "release") or DEFAULT_RELEASE_DIR,
            ),
            layout=LayoutConfig(
                prefix=get_str(layout, "prefix") or DEFAULT_PREFIX,
                executable=get_str(layout, "executable") or DEFAULT_EXECUTABLE,
                docs=docs if docs is not None else DEFAULT_DOCS,
                completions_source=get_str(layout, "completions_source")
                or DEFAULT_COMPLETIONS_SOURCE,
                overlay_completions=True if overlay is None else overlay,
            ),
        )

    def with_overrides(
        self,
        *,
        artifacts: str | None = None,
        release: str | None = None,
        overlay_completions: bool | None = None,
    ) -> Config:
        """Return a copy with CLI overrides applied (None keeps the value)."""
        paths = replace(
            self.paths,
            artifacts=artifacts or self.paths.artifacts,
            release=release or self.paths.release,
        )
        layout = self.layout
        if overlay_completions is not None:
            layout = replace(layout, overlay_completions=overlay_completions)
        return Config(paths=paths, layout=layout)

    def artifacts_root(self, project_root: Path) -> Path:
        return project_root / self.paths.artifacts

    def release_dir(self, project_root: Path) -> Path:
        return project_root / self.paths.release


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to release.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
