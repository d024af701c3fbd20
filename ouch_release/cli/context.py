from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from ouch_release.core.config import CONFIG_FILENAME, Config, load_config
from ouch_release.core.errors import ErrorCode
from ouch_release.core.result import Err
from ouch_release.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project_root: Path
    config: Config
    console: ConsoleProtocol


def resolve_root(root: Path) -> Path:
    try:
        resolved = root.expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --root: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not resolved.is_dir():
        typer.echo(f"error: --root '{resolved}' is not a directory", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    return resolved


def build_context(*, root: Path, config_path: Path | None = None) -> CLIContext:
    """Resolve the project root and load ``release.toml``.

    An explicit ``config_path`` must exist. The default file is optional.
    """
    project_root = resolve_root(root)

    path = config_path if config_path is not None else project_root / CONFIG_FILENAME
    config = Config()
    if config_path is not None or path.exists():
        config_result = load_config(path)
        if isinstance(config_result, Err):
            typer.echo(f"error: {config_result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        config = config_result.value

    return CLIContext(project_root=project_root, config=config, console=RichConsole())
