from __future__ import annotations

from pathlib import Path

import typer

from ouch_release import __version__
from ouch_release.cli.context import build_context
from ouch_release.core.errors import ErrorCode
from ouch_release.core.result import Err
from ouch_release.output.errors import package_error_exit_code, print_package_error
from ouch_release.services.packager import package_release

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


@app.command()
def package(
    root: Path = typer.Option(
        Path("."),
        "--root",
        help="Project root holding artifacts/ and the shared docs",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: <root>/release.toml if present)",
    ),
    artifacts: str | None = typer.Option(
        None, "--artifacts", help="Artifacts directory, relative to the root"
    ),
    release: str | None = typer.Option(
        None, "--release", help="Output directory, relative to the root (must not exist)"
    ),
    no_overlay: bool = typer.Option(
        False,
        "--no-overlay",
        help="Do not merge shared completions into each artifact",
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Package every artifacts/ouch-* directory into release/."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))

    ctx = build_context(root=root, config_path=config)
    cfg = ctx.config.with_overrides(
        artifacts=artifacts,
        release=release,
        overlay_completions=False if no_overlay else None,
    )

    result = package_release(project_root=ctx.project_root, config=cfg, console=ctx.console)
    if isinstance(result, Err):
        print_package_error(result.error, ctx.console)
        raise typer.Exit(code=package_error_exit_code(result.error))

    release_dir = cfg.release_dir(ctx.project_root)
    ctx.console.newline()
    ctx.console.success(f"{len(result.value)} archive(s) written to {release_dir}")


def main() -> None:
    app()
