"""
docktool — CLI entrypoint.

Usage:
    python -m src.main --help
    python -m src.main generate [PATH] [--compose | --all]
    python -m src.main detect [PATH]
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from src.core.observability.logging_config import resolve_level, setup_logging

from src import __version__


@click.group()
@click.version_option(version=__version__, prog_name="docktool")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to docktool.yml (default: look in the project root).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """docktool — generate Dockerfile and docker-compose.yml for a project."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(level=resolve_level(debug=debug, verbose=verbose, quiet=quiet))


def _project_root(path_arg: str | None, path_opt: str | None) -> Path:
    """``--path`` wins over the positional argument; both default to CWD."""
    return Path(path_opt or path_arg or ".").resolve()


_path_argument = click.argument("path", required=False, type=click.Path(file_okay=False))
_path_option = click.option(
    "--path",
    "path_opt",
    type=click.Path(file_okay=False),
    default=None,
    help="Project directory (same as PATH).",
)


@cli.command()
@_path_argument
@_path_option
@click.option("--compose", is_flag=True, help="Generate docker-compose.yml instead of a Dockerfile.")
@click.option("--all", "both", is_flag=True, help="Generate both Dockerfile and docker-compose.yml.")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to write into (default: the project root).",
)
@click.option("--dry-run", is_flag=True, help="Print the generated files, write nothing.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    path: str | None,
    path_opt: str | None,
    compose: bool,
    both: bool,
    output_dir: str | None,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Generate Docker configuration for a project.

    Examples:

        docktool generate

        docktool generate ./my-app --compose

        docktool generate --path ./my-app --all --dry-run
    """
    from src.core.use_cases.generate import run_generate

    result = run_generate(
        _project_root(path, path_opt),
        compose=compose,
        both=both,
        output_dir=Path(output_dir) if output_dir else None,
        dry_run=dry_run,
        config_path=ctx.obj.get("config_path"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    for written in result.written:
        click.secho(f"📝 Wrote {written}", fg="green")

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    config = result.config
    assert config is not None

    if dry_run:
        for file in result.files:
            click.secho(f"── {file.path} ──", fg="cyan", bold=True)
            click.echo(file.content)
        return

    if not ctx.obj.get("quiet"):
        click.secho(
            f"🐳 Docker configuration generated ({config.ecosystem}, {config.base_image})",
            fg="cyan",
            bold=True,
        )


@cli.command()
@_path_argument
@_path_option
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def detect(ctx: click.Context, path: str | None, path_opt: str | None, as_json: bool) -> None:
    """Show the detected ecosystem and environment variables."""
    from src.core.use_cases.detect import run_detect

    result = run_detect(
        _project_root(path, path_opt),
        config_path=ctx.obj.get("config_path"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    config = result.config
    assert config is not None

    click.secho(f"\n🔍 Detection: {result.project_root}", fg="cyan", bold=True)
    click.echo(f"   Files:      {result.file_count}")
    click.echo(f"   Ecosystem:  {config.ecosystem}")
    click.echo(f"   Base image: {config.base_image}")
    click.echo(f"   Ports:      {', '.join(config.ports) or '-'}")
    click.echo(f"   Env file:   {result.env_file.name if result.env_file else '-'}")

    variables = result.variables
    if variables:
        click.echo()
        click.secho(f"   Variables ({len(variables)}):", fg="white", bold=True)
        for var in variables:
            if var["secret"]:
                click.secho(f"     🔒 {var['key']} ", fg="yellow", nl=False)
                click.echo("(secret)")
            else:
                click.echo(f"     • {var['key']}={var['value']}")

    click.echo()


if __name__ == "__main__":
    cli()
