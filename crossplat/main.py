"""
crossplat — CLI entrypoint.

Usage:
    python -m crossplat.main --help
    python -m crossplat.main platforms --os "linux darwin" --arch "!386"
    python -m crossplat.main catalog --toolchain go1.16
"""

from __future__ import annotations

from pathlib import Path

import click

from crossplat import __version__
from crossplat.core.observability.logging_config import setup_from_flags
from crossplat.ui.cli.platforms import catalog, platforms, versions


@click.group()
@click.version_option(version=__version__, prog_name="crossplat")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to crossplat.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """crossplat — pick the OS/Arch pairs a cross-build should target."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_from_flags(debug=debug, verbose=verbose, quiet=quiet)


cli.add_command(platforms)
cli.add_command(catalog)
cli.add_command(versions)


if __name__ == "__main__":
    cli()
