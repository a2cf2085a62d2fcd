"""
CLI commands for target resolution.

Thin wrappers over ``crossplat.core.services.platforms``. Sorting for
display happens here; the core hands back unordered sets.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from crossplat.core.models.platform import Platform

logger = logging.getLogger(__name__)


def _load_config(ctx: click.Context):
    """Load crossplat.yml from context or by upward search, exit on error."""
    from crossplat.core.config.loader import ConfigError, load_config

    config_path: Path | None = ctx.obj.get("config_path")
    try:
        return load_config(config_path)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


def _snapshot_for(toolchain: str | None, configured: str):
    """Pick the snapshot for --toolchain, then the config, then the newest."""
    from crossplat.core.services.platforms.catalog import LATEST, supported_platforms

    version = toolchain or configured
    if not version:
        logger.info("No toolchain version given, using newest catalog %s", LATEST.release)
        return LATEST
    return supported_platforms(version)


def _sorted(platforms) -> list[Platform]:
    return sorted(platforms, key=lambda p: p.key)


def _toolchain_option(f):
    return click.option(
        "--toolchain", "-t", default=None,
        help="Toolchain version, e.g. go1.21 (default: config, then newest known).",
    )(f)


@click.command()
@click.option("--os", "os_values", multiple=True,
              help='Space-separated OS names, "!" to exclude (repeatable).')
@click.option("--arch", "arch_values", multiple=True,
              help='Space-separated arch names, "!" to exclude (repeatable).')
@click.option("--osarch", "osarch_values", multiple=True,
              help='Space-separated os/arch pairs, "!os/arch" to exclude (repeatable).')
@_toolchain_option
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def platforms(
    ctx: click.Context,
    os_values: tuple[str, ...],
    arch_values: tuple[str, ...],
    osarch_values: tuple[str, ...],
    toolchain: str | None,
    as_json: bool,
) -> None:
    """Resolve the OS/Arch pairs to build for."""
    from crossplat.core.models.filters import FilterRequest
    from crossplat.core.models.platform import PlatformSyntaxError
    from crossplat.core.services.platforms.domain.resolution import select_platforms

    config = _load_config(ctx)
    flags = FilterRequest()
    for flag, values, add in (
        ("--os", os_values, flags.add_os),
        ("--arch", arch_values, flags.add_arch),
        ("--osarch", osarch_values, flags.add_osarch),
    ):
        for value in values:
            try:
                add(value)
            except PlatformSyntaxError as e:
                raise click.BadParameter(str(e), param_hint=f"'{flag}'") from e

    # Flag tokens come after the configured ones
    request = config.to_request()
    request.extend(flags)
    logger.info(
        "Filters: os=%r arch=%r osarch=%r",
        request.os_value, request.arch_value, request.osarch_value,
    )

    snapshot = _snapshot_for(toolchain, config.toolchain)
    targets = _sorted(select_platforms(snapshot, request))

    if as_json:
        click.echo(json.dumps({
            "release": snapshot.release,
            "filters": {
                "os": request.os_value,
                "arch": request.arch_value,
                "osarch": request.osarch_value,
            },
            "platforms": [p.key for p in targets],
        }, indent=2))
        return

    if not targets:
        if not ctx.obj.get("quiet"):
            click.secho("Nothing to build: no supported platform matches the filters.",
                        fg="yellow", err=True)
        return

    for platform in targets:
        click.echo(platform.key)


@click.command()
@_toolchain_option
@click.option("--defaults-only", is_flag=True, help="Only show default build targets.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def catalog(
    ctx: click.Context,
    toolchain: str | None,
    defaults_only: bool,
    as_json: bool,
) -> None:
    """Show the platforms a toolchain version supports."""
    config = _load_config(ctx)
    snapshot = _snapshot_for(toolchain, config.toolchain)

    if as_json:
        data = snapshot.to_dict()
        if defaults_only:
            data["platforms"] = [p for p in data["platforms"] if p["default"]]
        click.echo(json.dumps(data, indent=2))
        return

    shown = _sorted(snapshot.defaults() if defaults_only else snapshot)
    if not ctx.obj.get("quiet"):
        click.secho(f"📦 go{snapshot.release} ({snapshot.versions})", fg="cyan", bold=True)
        click.echo(f"   {len(snapshot)} platforms, {len(snapshot.defaults())} default")
        click.echo()
    for platform in shown:
        marker = " *" if platform.default else ""
        click.echo(f"   {platform.key}{marker}")


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def versions(as_json: bool) -> None:
    """List the known toolchain releases and their version ranges."""
    from crossplat.core.services.platforms.catalog import SNAPSHOTS

    if as_json:
        click.echo(json.dumps([
            {
                "release": s.release,
                "versions": str(s.versions),
                "platforms": len(s),
                "defaults": len(s.defaults()),
            }
            for s in SNAPSHOTS
        ], indent=2))
        return

    for s in SNAPSHOTS:
        click.echo(f"   go{s.release:<6} {str(s.versions):<22} {len(s):>3} platforms")
