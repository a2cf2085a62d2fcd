"""
Platform catalog — which platforms each toolchain release supports.

The release history in ``data/releases.py`` is folded through
``add_drop`` once, at import, into an immutable tuple of snapshots.
Each snapshot covers the half-open version range from its own release
up to the next one; the newest covers everything after it.

Version lookup never fails. A version string without the toolchain
prefix, one that does not parse, or one older than the first release
all resolve to the newest snapshot, so the tool keeps working against
toolchains newer than itself.
"""

from __future__ import annotations

import logging

from packaging.version import InvalidVersion, Version

from crossplat.core.models.platform import Platform
from crossplat.core.models.snapshot import Snapshot, VersionRange
from crossplat.core.services.platforms.data.releases import _GO_RELEASES
from crossplat.core.services.platforms.domain.add_drop import add_drop

logger = logging.getLogger(__name__)

# Prefix of ``go version`` style strings, e.g. ``go1.21.3``.
TOOLCHAIN_PREFIX = "go"


def _platforms(entries: list[tuple[str, str, bool]]) -> list[Platform]:
    return [Platform(os=os, arch=arch, default=default) for os, arch, default in entries]


def build_snapshots(
    releases: list[tuple[str, list[tuple[str, str, bool]], list[tuple[str, str, bool]]]],
) -> tuple[Snapshot, ...]:
    """Fold a release history into snapshots with contiguous version ranges.

    Args:
        releases: ``(release, add, drop)`` entries, oldest first.

    Raises:
        ValueError: If the history is empty or not in ascending order.
    """
    if not releases:
        raise ValueError("Release history is empty")

    versions = [Version(release) for release, _, _ in releases]
    if versions != sorted(versions) or len(set(versions)) != len(versions):
        raise ValueError("Release history must be strictly ascending")

    snapshots: list[Snapshot] = []
    current: tuple[Platform, ...] = ()
    for i, (release, add, drop) in enumerate(releases):
        current = add_drop(current, _platforms(add), _platforms(drop))
        below = versions[i + 1] if i + 1 < len(versions) else None
        snapshots.append(Snapshot(
            release=release,
            versions=VersionRange(minimum=versions[i], below=below),
            platforms=current,
        ))
    return tuple(snapshots)


SNAPSHOTS: tuple[Snapshot, ...] = build_snapshots(_GO_RELEASES)
LATEST: Snapshot = SNAPSHOTS[-1]


def parse_toolchain_version(value: str) -> Version | None:
    """Extract the numeric version from a ``go1.x`` string, or None.

    Only plain dotted releases count. Pre-releases (``go1.16rc1``),
    dev, post and local versions are treated as unparseable.
    """
    value = value.strip()
    if not value.startswith(TOOLCHAIN_PREFIX):
        return None
    try:
        version = Version(value[len(TOOLCHAIN_PREFIX):])
    except InvalidVersion:
        return None
    if (
        version.epoch != 0
        or version.pre is not None
        or version.dev is not None
        or version.post is not None
        or version.local is not None
    ):
        return None
    return version


def supported_platforms(value: str) -> Snapshot:
    """Return the snapshot for a toolchain version string.

    Args:
        value: Version as reported by the toolchain, e.g. ``"go1.16"``.

    Returns:
        The matching snapshot, or the newest one when the version is
        unknown, malformed, or outside the history.
    """
    version = parse_toolchain_version(value)
    if version is None:
        logger.warning(
            "Unable to parse toolchain version %r, using platforms of %s%s",
            value, TOOLCHAIN_PREFIX, LATEST.release,
        )
        return LATEST

    for snapshot in SNAPSHOTS:
        if snapshot.versions.contains(version):
            logger.debug("Toolchain %s matched snapshot %s", version, snapshot.release)
            return snapshot

    logger.warning(
        "Toolchain version %s predates the known history, using platforms of %s%s",
        version, TOOLCHAIN_PREFIX, LATEST.release,
    )
    return LATEST


# Name used by callers that think in terms of "resolve a snapshot".
resolve_snapshot = supported_platforms
