"""
L1 Domain — Build target resolution (pure).

Turns a snapshot plus include/exclude filters into the set of
platforms to build. No I/O; the result is an unordered ``frozenset``
and callers that want a stable build order must sort it themselves.

Precedence, most specific first:
    1. OS/Arch pair includes      exactly those pairs
    2. OS includes + Arch includes  their cross product
    3. OS includes only           every arch of those OSes
    4. nothing included           the snapshot's default platforms

Exclusions are applied to whatever the chosen branch produced.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from crossplat.core.models.filters import FilterRequest, ParsedFilters
from crossplat.core.models.platform import Platform

logger = logging.getLogger(__name__)


def _candidates(
    supported: dict[str, Platform],
    os_include: frozenset[str],
    arch_include: frozenset[str],
    pair_include: frozenset[Platform],
    pair_exclude: frozenset[Platform],
) -> list[Platform]:
    if pair_include:
        logger.debug("Selecting %d explicit os/arch pairs", len(pair_include))
        return [
            supported[p.key] for p in pair_include
            if p.key in supported and p not in pair_exclude
        ]

    if os_include and arch_include:
        logger.debug(
            "Selecting cross product of %d OS x %d arch",
            len(os_include), len(arch_include),
        )
        return [
            supported[key]
            for key in (f"{os}/{arch}" for os in os_include for arch in arch_include)
            if key in supported
        ]

    if os_include:
        logger.debug("Selecting all arches of %s", sorted(os_include))
        return [p for p in supported.values() if p.os in os_include]

    logger.debug("No includes given, selecting default platforms")
    return [p for p in supported.values() if p.default]


def resolve_platforms(
    supported: Iterable[Platform],
    *,
    os_include: Iterable[str] = (),
    os_exclude: Iterable[str] = (),
    arch_include: Iterable[str] = (),
    arch_exclude: Iterable[str] = (),
    pair_include: Iterable[Platform] = (),
    pair_exclude: Iterable[Platform] = (),
) -> frozenset[Platform]:
    """Compute the platforms to build.

    Args:
        supported: Platforms the toolchain supports (usually a ``Snapshot``).
        os_include: OS names to build for.
        os_exclude: OS names never to build for.
        arch_include: Arch names to build for.
        arch_exclude: Arch names never to build for.
        pair_include: Exact platforms to build for; when non-empty the
            OS and Arch include sets are ignored.
        pair_exclude: Exact platforms never to build for.

    Returns:
        Platforms with ``default`` cleared. May be empty, which means
        there is nothing to build.
    """
    os_in = frozenset(os_include)
    os_out = frozenset(os_exclude)
    arch_in = frozenset(arch_include)
    arch_out = frozenset(arch_exclude)
    pairs_in = frozenset(pair_include)
    pairs_out = frozenset(pair_exclude)

    by_key = {p.key: p for p in supported}
    candidates = _candidates(by_key, os_in, arch_in, pairs_in, pairs_out)

    result: set[Platform] = set()
    for platform in candidates:
        if platform in pairs_out:
            continue
        if platform.os in os_out or platform.arch in arch_out:
            continue
        if not pairs_in:
            if os_in and platform.os not in os_in:
                continue
            if arch_in and platform.arch not in arch_in:
                continue
        result.add(platform.without_default())

    logger.debug("Resolved %d of %d candidate platforms", len(result), len(candidates))
    return frozenset(result)


def apply_filters(
    supported: Iterable[Platform],
    filters: ParsedFilters,
) -> frozenset[Platform]:
    """``resolve_platforms`` over an already parsed filter set."""
    return resolve_platforms(
        supported,
        os_include=filters.os_include,
        os_exclude=filters.os_exclude,
        arch_include=filters.arch_include,
        arch_exclude=filters.arch_exclude,
        pair_include=filters.pair_include,
        pair_exclude=filters.pair_exclude,
    )


def select_platforms(
    supported: Iterable[Platform],
    request: FilterRequest,
) -> frozenset[Platform]:
    """Parse a raw ``FilterRequest`` and resolve it against ``supported``.

    Raises:
        PlatformSyntaxError: If a token in the request is malformed.
    """
    return apply_filters(supported, request.parse())
