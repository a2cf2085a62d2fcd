"""
L1 Domain — Snapshot derivation (pure).

Builds one snapshot's platform list from the previous one.
No I/O, no logging.
"""

from __future__ import annotations

from collections.abc import Iterable

from crossplat.core.models.platform import Platform


def add_drop(
    base: Iterable[Platform],
    add: Iterable[Platform] = (),
    drop: Iterable[Platform] = (),
) -> tuple[Platform, ...]:
    """Return ``base`` plus ``add`` minus ``drop``, unique by OS/Arch.

    When a platform is in both ``base`` and ``add`` the ``add`` entry
    wins, so its ``default`` flag replaces the old one. Anything in
    ``drop`` is removed no matter where it came from; dropping a
    platform that is not there is a no-op.

    Callers must not rely on the order of the result.
    """
    dropped = {p.key for p in drop}
    merged: dict[str, Platform] = {}
    for platform in (*base, *add):
        if platform.key not in dropped:
            merged[platform.key] = platform
    return tuple(merged.values())
