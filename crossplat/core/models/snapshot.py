"""
Snapshot model — the platforms one toolchain release supports.

Snapshots are built once from the release history and never change.
Each one is bound to a half-open version range; the catalog walks the
ranges in ascending order to find the snapshot for a toolchain version.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from packaging.version import Version

from crossplat.core.models.platform import Platform


@dataclass(frozen=True)
class VersionRange:
    """Half-open version interval ``[minimum, below)``.

    ``None`` on either side means unbounded on that side.
    """

    minimum: Version | None = None
    below: Version | None = None

    def contains(self, version: Version) -> bool:
        if self.minimum is not None and version < self.minimum:
            return False
        if self.below is not None and version >= self.below:
            return False
        return True

    def __str__(self) -> str:
        parts = []
        if self.minimum is not None:
            parts.append(f">= {self.minimum}")
        if self.below is not None:
            parts.append(f"< {self.below}")
        return ", ".join(parts) or "*"


@dataclass(frozen=True)
class Snapshot:
    """Platforms supported by one toolchain release.

    Iterating yields the platforms; ``in`` accepts either a ``Platform``
    or its ``"os/arch"`` string.
    """

    release: str
    versions: VersionRange
    platforms: tuple[Platform, ...]

    def __post_init__(self) -> None:
        seen: set[Platform] = set()
        for platform in self.platforms:
            if platform in seen:
                raise ValueError(
                    f"Duplicate platform {platform} in snapshot {self.release}"
                )
            seen.add(platform)

    def __iter__(self) -> Iterator[Platform]:
        return iter(self.platforms)

    def __len__(self) -> int:
        return len(self.platforms)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(p.key == item for p in self.platforms)
        return item in self.platforms

    def find(self, os: str, arch: str) -> Platform | None:
        """Look up a platform by OS and Arch name."""
        key = Platform(os=os, arch=arch).key
        for platform in self.platforms:
            if platform.key == key:
                return platform
        return None

    def defaults(self) -> tuple[Platform, ...]:
        """Platforms built when no filter is given."""
        return tuple(p for p in self.platforms if p.default)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "release": self.release,
            "versions": str(self.versions),
            "platforms": [
                {"os": p.os, "arch": p.arch, "default": p.default}
                for p in sorted(self.platforms, key=lambda p: p.key)
            ],
        }
