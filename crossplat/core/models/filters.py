"""
Filter models — the user's OS / Arch / OS-Arch selection.

``FilterRequest`` collects raw tokens as flags are parsed (each flag may
be given several times, each value holding whitespace-separated tokens).
``parse()`` then splits every list into include and exclude sets for
the resolution step.

Token rules:
    - tokens are lower-cased and deduplicated, first appearance wins
    - a leading ``!`` means "exclude"
    - empty OS/Arch tokens are skipped
    - a bare ``!`` is rejected
    - pair tokens must be exactly ``os/arch``; only the OS half is
      checked for ``!`` (``linux/!amd64`` is an include of a platform
      that will never exist)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from crossplat.core.models.platform import (
    NEGATION,
    Platform,
    PlatformSyntaxError,
)


def _check_name(token: str) -> str:
    if token == NEGATION:
        raise PlatformSyntaxError(
            token, f"Invalid filter {token!r}: negation marker needs a name"
        )
    return token.lower()


def _parse_pair(token: str) -> tuple[bool, Platform]:
    """Parse a pair token into ``(negated, platform)``."""
    negated = token.startswith(NEGATION)
    try:
        platform = Platform.parse(token[len(NEGATION):] if negated else token)
    except PlatformSyntaxError:
        raise PlatformSyntaxError(token) from None
    return negated, platform


def _append_missing(target: list[str], values: Iterable[str]) -> None:
    for value in values:
        if value not in target:
            target.append(value)


def split_negated(tokens: Iterable[str]) -> tuple[frozenset[str], frozenset[str]]:
    """Split name tokens into ``(include, exclude)`` sets."""
    include: set[str] = set()
    exclude: set[str] = set()
    for token in tokens:
        if not token:
            continue
        name = _check_name(token)
        if name.startswith(NEGATION):
            exclude.add(name[len(NEGATION):])
        else:
            include.add(name)
    return frozenset(include), frozenset(exclude)


def split_pairs(
    tokens: Iterable[str],
) -> tuple[frozenset[Platform], frozenset[Platform]]:
    """Split ``os/arch`` tokens into ``(include, exclude)`` platform sets."""
    include: set[Platform] = set()
    exclude: set[Platform] = set()
    for token in tokens:
        negated, platform = _parse_pair(token)
        (exclude if negated else include).add(platform)
    return frozenset(include), frozenset(exclude)


@dataclass(frozen=True)
class ParsedFilters:
    """Include/exclude sets ready for platform resolution."""

    os_include: frozenset[str] = frozenset()
    os_exclude: frozenset[str] = frozenset()
    arch_include: frozenset[str] = frozenset()
    arch_exclude: frozenset[str] = frozenset()
    pair_include: frozenset[Platform] = frozenset()
    pair_exclude: frozenset[Platform] = frozenset()


@dataclass
class FilterRequest:
    """Raw filter tokens collected from the command line or config."""

    os: list[str] = field(default_factory=list)
    arch: list[str] = field(default_factory=list)
    osarch: list[str] = field(default_factory=list)

    def add_os(self, value: str) -> None:
        """Add whitespace-separated OS tokens, e.g. ``"linux !windows"``."""
        _append_missing(self.os, [_check_name(t) for t in value.split()])

    def add_arch(self, value: str) -> None:
        """Add whitespace-separated Arch tokens, e.g. ``"amd64 !arm"``."""
        _append_missing(self.arch, [_check_name(t) for t in value.split()])

    def add_osarch(self, value: str) -> None:
        """Add whitespace-separated pair tokens, e.g. ``"linux/arm !windows/386"``.

        All tokens are validated before any is stored, so a bad token
        leaves the request unchanged.

        Raises:
            PlatformSyntaxError: On a token that is not ``os/arch``.
        """
        tokens = value.split()
        for token in tokens:
            _parse_pair(token)
        _append_missing(self.osarch, [t.lower() for t in tokens])

    def extend(self, other: FilterRequest) -> None:
        """Append another request's tokens after this one's."""
        _append_missing(self.os, other.os)
        _append_missing(self.arch, other.arch)
        _append_missing(self.osarch, other.osarch)

    def parse(self) -> ParsedFilters:
        """Split every token list into include and exclude sets."""
        os_include, os_exclude = split_negated(self.os)
        arch_include, arch_exclude = split_negated(self.arch)
        pair_include, pair_exclude = split_pairs(self.osarch)
        return ParsedFilters(
            os_include=os_include,
            os_exclude=os_exclude,
            arch_include=arch_include,
            arch_exclude=arch_exclude,
            pair_include=pair_include,
            pair_exclude=pair_exclude,
        )

    @property
    def os_value(self) -> str:
        return " ".join(self.os)

    @property
    def arch_value(self) -> str:
        return " ".join(self.arch)

    @property
    def osarch_value(self) -> str:
        return " ".join(self.osarch)
