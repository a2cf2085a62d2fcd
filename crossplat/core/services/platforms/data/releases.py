"""
L0 Data — Go toolchain platform history.

Source: https://go.dev/doc/devel/release and ``go tool dist list``.

Each release lists the platforms it adds and the ones it drops relative
to the release before it. An entry in ``add`` that already exists
replaces the old one, which is how a platform's default flag changes.
A release with no changes still gets an entry so the version ladder
has a rung for it.

Entries are ``(os, arch, default)``; drop entries ignore ``default``.
"""

from __future__ import annotations

_Entry = tuple[str, str, bool]

# (release, add, drop), oldest first
_GO_RELEASES: list[tuple[str, list[_Entry], list[_Entry]]] = [
    ("1.0", [
        ("darwin", "386", True),
        ("darwin", "amd64", True),
        ("linux", "386", True),
        ("linux", "amd64", True),
        ("linux", "arm", True),
        ("freebsd", "386", True),
        ("freebsd", "amd64", True),
        ("openbsd", "386", True),
        ("openbsd", "amd64", True),
        ("windows", "386", True),
        ("windows", "amd64", True),
    ], []),
    ("1.1", [
        ("freebsd", "arm", True),
        ("netbsd", "386", True),
        ("netbsd", "amd64", True),
        ("netbsd", "arm", True),
        ("plan9", "386", False),
    ], []),
    ("1.3", [
        ("dragonfly", "386", False),
        ("dragonfly", "amd64", False),
        ("nacl", "amd64", False),
        ("nacl", "amd64p32", False),
        ("nacl", "arm", False),
        ("solaris", "amd64", False),
    ], []),
    ("1.4", [
        ("android", "arm", False),
        ("plan9", "amd64", False),
    ], []),
    ("1.5", [
        ("darwin", "arm", False),
        ("darwin", "arm64", False),
        ("linux", "arm64", False),
        ("linux", "ppc64", False),
        ("linux", "ppc64le", False),
    ], []),
    ("1.6", [
        ("android", "386", False),
        ("android", "amd64", False),
        ("linux", "mips64", False),
        ("linux", "mips64le", False),
        ("nacl", "386", False),
        ("openbsd", "arm", True),
    ], []),
    ("1.7", [
        # not fully supported, but generally useful
        ("linux", "s390x", True),
        ("plan9", "arm", False),
        # mips64 and mips64le graduate to full support
        ("linux", "mips64", True),
        ("linux", "mips64le", True),
    ], []),
    ("1.8", [
        ("linux", "mips", True),
        ("linux", "mipsle", True),
    ], []),
    ("1.9", [], []),
    # unannounced
    ("1.10", [], [
        ("android", "amd64", False),
    ]),
    ("1.11", [
        ("js", "wasm", True),
    ], []),
    ("1.12", [
        ("aix", "ppc64", False),
        ("windows", "arm", True),
    ], []),
    ("1.13", [
        ("illumos", "amd64", False),
        ("netbsd", "arm64", True),
        ("openbsd", "arm64", True),
    ], []),
    ("1.14", [
        ("freebsd", "arm64", True),
        ("linux", "riscv64", True),
    ], [
        ("nacl", "386", False),
        ("nacl", "amd64", False),
        ("nacl", "arm", False),
    ]),
    ("1.15", [
        ("android", "arm64", False),
    ], [
        ("darwin", "386", False),
    ]),
    ("1.16", [
        ("android", "amd64", False),
        ("darwin", "arm64", True),
        ("openbsd", "mips64", False),
    ], []),
    ("1.17", [
        ("windows", "arm64", True),
    ], []),
    ("1.18", [], []),
    ("1.19", [
        ("linux", "loong64", True),
    ], []),
    ("1.20", [
        ("freebsd", "riscv64", True),
    ], []),
    ("1.21", [], []),
    ("1.22", [], []),
    ("1.23", [], []),
]
