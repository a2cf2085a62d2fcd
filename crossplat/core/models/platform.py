"""
Platform model — one OS/Arch combination a build can target.

A platform's identity is its ``(os, arch)`` pair. The ``default`` flag
only says whether the platform is built when the user gives no filters;
it never takes part in equality or hashing, so ``linux/amd64`` marked
default and ``linux/amd64`` unmarked are the same platform.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

# Separator between the OS and Arch halves of a canonical platform string.
SEPARATOR = "/"

# Leading marker that turns a filter token into an exclusion.
NEGATION = "!"


class PlatformSyntaxError(ValueError):
    """Raised when a filter token cannot be parsed.

    Carries the offending raw token so the caller can report it.
    """

    def __init__(self, token: str, message: str | None = None) -> None:
        self.token = token
        super().__init__(
            message or f"Invalid platform syntax: {token!r} should be os/arch"
        )


class Platform(BaseModel):
    """An OS/Arch pair, optionally flagged as a default build target.

    Default targets are popular or generally useful ones. Android, for
    instance, is not a default: cross-compiling for Android *and* Linux
    in one go is rare.
    """

    model_config = ConfigDict(frozen=True)

    os: str
    arch: str
    default: bool = False

    @field_validator("os", "arch", mode="before")
    @classmethod
    def _lower(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @classmethod
    def parse(cls, token: str, default: bool = False) -> Platform:
        """Parse a canonical ``"os/arch"`` string.

        Raises:
            PlatformSyntaxError: If the token does not contain exactly one
                separator or either half is empty.
        """
        parts = token.split(SEPARATOR)
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise PlatformSyntaxError(token)
        return cls(os=parts[0], arch=parts[1], default=default)

    @property
    def key(self) -> str:
        """Canonical ``"os/arch"`` identity string."""
        return f"{self.os}{SEPARATOR}{self.arch}"

    def without_default(self) -> Platform:
        """Copy of this platform with the default flag cleared."""
        if not self.default:
            return self
        return self.model_copy(update={"default": False})

    def __str__(self) -> str:
        return self.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Platform):
            return NotImplemented
        return self.os == other.os and self.arch == other.arch

    def __hash__(self) -> int:
        return hash((self.os, self.arch))
