"""
Configuration loader — reads crossplat.yml into a ``BuildConfig``.

The file is optional. When present it supplies a default toolchain
version and filter tokens that command-line flags are appended to.

    toolchain: go1.21
    os: linux darwin
    arch: "!386"
    osarch:
      - windows/amd64
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from crossplat.core.models.filters import FilterRequest
from crossplat.core.models.platform import PlatformSyntaxError

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "crossplat.yml"


class ConfigError(Exception):
    """Raised when the configuration file is unreadable or invalid."""


class BuildConfig(BaseModel):
    """Defaults for target resolution."""

    toolchain: str = ""
    os: list[str] = Field(default_factory=list)
    arch: list[str] = Field(default_factory=list)
    osarch: list[str] = Field(default_factory=list)

    @field_validator("os", "arch", "osarch", mode="before")
    @classmethod
    def _split_string(cls, value: object) -> object:
        # "linux darwin" and [linux, darwin] mean the same thing;
        # YAML reads a bare 386 as an int
        if value is None:
            return []
        if isinstance(value, (str, int, float)):
            return str(value).split()
        if isinstance(value, list):
            return [str(v) if isinstance(v, (int, float)) else v for v in value]
        return value

    def to_request(self) -> FilterRequest:
        """Build a ``FilterRequest`` from the configured tokens.

        Raises:
            PlatformSyntaxError: If a configured token is malformed.
        """
        request = FilterRequest()
        for value in self.os:
            request.add_os(value)
        for value in self.arch:
            request.add_arch(value)
        for value in self.osarch:
            request.add_osarch(value)
        return request


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for crossplat.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to crossplat.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> BuildConfig:
    """Load and validate the build configuration.

    Args:
        path: Explicit path to crossplat.yml. If None, searches upward
            and returns an empty config when nothing is found.

    Returns:
        Validated BuildConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using empty configuration", CONFIG_FILE)
            return BuildConfig()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading build config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return BuildConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = BuildConfig.model_validate(data)
        # Surface token errors now rather than at resolution time
        config.to_request()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
    except PlatformSyntaxError as e:
        raise ConfigError(f"Invalid filter in {path}: {e}") from e

    logger.info(
        "Loaded config: toolchain=%r, %d os, %d arch, %d osarch tokens",
        config.toolchain, len(config.os), len(config.arch), len(config.osarch),
    )
    return config
