"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from crossplat.core.models import Platform


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo any handler/level changes ``setup_logging`` makes to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in [h for h in root.handlers if h not in handlers]:
        root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def three_platforms() -> list[Platform]:
    """linux/amd64, linux/arm and darwin/amd64, all default targets."""
    return [
        Platform(os="linux", arch="amd64", default=True),
        Platform(os="linux", arch="arm", default=True),
        Platform(os="darwin", arch="amd64", default=True),
    ]


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write a crossplat.yml into tmp_path and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "crossplat.yml"
        path.write_text(textwrap.dedent(content))
        return path

    return _write
