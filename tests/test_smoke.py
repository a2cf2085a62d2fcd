"""
Smoke tests — verify the package wiring is healthy.

These tests ensure the basic scaffolding works:
- Package imports successfully
- The release history builds at import
- CLI commands are registered
"""

from click.testing import CliRunner

from crossplat import __version__
from crossplat.core.services.platforms import LATEST, SNAPSHOTS
from crossplat.main import cli


class TestBootstrap:
    """Verify the project bootstrap is healthy."""

    def test_version_is_set(self):
        """Version string should be defined and non-empty."""
        assert __version__
        assert isinstance(__version__, str)

    def test_catalog_built(self):
        """Snapshots are built eagerly and the newest one is non-empty."""
        assert SNAPSHOTS
        assert len(LATEST) > 0

    def test_commands_registered(self):
        for name in ("platforms", "catalog", "versions"):
            runner = CliRunner()
            result = runner.invoke(cli, [name, "--help"])
            assert result.exit_code == 0, name
