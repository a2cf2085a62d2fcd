"""
Tests for CLI commands — platforms, catalog, versions, and global options.
"""

import json

from click.testing import CliRunner

from crossplat.main import cli


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "crossplat" in result.output
        assert "platforms" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestPlatformsCommand:
    """Tests for the platforms command."""

    def _invoke(self, *args: str, config: str | None = None):
        runner = CliRunner()
        prefix = ["--config", config] if config else []
        with runner.isolated_filesystem():
            return runner.invoke(cli, [*prefix, "platforms", *args])

    def test_os_and_arch(self):
        result = self._invoke("--toolchain", "go1.16", "--os", "linux", "--arch", "amd64 arm64")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["linux/amd64", "linux/arm64"]

    def test_repeated_flags_accumulate(self):
        result = self._invoke(
            "--toolchain", "go1.17",
            "--osarch", "windows/arm64", "--osarch", "darwin/arm64",
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["darwin/arm64", "windows/arm64"]

    def test_bad_pair_is_usage_error(self):
        result = self._invoke("--osarch", "linuxamd64")
        assert result.exit_code == 2
        assert "linuxamd64" in result.output

    def test_nothing_to_build(self):
        result = self._invoke("--osarch", "plan9/arm64")
        assert result.exit_code == 0
        assert "Nothing to build" in result.output

    def test_json(self):
        result = self._invoke("--toolchain", "go1.16", "--os", "darwin", "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["release"] == "1.16"
        assert data["filters"] == {"os": "darwin", "arch": "", "osarch": ""}
        assert data["platforms"] == ["darwin/amd64", "darwin/arm", "darwin/arm64"]

    def test_config_defaults(self, write_config):
        config = write_config("""\
            toolchain: go1.10
            os: linux
        """)
        result = self._invoke("--arch", "arm", config=str(config))
        assert result.exit_code == 0
        assert result.output.splitlines() == ["linux/arm"]

    def test_flags_extend_config(self, write_config):
        config = write_config("""\
            toolchain: go1.16
            os: linux
        """)
        result = self._invoke("--os", "Linux darwin", "--arch", "arm64", "--json", config=str(config))
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["filters"]["os"] == "linux darwin"
        assert data["filters"]["arch"] == "arm64"
        assert data["platforms"] == ["darwin/arm64", "linux/arm64"]

    def test_invalid_config(self, write_config):
        config = write_config("- not a mapping\n")
        result = self._invoke(config=str(config))
        assert result.exit_code == 1
        assert "mapping" in result.output


class TestCatalogCommand:
    def test_json(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["catalog", "--toolchain", "go1.5", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["release"] == "1.5"
        darwin_arm64 = [p for p in data["platforms"] if p["os"] == "darwin" and p["arch"] == "arm64"]
        assert darwin_arm64 == [{"os": "darwin", "arch": "arm64", "default": False}]

    def test_defaults_only(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["catalog", "-t", "go1.4", "--defaults-only", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["platforms"]
        assert all(p["default"] for p in data["platforms"])

    def test_text(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["catalog", "--toolchain", "go1.16"])
        assert result.exit_code == 0
        assert "go1.16" in result.output
        assert "darwin/arm64 *" in result.output


class TestVersionsCommand:
    def test_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["versions", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0]["release"] == "1.0"
        assert data[-1]["release"] == "1.23"
        assert data[-1]["versions"] == ">= 1.23"

    def test_text(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["versions"])
        assert result.exit_code == 0
        assert "go1.16" in result.output
