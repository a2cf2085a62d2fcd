"""
Tests for configuration loading — crossplat.yml parsing and validation.
"""

from pathlib import Path

import pytest

from crossplat.core.config.loader import (
    BuildConfig,
    ConfigError,
    find_config_file,
    load_config,
)


class TestFindConfigFile:
    def test_finds_in_start_dir(self, write_config, tmp_path: Path):
        path = write_config("toolchain: go1.21\n")
        assert find_config_file(tmp_path) == path.resolve()

    def test_walks_up(self, write_config, tmp_path: Path):
        path = write_config("toolchain: go1.21\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == path.resolve()


class TestLoadConfig:
    def test_full_config(self, write_config):
        path = write_config("""\
            toolchain: go1.16
            os: linux darwin
            arch: "!386"
            osarch:
              - windows/amd64
              - "!linux/arm"
        """)
        config = load_config(path)
        assert config.toolchain == "go1.16"
        assert config.os == ["linux", "darwin"]
        assert config.arch == ["!386"]
        assert config.osarch == ["windows/amd64", "!linux/arm"]

    def test_to_request(self, write_config):
        path = write_config("""\
            os: [Linux, linux, darwin]
            osarch: windows/amd64
        """)
        request = load_config(path).to_request()
        assert request.os == ["linux", "darwin"]
        assert request.osarch == ["windows/amd64"]

    def test_numeric_arch_scalar(self, write_config):
        config = load_config(write_config("arch: 386\n"))
        assert config.arch == ["386"]
        assert config.to_request().arch == ["386"]

    def test_numeric_arch_list(self, write_config):
        config = load_config(write_config("arch: [386, amd64]\n"))
        assert config.arch == ["386", "amd64"]

    def test_empty_file(self, write_config):
        assert load_config(write_config("")) == BuildConfig()

    def test_null_lists(self, write_config):
        config = load_config(write_config("os:\narch:\n"))
        assert config.os == [] and config.arch == []

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yml")

    def test_no_file_found_is_empty(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config() == BuildConfig()

    def test_invalid_yaml(self, write_config):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(write_config("os: [linux\n"))

    def test_not_a_mapping(self, write_config):
        with pytest.raises(ConfigError, match="mapping"):
            load_config(write_config("- linux\n- darwin\n"))

    def test_wrong_type(self, write_config):
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(write_config("os: {linux: true}\n"))

    def test_bad_pair_token(self, write_config):
        with pytest.raises(ConfigError, match="linuxamd64"):
            load_config(write_config("osarch: linuxamd64\n"))
