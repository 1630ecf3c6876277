"""
Tests for repolocli.config.loader module.

Tests configuration loading including:
- Built-in defaults when no file exists
- YAML file loading and validation
- Default per-user paths
- Error handling
"""

from __future__ import annotations

from pathlib import Path

import pytest

from repolocli.config import (
    DEFAULT_REPOLOGY_URL,
    Configuration,
    default_config_path,
    default_database_path,
    load_config,
)
from repolocli.exceptions import ConfigError


class TestConfigLoading:
    """Tests for basic configuration loading."""

    def test_load_full_config(self, create_yaml_file):
        """Test loading a file that sets every key."""
        path = create_yaml_file(
            "config.yaml",
            {
                "repology_url": "https://mirror.example/api/v1",
                "allowlist": ["debian_unstable"],
                "denylist": ["debian_unstable", "freebsd"],
            },
        )

        config = load_config(path)

        assert config.repology_url == "https://mirror.example/api/v1"
        assert config.allowlist == ("debian_unstable",)
        assert config.denylist == ("debian_unstable", "freebsd")
        assert config.source_path == path

    def test_missing_keys_use_defaults(self, create_yaml_file):
        """Test that omitted keys fall back to built-in values."""
        path = create_yaml_file("config.yaml", {"denylist": ["arch"]})

        config = load_config(path)

        assert config.repology_url == DEFAULT_REPOLOGY_URL
        assert config.allowlist == ()
        assert config.denylist == ("arch",)

    def test_empty_file_uses_defaults(self, tmp_test_dir):
        """Test that an empty YAML document is an empty configuration."""
        path = tmp_test_dir / "config.yaml"
        path.write_text("")

        config = load_config(path)

        assert config.repology_url == DEFAULT_REPOLOGY_URL
        assert config.denylist == ()

    def test_trailing_slash_is_stripped(self, create_yaml_file):
        path = create_yaml_file(
            "config.yaml", {"repology_url": "https://repology.org/api/v1/"}
        )

        assert load_config(path).repology_url == "https://repology.org/api/v1"

    def test_missing_default_file_returns_defaults(self, tmp_test_dir, monkeypatch):
        """Test that no file at the default location is not an error."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_test_dir / "nothing"))

        config = load_config()

        assert config == Configuration()
        assert config.source_path is None

    def test_default_file_is_read(self, tmp_test_dir, monkeypatch):
        """Test that the per-user file is picked up without --config."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_test_dir))
        config_dir = tmp_test_dir / "repolocli"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("denylist:\n  - freebsd\n")

        assert load_config().denylist == ("freebsd",)


class TestConfigErrors:
    """Tests for configuration error handling."""

    def test_missing_explicit_file_raises(self, tmp_test_dir):
        """Test that a missing file given explicitly raises ConfigError."""
        with pytest.raises(ConfigError, match="Configuration file not found"):
            load_config(tmp_test_dir / "nonexistent.yaml")

    def test_invalid_yaml_raises(self, tmp_test_dir):
        path = tmp_test_dir / "config.yaml"
        path.write_text("denylist: [unclosed\n")

        with pytest.raises(ConfigError, match="Error parsing YAML"):
            load_config(path)

    def test_non_mapping_top_level_raises(self, create_yaml_file):
        path = create_yaml_file("config.yaml", ["arch", "freebsd"])

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(path)

    @pytest.mark.parametrize(
        "value",
        ["freebsd", ["freebsd", 3], {"freebsd": True}],
    )
    def test_denylist_must_be_list_of_strings(self, create_yaml_file, value):
        path = create_yaml_file("config.yaml", {"denylist": value})

        with pytest.raises(ConfigError, match="denylist"):
            load_config(path)

    def test_allowlist_must_be_list_of_strings(self, create_yaml_file):
        path = create_yaml_file("config.yaml", {"allowlist": "arch"})

        with pytest.raises(ConfigError, match="allowlist"):
            load_config(path)

    @pytest.mark.parametrize("url", ["", "repology.org/api/v1", "ftp://repology.org", 42])
    def test_invalid_url_raises(self, create_yaml_file, url):
        path = create_yaml_file("config.yaml", {"repology_url": url})

        with pytest.raises(ConfigError, match="repology_url"):
            load_config(path)


class TestDefaultPaths:
    """Tests for the per-user file locations."""

    def test_config_path_honours_xdg(self, monkeypatch, tmp_test_dir):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_test_dir))

        assert default_config_path() == tmp_test_dir / "repolocli" / "config.yaml"

    def test_config_path_falls_back_to_home(self, monkeypatch, tmp_test_dir):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_test_dir)

        assert default_config_path() == (
            tmp_test_dir / ".config" / "repolocli" / "config.yaml"
        )

    def test_database_path_honours_xdg(self, monkeypatch, tmp_test_dir):
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_test_dir))

        assert default_database_path() == tmp_test_dir / "repolocli" / "versions.json"

    def test_database_path_falls_back_to_home(self, monkeypatch, tmp_test_dir):
        monkeypatch.delenv("XDG_DATA_HOME", raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_test_dir)

        assert default_database_path() == (
            tmp_test_dir / ".local" / "share" / "repolocli" / "versions.json"
        )
