"""Tests for DisplayConfig and load_config()."""

import dataclasses

import pytest

from iterbar.config import DEFAULT_BAR_WIDTH, DEFAULT_MIN_INTERVAL, DisplayConfig, load_config
from iterbar.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point HOME and the working directory at empty temp dirs."""
    home = tmp_path / "home"
    home.mkdir()
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for key in ("ITERBAR_PREFIX", "ITERBAR_BAR_WIDTH", "ITERBAR_MIN_INTERVAL"):
        monkeypatch.delenv(key, raising=False)
    return home, project


class TestDisplayConfig:
    """Tests for the dataclass itself."""

    def test_defaults(self):
        config = DisplayConfig()
        assert config.prefix == ""
        assert config.bar_width == DEFAULT_BAR_WIDTH == 30
        assert config.min_interval == DEFAULT_MIN_INTERVAL == 0.15

    def test_degenerate_values_allowed(self):
        config = DisplayConfig(bar_width=0, min_interval=0)
        assert config.bar_width == 0

    def test_wrong_types_rejected(self):
        with pytest.raises(InvalidConfigError, match="bar_width"):
            DisplayConfig(bar_width="3")
        with pytest.raises(InvalidConfigError):
            DisplayConfig(bar_width=True)
        with pytest.raises(InvalidConfigError, match="min_interval"):
            DisplayConfig(min_interval="fast")
        with pytest.raises(InvalidConfigError, match="prefix"):
            DisplayConfig(prefix=3)

    def test_frozen(self):
        config = DisplayConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.bar_width = 10


class TestLoadConfig:
    """Tests for merging config sources."""

    def test_no_sources_gives_defaults(self):
        assert load_config() == DisplayConfig()

    def test_project_file_table(self, isolated_config):
        _, project = isolated_config
        (project / "iterbar.toml").write_text("[iterbar]\nbar_width = 12\n")
        assert load_config().bar_width == 12

    def test_top_level_keys(self, isolated_config):
        _, project = isolated_config
        (project / "iterbar.toml").write_text('prefix = "job "\n')
        assert load_config().prefix == "job "

    def test_project_overrides_global(self, isolated_config):
        home, project = isolated_config
        (home / ".iterbar.toml").write_text("bar_width = 5\nmin_interval = 1.0\n")
        (project / "iterbar.toml").write_text("bar_width = 7\n")
        config = load_config()
        assert config.bar_width == 7
        assert config.min_interval == 1.0

    def test_explicit_file_overrides_project(self, isolated_config, tmp_path):
        _, project = isolated_config
        (project / "iterbar.toml").write_text("bar_width = 7\n")
        explicit = tmp_path / "custom.toml"
        explicit.write_text("bar_width = 9\n")
        assert load_config(config_file=explicit).bar_width == 9

    def test_env_overrides_files(self, isolated_config, monkeypatch):
        _, project = isolated_config
        (project / "iterbar.toml").write_text("min_interval = 1.0\n")
        monkeypatch.setenv("ITERBAR_MIN_INTERVAL", "0.5")
        monkeypatch.setenv("ITERBAR_BAR_WIDTH", "40")
        config = load_config()
        assert config.min_interval == 0.5
        assert config.bar_width == 40

    def test_overrides_win_and_none_is_ignored(self, monkeypatch):
        monkeypatch.setenv("ITERBAR_PREFIX", "env ")
        config = load_config(prefix="cli ", bar_width=None)
        assert config.prefix == "cli "
        assert config.bar_width == DEFAULT_BAR_WIDTH

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("ITERBAR_BAR_WIDTH", "wide")
        with pytest.raises(InvalidConfigError, match="ITERBAR_BAR_WIDTH"):
            load_config()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=tmp_path / "missing.toml")

    def test_invalid_toml(self, isolated_config):
        _, project = isolated_config
        (project / "iterbar.toml").write_text("bar_width = = 3\n")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config()

    def test_unknown_key(self, isolated_config):
        _, project = isolated_config
        (project / "iterbar.toml").write_text("colour = 'red'\n")
        with pytest.raises(InvalidConfigError, match="colour"):
            load_config()

    def test_wrong_type_in_file(self, isolated_config):
        _, project = isolated_config
        (project / "iterbar.toml").write_text('bar_width = "wide"\n')
        with pytest.raises(InvalidConfigError):
            load_config()
