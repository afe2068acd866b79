"""Unit tests for TOML configuration loading."""

import pytest

from refreshable_list.tui.core.config import Config
from refreshable_list.tui.utils.errors import ConfigError


class TestConfigLoad:
    """Test Config.load()."""

    def test_missing_file_creates_default(self, tmp_path):
        """Test defaults are returned and written when the file is missing."""
        path = tmp_path / "nested" / "config.toml"

        config = Config.load(path)

        assert config == Config()
        assert path.exists()
        assert Config.load(path) == Config()

    def test_load_values(self, tmp_path):
        """Test values from each section are applied."""
        path = tmp_path / "config.toml"
        path.write_text(
            '[list]\ntitle = "Words"\nitem_count = 5\nseed = 3\n'
            "[ui]\nzebra_stripes = false\n"
            '[logging]\nlevel = "INFO"\n'
        )

        config = Config.load(path)

        assert config.list.title == "Words"
        assert config.list.item_count == 5
        assert config.list.seed == 3
        assert config.list.reuse_key == "REUSE"
        assert config.ui.zebra_stripes is False
        assert config.logging.level == "INFO"

    def test_invalid_toml_falls_back(self, tmp_path):
        """Test unparsable files give defaults."""
        path = tmp_path / "config.toml"
        path.write_text("[list\nitem_count = ")

        assert Config.load(path) == Config()

    def test_unknown_key_falls_back(self, tmp_path):
        """Test unknown keys give defaults."""
        path = tmp_path / "config.toml"
        path.write_text("[list]\ncolour = 1\n")

        assert Config.load(path) == Config()

    def test_negative_count_falls_back(self, tmp_path):
        """Test out-of-range values give defaults."""
        path = tmp_path / "config.toml"
        path.write_text("[list]\nitem_count = -4\n")

        assert Config.load(path).list.item_count == 50

    def test_save_round_trip(self, tmp_path):
        """Test a saved config loads back equal."""
        path = tmp_path / "config.toml"
        config = Config()
        config.list.title = "Saved"
        config.list.item_count = 12
        config.list.seed = 9
        config.ui.notify_on_refresh = False

        config.save(path)

        assert Config.load(path) == config

    def test_save_round_trip_quotes_and_backslashes(self, tmp_path):
        """Test strings needing TOML escapes survive a save/load cycle."""
        path = tmp_path / "config.toml"
        config = Config()
        config.list.title = 'My "strings"'
        config.list.item_count = 12
        config.logging.file = "C:\\logs\\list.log"
        config.logging.rotation = "1 day\tüñï"

        config.save(path)
        loaded = Config.load(path)

        assert loaded.list.title == 'My "strings"'
        assert loaded.list.item_count == 12
        assert loaded.logging.file == "C:\\logs\\list.log"
        assert loaded == config


class TestConfigValidate:
    """Test Config.validate()."""

    def test_defaults_valid(self):
        """Test default config passes validation."""
        Config().validate()

    def test_zero_count_valid(self):
        """Test an empty list is allowed."""
        config = Config()
        config.list.item_count = 0
        config.validate()

    @pytest.mark.parametrize(
        "field,value",
        [("item_count", -1), ("reuse_key", ""), ("min_length", 0), ("min_length", 99)],
    )
    def test_invalid(self, field, value):
        """Test invalid values raise ConfigError."""
        config = Config()
        setattr(config.list, field, value)
        with pytest.raises(ConfigError):
            config.validate()
