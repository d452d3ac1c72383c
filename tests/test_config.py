"""
Tests for schema configuration.
"""

import pytest

from glideschema import ConfigurationError, SchemaConfig, load_config


class TestSchemaConfig:
    """Test SchemaConfig defaults and validation."""

    def test_defaults(self):
        """Test default decimal settings."""
        config = SchemaConfig()
        assert config.decimal_precision == 38
        assert config.decimal_scale == 9

    def test_scale_equal_to_precision(self):
        """Test that scale may equal precision."""
        config = SchemaConfig(decimal_precision=5, decimal_scale=5)
        assert config.decimal_scale == 5

    @pytest.mark.parametrize(
        "precision, scale",
        [(0, 0), (10, -1), (4, 5)],
    )
    def test_invalid_settings(self, precision, scale):
        """Test rejection of impossible decimal settings."""
        with pytest.raises(ConfigurationError):
            SchemaConfig(decimal_precision=precision, decimal_scale=scale)

    @pytest.mark.parametrize(
        "precision, scale",
        [("38", 9), (38, 9.0), (True, 0), (38, False)],
    )
    def test_non_integer_settings(self, precision, scale):
        """Test rejection of settings that are not plain integers."""
        with pytest.raises(ConfigurationError, match="must be an integer"):
            SchemaConfig(decimal_precision=precision, decimal_scale=scale)


class TestLoadConfig:
    """Test loading settings from TOML."""

    def test_load(self, tmp_path):
        """Test loading both decimal settings."""
        path = tmp_path / "glideschema.toml"
        path.write_text("[decimal]\nprecision = 18\nscale = 2\n")
        assert load_config(path) == SchemaConfig(decimal_precision=18, decimal_scale=2)

    def test_partial(self, tmp_path):
        """Test that missing keys keep their defaults."""
        path = tmp_path / "glideschema.toml"
        path.write_text("[decimal]\nscale = 4\n")
        config = load_config(str(path))
        assert config.decimal_precision == 38
        assert config.decimal_scale == 4

    def test_empty_file(self, tmp_path):
        """Test that an empty file gives the defaults."""
        path = tmp_path / "glideschema.toml"
        path.write_text("")
        assert load_config(path) == SchemaConfig()
