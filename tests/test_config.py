"""Tests for settings and logging setup."""

import pytest
import structlog
from pydantic import ValidationError

from py_terrain.config import Settings
from py_terrain.utils.logging import configure_logging


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.terrain_width == 32
        assert settings.terrain_length == 32
        assert settings.height_scale == 256
        assert settings.noise_seed is None
        assert settings.noise_octaves == 2
        assert settings.noise_persistence == 0.5
        assert settings.noise_zoom == 6.0

    def test_settings_config(self):
        assert Settings.model_config["env_file"] == ".env"
        assert Settings.model_config["extra"] == "ignore"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("TERRAIN_WIDTH", "10")
        monkeypatch.setenv("NOISE_SEED", "99")
        settings = Settings()
        assert settings.terrain_width == 10
        assert settings.noise_seed == 99

    @pytest.mark.parametrize("field,value", [
        ("terrain_width", 0),
        ("terrain_length", -3),
        ("height_scale", 0),
        ("noise_octaves", 0),
        ("log_format", "xml"),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            Settings(**{field: value})


class TestLogging:

    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        yield
        structlog.reset_defaults()

    @pytest.mark.parametrize("fmt", ["json", "plain"])
    def test_configure(self, fmt):
        configure_logging("DEBUG", fmt)
        structlog.get_logger("test").info("configured", fmt=fmt)

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            configure_logging("INFO", "xml")
