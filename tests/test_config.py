"""Test configuration settings."""

import logging

import pytest

from farebook.config import Settings, _env_flag, configure_logging, settings
from farebook.exceptions import UnsupportedTransportModeError
from farebook.models import TransportMode


class TestConfiguration:

    def test_fare_parameters(self):
        """Test the fare constants of each mode."""
        assert settings.get_fare_parameters(TransportMode.AIRPLANE).rate == 0.3
        assert settings.get_fare_parameters(TransportMode.AIRPLANE).surcharge == 100.0
        assert settings.get_fare_parameters("train").rate == 0.2
        assert settings.get_fare_parameters("train").surcharge == 50.0
        assert settings.get_fare_parameters("BUS").rate == 0.1
        assert settings.get_fare_parameters("BUS").surcharge == 30.0

    def test_fare_parameters_unknown_mode(self):
        with pytest.raises(UnsupportedTransportModeError):
            Settings.get_fare_parameters("zeppelin")

    def test_env_flag(self, monkeypatch):
        """Test boolean environment parsing."""
        monkeypatch.setenv("FAREBOOK_TEST_FLAG", "yes")
        assert _env_flag("FAREBOOK_TEST_FLAG", False) is True
        monkeypatch.setenv("FAREBOOK_TEST_FLAG", "0")
        assert _env_flag("FAREBOOK_TEST_FLAG", True) is False
        monkeypatch.delenv("FAREBOOK_TEST_FLAG")
        assert _env_flag("FAREBOOK_TEST_FLAG", True) is True

    def test_configure_logging(self, monkeypatch):
        """Test logging setup passes the configured level through."""
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        configure_logging("debug")
        assert calls["level"] == "DEBUG"
        assert calls["format"] == settings.LOG_FORMAT
