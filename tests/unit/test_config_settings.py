"""Tests for fnkit configuration."""

from pathlib import Path

from fnkit.config import get_config, settings
from fnkit.config.settings import Settings


class TestSettings:
    """Pydantic settings groups and environment loading."""

    def test_defaults(self):
        config = Settings()

        assert config.logging.console_level == "WARNING"
        assert config.logging.log_file is None
        assert config.sequencing.strict_settlement is False
        assert config.sequencing.strict_advance is False

    def test_nested_environment_variables(self, monkeypatch):
        monkeypatch.setenv("FNKIT_SEQUENCING__STRICT_ADVANCE", "true")
        monkeypatch.setenv("FNKIT_LOGGING__LOG_FILE", "logs/fnkit.log")

        config = Settings()

        assert config.sequencing.strict_advance is True
        assert config.logging.log_file == Path("logs/fnkit.log")

    def test_flat_keys_map_onto_groups(self):
        config = Settings(strict_settlement=True, console_log_level="DEBUG")

        assert config.sequencing.strict_settlement is True
        assert config.logging.console_level == "DEBUG"

    def test_flat_keys_merge_with_nested_values(self):
        config = Settings(sequencing={"strict_advance": True}, strict_settlement=True)

        assert config.sequencing.strict_advance is True
        assert config.sequencing.strict_settlement is True


class TestGetConfig:
    """Flat key access."""

    def test_known_key(self, monkeypatch):
        monkeypatch.setattr(settings.sequencing, "strict_settlement", True)

        assert get_config("STRICT_SETTLEMENT") is True

    def test_unknown_key_returns_default(self):
        assert get_config("NO_SUCH_KEY", 7) == 7
        assert get_config("NO_SUCH_KEY") is None
