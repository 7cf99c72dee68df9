"""
Tests for configuration, logging presets and command line parsing.
"""

import logging

from AuthScreen.config import Config
from AuthScreen.core.logging import (
    ColoredFormatter,
    LogConfig,
    auto_configure,
    configure_logging,
    create_testing_config,
    get_logging_manager,
)
from AuthScreen.start.client import parse


class TestConfig:
    """Tests for the Config class."""

    def test_defaults(self):
        values = Config.get_config()
        assert values["MIN_PASSWORD_LENGTH"] == 6
        assert values["TICK_INTERVAL_MS"] == 10
        assert set(values) >= {"IDENTITY_API_KEY", "MESSAGE_DISPLAY_TIME", "LOCALE", "MAIN_SCREEN_NAME"}


class TestLogging:
    """Tests for the logging manager."""

    def teardown_method(self):
        configure_logging(create_testing_config())

    def test_auto_configure_testing(self):
        assert auto_configure("testing") == "testing"
        config = get_logging_manager().config
        assert config.file_output is False
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_env_falls_back_to_development(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert auto_configure("staging") == "staging"
        assert get_logging_manager().config.log_dir == "./logs/dev"
        assert (tmp_path / "logs" / "dev").is_dir()

    def test_file_handlers_write_logs(self, tmp_path):
        configure_logging(LogConfig(level="INFO", log_dir=str(tmp_path), console_output=False))
        logging.getLogger("AuthScreen.test").error("dispatcher action failed")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "dispatcher action failed" in (tmp_path / "authscreen.log").read_text(encoding="utf-8")
        assert "dispatcher action failed" in (tmp_path / "authscreen_errors.log").read_text(encoding="utf-8")

    def test_colored_formatter_leaves_record_untouched(self):
        formatter = ColoredFormatter("%(levelname)s %(message)s")
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
        formatter.format(record)
        assert record.levelname == "WARNING"


class TestCommandLine:
    """Tests for argument parsing."""

    def test_parse_overrides(self):
        args = parse(["--api-key", "k", "--locale", "en", "--message-time", "1.5"])
        assert args.api_key == "k"
        assert args.locale == "en"
        assert args.message_time == 1.5
        assert args.log_env is None
