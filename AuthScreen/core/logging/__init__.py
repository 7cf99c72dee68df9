"""
Logging setup for the AuthScreen application.

Provides:
- Standard console/file formats
- Colored console output
- Rotating log files, with errors duplicated into their own file
- Per-environment presets selected by AUTHSCREEN_ENV

Usage:
    from AuthScreen.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Login screen ready")

Configuration:
    from AuthScreen.core.logging import configure_logging, LogConfig

    configure_logging(LogConfig(level="DEBUG", file_output=False))
"""

import logging
import logging.handlers
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass
class LogConfig:
    """
    Configuration for the logging system.

    Attributes:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        console_output: Whether to output to console
        file_output: Whether to output to file
        max_bytes: Maximum size of log file before rotation (bytes)
        backup_count: Number of backup files to keep
        format_string: Custom format string for log messages
        date_format: Custom date format string
        component_levels: Dict mapping logger names to log levels
    """
    level: str = "INFO"
    log_dir: str = "./logs"
    console_output: bool = True
    file_output: bool = True
    max_bytes: int = 5 * 1024 * 1024  # 5MB
    backup_count: int = 3
    format_string: Optional[str] = None
    date_format: str = "%Y-%m-%d %H:%M:%S"
    component_levels: Dict[str, str] = field(default_factory=dict)


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds color to console output.
    """

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m'
    }

    def __init__(self, fmt: str, datefmt: str = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors or record.levelname not in self.COLORS:
            return super().format(record)
        # Color a copy of the level name so file handlers see the plain record
        original = record.levelname
        record.levelname = f"{self.COLORS[original]}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def get_default_format() -> str:
    """Get the default log format string."""
    return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_detailed_format() -> str:
    """Get a detailed log format string with thread and call-site context."""
    return (
        "%(asctime)s - %(name)s - %(levelname)s - [%(threadName)s] "
        "[%(filename)s:%(lineno)d - %(funcName)s] - %(message)s"
    )


class LoggingManager:
    """
    Centralized logging manager for the application.

    Owns the handlers installed on the root logger so they can be replaced
    when the configuration changes.
    """

    _instance: Optional['LoggingManager'] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._config: Optional[LogConfig] = None
        self._handlers: List[logging.Handler] = []
        self._initialized = True

    @property
    def config(self) -> Optional[LogConfig]:
        return self._config

    def configure(self, config: LogConfig) -> None:
        """
        Configure the logging system.

        Args:
            config: Logging configuration
        """
        self._config = config
        level = getattr(logging, config.level.upper())

        if config.file_output:
            Path(config.log_dir).mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        for handler in self._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self._handlers = []

        if config.console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            fmt = config.format_string or get_default_format()
            console_handler.setFormatter(ColoredFormatter(fmt, config.date_format))
            self.add_handler(console_handler)

        if config.file_output:
            fmt = config.format_string or get_detailed_format()
            formatter = logging.Formatter(fmt, config.date_format)

            file_handler = logging.handlers.RotatingFileHandler(
                os.path.join(config.log_dir, "authscreen.log"),
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.add_handler(file_handler)

            error_handler = logging.handlers.RotatingFileHandler(
                os.path.join(config.log_dir, "authscreen_errors.log"),
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(formatter)
            self.add_handler(error_handler)

        for component, component_level in config.component_levels.items():
            logging.getLogger(component).setLevel(getattr(logging, component_level.upper()))

        logging.getLogger(__name__).info("Logging system configured with level: %s", config.level)

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get a logger instance.

        Args:
            name: Logger name (typically __name__)

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)

    def add_handler(self, handler: logging.Handler) -> None:
        """Attach a handler to the root logger and track it."""
        logging.getLogger().addHandler(handler)
        self._handlers.append(handler)


# Global logging manager instance
_logging_manager = LoggingManager()


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically ``get_logger(__name__)``)."""
    return _logging_manager.get_logger(name)


def configure_logging(config: LogConfig) -> None:
    """Configure the logging system."""
    _logging_manager.configure(config)


def get_logging_manager() -> LoggingManager:
    """Get the global logging manager instance."""
    return _logging_manager


def create_development_config() -> LogConfig:
    """Verbose console and file logging under ./logs/dev."""
    return LogConfig(
        level="DEBUG",
        log_dir="./logs/dev",
        format_string=get_detailed_format(),
        component_levels={
            "aiohttp": "WARNING",
            "asyncio": "WARNING",
        }
    )


def create_production_config() -> LogConfig:
    """File-only logging with larger rotation limits."""
    return LogConfig(
        level="INFO",
        log_dir="./logs/prod",
        console_output=False,
        max_bytes=20 * 1024 * 1024,  # 20MB
        backup_count=10,
        format_string=get_detailed_format(),
        component_levels={
            "aiohttp": "ERROR",
            "asyncio": "ERROR",
        }
    )


def create_testing_config() -> LogConfig:
    """Console-only logging for test runs."""
    return LogConfig(
        level="DEBUG",
        console_output=True,
        file_output=False,
        format_string="%(levelname)s - %(name)s - %(message)s",
        component_levels={
            "asyncio": "ERROR",
        }
    )


def auto_configure(env: Optional[str] = None) -> str:
    """
    Configure logging from an environment name.

    Args:
        env: development, production or testing. Read from AUTHSCREEN_ENV when
             None; unknown names fall back to development.

    Returns:
        The environment name that was applied
    """
    if env is None:
        env = os.environ.get("AUTHSCREEN_ENV", "development")
    env = env.lower()

    presets = {
        "development": create_development_config,
        "dev": create_development_config,
        "production": create_production_config,
        "prod": create_production_config,
        "testing": create_testing_config,
        "test": create_testing_config,
    }

    factory = presets.get(env, create_development_config)
    configure_logging(factory())

    get_logger(__name__).info("Logging auto-configured for environment: %s", env)
    return env


__all__ = [
    'LogConfig',
    'LoggingManager',
    'ColoredFormatter',
    'get_logger',
    'configure_logging',
    'get_logging_manager',
    'create_development_config',
    'create_production_config',
    'create_testing_config',
    'auto_configure',
    'get_default_format',
    'get_detailed_format',
]
