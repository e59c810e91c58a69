"""
CharacterInformation Logging Configuration

Centralized loguru setup shared by the library and the console tool.
Console output goes to stderr so it never mixes with lookup results printed
on stdout; full DEBUG logs and an ERROR-only log rotate under the app
directory.
"""

import os
import sys
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger as _logger

# Remove default handler
_logger.remove()

APP_NAME = 'CharacterInformation'
DEFAULT_LOGGER_NAME = 'characterinformation'


class LoggerManager:
    """
    Manages the loguru handlers for the library and the console tool.
    """

    # Component to file patterns mapping for automatic context tagging
    COMPONENT_PATTERNS = {
        "LOAD": ["dictionary.py"],
        "CONFIG": ["configuration.py"],
        "CLI": ["cli.py"],
    }

    def __init__(self):
        self._initialized = False
        self._log_dir: Optional[Path] = None
        self._handlers = {}

    def _get_app_directory(self) -> Path:
        """Get the application config directory (platform-aware)."""
        if sys.platform == 'win32':
            appdata_dir = os.getenv('APPDATA')
        else:
            appdata_dir = os.path.expanduser('~/.config')

        config_dir = Path(appdata_dir) / APP_NAME
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def _get_log_directory(self) -> Path:
        if self._log_dir is None:
            self._log_dir = self._get_app_directory() / 'logs'
            self._log_dir.mkdir(parents=True, exist_ok=True)
        return self._log_dir

    def _detect_component_tag(self, record) -> str:
        """
        Detect the component tag based on the file path in the log record.
        Returns fixed-width component tag for consistent formatting.
        """
        file_path = record.get("file")
        file_name = getattr(file_path, "path", None) or str(file_path or "")
        file_name = file_name.replace("\\", "/")

        for component, patterns in self.COMPONENT_PATTERNS.items():
            for pattern in patterns:
                if file_name.endswith(pattern):
                    return component.ljust(8)

        return "MAIN".ljust(8)

    def _tag(self, record) -> bool:
        record["extra"]["component_tag"] = self._detect_component_tag(record)
        return True

    def _add_console_handler(self, logger_name: str, level: str):
        handler_id = _logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <dim>{extra[component_tag]}</dim> | <level>{message}</level>",
            level=level,
            colorize=True,
            backtrace=False,
            diagnose=False,
            filter=self._tag,
        )
        self._handlers[f"{logger_name}_console"] = handler_id
        return handler_id

    def _add_file_handler(self, logger_name: str, level: str):
        """Add a rotating file handler for the specified logger."""
        log_file = self._get_log_directory() / f"{logger_name}.log"

        handler_id = _logger.add(
            str(log_file),
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[component_tag]}{name}:{function}:{line} | {message}",
            level=level,
            rotation="5 MB",
            retention="7 days",
            compression="zip",
            encoding="utf-8",
            backtrace=True,
            diagnose=True,
            enqueue=True,
            filter=self._tag,
        )
        self._handlers[f"{logger_name}_file"] = handler_id
        return handler_id

    def _add_error_handler(self):
        """Add a dedicated error log file for ERROR and CRITICAL messages."""
        error_log = self._get_log_directory() / "error.log"

        def format_with_component(record):
            self._tag(record)
            return record["level"].no >= 40

        handler_id = _logger.add(
            str(error_log),
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[component_tag]}{name}:{function}:{line} - {message}\n{exception}",
            level="ERROR",
            rotation="5 MB",
            retention="14 days",
            compression="zip",
            encoding="utf-8",
            backtrace=True,
            diagnose=True,
            enqueue=True,
            filter=format_with_component,
        )
        self._handlers["error_file"] = handler_id
        return handler_id

    def initialize(self, logger_name: Optional[str] = None, console_level: str = "INFO", file_level: str = "DEBUG"):
        """
        Initialize the logging system with handlers.

        Args:
            logger_name: Name used for the log file (defaults to characterinformation)
            console_level: Minimum level for console output (INFO, DEBUG, etc.)
            file_level: Minimum level for file output
        """
        if self._initialized:
            return

        logger_name = logger_name or DEFAULT_LOGGER_NAME

        self._add_console_handler(logger_name, console_level)
        self._add_file_handler(logger_name, file_level)
        self._add_error_handler()

        _logger.configure(extra={"logger_name": logger_name, "component_tag": "MAIN".ljust(8)})

        self._logger_name = logger_name
        self._initialized = True
        _logger.debug(f"Logging initialized for {logger_name}, log directory: {self._get_log_directory()}")

    def cleanup_old_logs(self, days: int = 7):
        """
        Clean up log files older than specified days.

        Args:
            days: Number of days to retain logs
        """
        import time

        log_dir = self._get_log_directory()
        cutoff = time.time() - (days * 86400)

        if not log_dir.exists():
            return

        cleaned_count = 0
        for log_file in log_dir.iterdir():
            if log_file.is_file():
                try:
                    if log_file.stat().st_mtime < cutoff:
                        log_file.unlink()
                        cleaned_count += 1
                except OSError as e:
                    _logger.warning(f"Error deleting log file {log_file}: {e}")

        if cleaned_count > 0:
            _logger.info(f"Cleaned up {cleaned_count} old log files")

    def get_logger(self) -> "Logger":
        if not self._initialized:
            self.initialize()
        return _logger

    def set_level(self, level: str, file_level: Optional[str] = None):
        """Re-create the handlers, console at ``level`` and files at ``file_level`` (defaults to ``level``)."""
        file_level = file_level or level
        # Unknown level names raise ValueError here, before the current handlers are dropped
        _logger.level(level)
        _logger.level(file_level)
        logger_name = getattr(self, "_logger_name", DEFAULT_LOGGER_NAME)
        for key in list(self._handlers.keys()):
            _logger.remove(self._handlers[key])
        self._handlers.clear()
        self._initialized = False
        self.initialize(logger_name=logger_name, console_level=level, file_level=file_level)


# Global logger manager instance
_manager = LoggerManager()


def get_logger(name: Optional[str] = None) -> "Logger":
    if not _manager._initialized:
        _manager.initialize(logger_name=name)
    return _manager.get_logger()


def set_level(level: str, file_level: Optional[str] = None):
    _manager.set_level(level, file_level)


def cleanup_old_logs(days: int = 7):
    """Clean up old log files (convenience function)."""
    _manager.cleanup_old_logs(days=days)


# Export the logger directly for convenience
logger = get_logger()

__all__ = [
    'logger',
    'get_logger',
    'set_level',
    'cleanup_old_logs',
    'LoggerManager',
]
