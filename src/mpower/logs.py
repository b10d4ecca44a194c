"""Logging utilities for the command line tools.

The library modules only use module-level loggers; handlers are installed
here, on first use of the log manager.
"""

from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import traceback
from typing import Optional

from .config.settings import settings


def logs_dir(base: Optional[str] = None) -> Path:
    """Get the logs directory path."""
    log_dir = Path(base or settings.log_dir or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _rotating(path: Path, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


class LogManager:
    """Manager for application logs."""
    _instance = None

    @classmethod
    def get_instance(cls) -> LogManager:
        """Get or create the singleton instance."""
        if cls._instance is None:
            cls._instance = LogManager()
        return cls._instance

    def __init__(self, base_dir: Optional[str] = None):
        self.loggers = {}
        self._setup_loggers(logs_dir(base_dir))

    def _setup_loggers(self, log_dir: Path):
        # Library loggers (mpower.*) go to system.log
        lib_logger = logging.getLogger("mpower")
        if not lib_logger.handlers:
            lib_logger.addHandler(
                _rotating(log_dir / "system.log", '%(asctime)s - %(levelname)s - %(name)s - %(message)s')
            )
            lib_logger.setLevel(logging.INFO)

        for name, filename, level in (
            ("system", "system.log", logging.INFO),
            ("gateway", "gateway.log", logging.INFO),
        ):
            lg = logging.getLogger(f"mpower.cli.{name}")
            lg.propagate = False  # Don't duplicate into the library handler
            lg.setLevel(level)
            if not lg.handlers:
                lg.addHandler(_rotating(log_dir / filename, '%(asctime)s - %(levelname)s - %(message)s'))
            self.loggers[name] = lg

        error_logger = logging.getLogger("mpower.cli.error")
        error_logger.propagate = False
        error_logger.setLevel(logging.ERROR)
        if not error_logger.handlers:
            error_logger.addHandler(
                _rotating(log_dir / "error.log", '%(asctime)s - %(levelname)s - %(message)s\n%(pathname)s:%(lineno)d')
            )
        self.loggers["error"] = error_logger

    def _log(self, name: str, message: str, level: str):
        lg = self.loggers[name]
        lg.log(logging.getLevelName(level), message)
        if level == "ERROR":
            # Also log to error logger
            self.loggers["error"].error(f"{name.upper()}: {message}")

    def log_system(self, message: str, level: str = "INFO"):
        """Log a system message."""
        self._log("system", message, level)

    def log_gateway(self, message: str, level: str = "INFO"):
        """Log a payload/gateway related message."""
        self._log("gateway", message, level)

    def log_error(self, message: str, exception=None):
        """Log an error with optional exception details."""
        if exception:
            tb = "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))
            self.loggers["error"].error(f"{message}\n{tb}")
        else:
            self.loggers["error"].error(message)


def get_log_manager() -> LogManager:
    """Get the log manager instance."""
    return LogManager.get_instance()


def log_system(message: str, level: str = "INFO"):
    get_log_manager().log_system(message, level)


def log_gateway(message: str, level: str = "INFO"):
    get_log_manager().log_gateway(message, level)


def log_error(message: str, exception=None):
    get_log_manager().log_error(message, exception)
