"""Logging utilities for the application."""

from __future__ import annotations
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
import traceback
from typing import Dict, List, Optional

from .config.settings import settings

LOG_TYPES = ("system", "api", "error")
_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def logs_dir() -> Path:
    """Get the logs directory path."""
    log_dir = Path(settings.logs_dir or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _rotating_handler(path: Path, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
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
            cls._instance.capture_module_loggers()
        return cls._instance

    def __init__(self, log_dir: Optional[Path] = None):
        """Initialize loggers."""
        self.log_dir = Path(log_dir) if log_dir else logs_dir()
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.loggers: Dict[str, logging.Logger] = {}
        self._setup_loggers()

    def _channel(self, name: str, level: int, fmt: str) -> logging.Logger:
        # Keyed by directory so a second manager never writes into the first one's files
        logger = logging.getLogger(f"pokedex.{name}.{self.log_dir.resolve()}")
        logger.propagate = False  # Don't propagate to root logger
        logger.setLevel(level)
        if not logger.handlers:
            logger.addHandler(_rotating_handler(self.log_dir / f"{name}.log", fmt))
        return logger

    def capture_module_loggers(self):
        """Route module-level loggers (logging.getLogger(__name__)) into system.log.

        Reuses the system channel's handler so only one handler ever rotates the file.
        """
        package_logger = logging.getLogger("pokedex")
        if not package_logger.handlers:  # Only add handler if none exists
            package_logger.addHandler(self.loggers["system"].handlers[0])
            package_logger.setLevel(logging.INFO)

    def close(self):
        """Close and detach this manager's file handlers."""
        package_logger = logging.getLogger("pokedex")
        for logger in self.loggers.values():
            for handler in list(logger.handlers):
                if handler in package_logger.handlers:
                    package_logger.removeHandler(handler)
                logger.removeHandler(handler)
                handler.close()

    def _setup_loggers(self):
        """Set up the different loggers."""
        plain = '%(asctime)s - %(levelname)s - %(message)s'
        self.loggers["system"] = self._channel("system", logging.INFO, plain)
        self.loggers["api"] = self._channel("api", logging.INFO, plain)
        self.loggers["error"] = self._channel(
            "error",
            logging.ERROR,
            '%(asctime)s - %(levelname)s - %(message)s\n%(pathname)s:%(lineno)d',
        )

    def _log(self, channel: str, message: str, level: str) -> None:
        logger = self.loggers[channel]
        if level == "INFO":
            logger.info(message)
        elif level == "WARNING":
            logger.warning(message)
        elif level == "ERROR":
            logger.error(message)
            # Also log to error logger
            self.loggers["error"].error(f"{channel.upper()}: {message}")
        elif level == "DEBUG":
            logger.debug(message)

    def log_system(self, message: str, level: str = "INFO"):
        """Log a system message."""
        self._log("system", message, level)

    def log_api(self, message: str, level: str = "INFO"):
        """Log an upstream API related message."""
        self._log("api", message, level)

    def log_error(self, message: str, exception: Optional[BaseException] = None):
        """Log an error with optional exception details."""
        if exception is not None:
            tb = "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))
            self.loggers["error"].error(f"{message}\n{tb}")
        else:
            self.loggers["error"].error(message)

    def read_logs(self, log_type: str, max_lines: int = 1000, search_text: str = None, level_filter: str = None) -> List[Dict]:
        """Read logs from the specified log file with optional filtering."""
        log_file = self.log_dir / f"{log_type}.log"

        if not log_file.exists():
            return []

        try:
            with open(log_file, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except OSError as e:
            return [{
                "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
                "level": "ERROR",
                "message": f"Failed to read log file: {e}"
            }]

        # Get the last N lines (most recent logs first)
        lines = lines[-max_lines:]

        # Expected format: '2025-09-10 12:34:56,789 - INFO - message'
        records: List[Dict] = []
        for line in lines:
            parts = line.split(" - ", 3)
            if len(parts) >= 3 and parts[1].strip() in _LEVELS:
                records.append({
                    "timestamp": parts[0].strip(),
                    "level": parts[1].strip(),
                    "message": parts[-1].strip(),
                })
            elif records:
                # continuation line (tracebacks, pathname footer)
                records[-1]["message"] += "\n" + line.rstrip("\n")

        processed_logs = []
        for rec in records:
            if search_text and search_text.lower() not in rec["message"].lower():
                continue
            if level_filter and rec["level"] != level_filter:
                continue
            processed_logs.append(rec)

        # Reverse to show newest at the top
        return list(reversed(processed_logs))


def get_log_manager() -> LogManager:
    """Get the log manager instance."""
    return LogManager.get_instance()


# Helper functions for easy logging
def log_system(message: str, level: str = "INFO"):
    """Log a system message."""
    get_log_manager().log_system(message, level)


def log_api(message: str, level: str = "INFO"):
    """Log an upstream API related message."""
    get_log_manager().log_api(message, level)


def log_error(message: str, exception: Optional[BaseException] = None):
    """Log an error with optional exception details."""
    get_log_manager().log_error(message, exception)


def read_logs(log_type: str, max_lines: int = 1000, search_text: str = None, level_filter: str = None) -> List[Dict]:
    """Read logs from the specified log file with optional filtering."""
    return get_log_manager().read_logs(log_type, max_lines, search_text, level_filter)
