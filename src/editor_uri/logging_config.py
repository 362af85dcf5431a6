"""Logging configuration for editor_uri.

The library only emits DEBUG records under the "editor_uri" namespace and
never configures handlers itself. Applications that want those records call
setup_logging() explicitly: JSON lines to stderr, human-readable lines to a
rotating file, or both.

IMPORTANT: No logging setup at import time.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

_EXTRA_FIELDS = ("uri", "scheme", "error_code")


class JsonFormatter(logging.Formatter):
    """Format log records as JSON lines for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as a JSON line.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log line
        """
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                log_obj[key] = getattr(record, key)

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)


def setup_logging(config: "Config") -> None:
    """
    Configure the editor_uri logger based on config.log_mode.

    Args:
        config: Configuration instance with logging settings

    Logging Modes:
        - "stderr": JSON formatter to stderr
        - "file": Human-readable format to config.log_file
        - "both": Both outputs

    Handlers are attached to the "editor_uri" logger only, so the host
    application's root logger is left alone. Calling this again replaces
    the previously installed handlers.
    """
    package_logger = logging.getLogger("editor_uri")
    package_logger.setLevel(config.log_level)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    if config.log_mode in ("stderr", "both"):
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(JsonFormatter())
        package_logger.addHandler(stderr_handler)

    if config.log_mode in ("file", "both") and config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        package_logger.addHandler(file_handler)

    package_logger.debug(
        "Logging initialized",
        extra={"log_mode": config.log_mode, "log_level": config.log_level},
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the editor_uri namespace.

    Args:
        name: Logger name (e.g., "parser")

    Returns:
        Logger instance for "editor_uri.<name>"

    Example:
        >>> get_logger("parser").name
        'editor_uri.parser'
    """
    return logging.getLogger(f"editor_uri.{name}")
