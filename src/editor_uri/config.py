"""Runtime configuration management.

Environment Variables:
    EDITOR_URI_LOG_LEVEL: Logging level (default: WARNING)
    EDITOR_URI_LOG_MODE: Logging mode: stderr, file, both (default: stderr)
    EDITOR_URI_LOG_FILE: Log file path (required for file/both modes)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, cast


@dataclass
class Config:
    """Runtime configuration for editor_uri."""

    log_level: str  # Logging level: DEBUG, INFO, WARNING, ERROR
    log_mode: Literal["stderr", "file", "both"]  # Logging mode
    log_file: Path | None  # Log file path (for file/both modes)


_config: Config | None = None


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Returns:
        Config instance with validated values

    Raises:
        ValueError: If configuration values are invalid
    """
    # Parse log level
    log_level = os.getenv("EDITOR_URI_LOG_LEVEL", "WARNING").upper()
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if log_level not in valid_levels:
        raise ValueError(
            f"EDITOR_URI_LOG_LEVEL must be one of {valid_levels}, got: {log_level}"
        )

    # Parse log mode
    log_mode_str = os.getenv("EDITOR_URI_LOG_MODE", "stderr").lower()
    valid_modes = {"stderr", "file", "both"}
    if log_mode_str not in valid_modes:
        raise ValueError(
            f"EDITOR_URI_LOG_MODE must be one of {valid_modes}, got: {log_mode_str}"
        )
    log_mode = cast(Literal["stderr", "file", "both"], log_mode_str)

    # Parse log file
    log_file = None
    if log_file_str := os.getenv("EDITOR_URI_LOG_FILE"):
        log_file = Path(log_file_str).resolve()

    if log_mode != "stderr" and log_file is None:
        raise ValueError(
            f"EDITOR_URI_LOG_FILE is required when EDITOR_URI_LOG_MODE is {log_mode!r}"
        )

    return Config(log_level=log_level, log_mode=log_mode, log_file=log_file)


def get_config() -> Config:
    """
    Get singleton config instance.

    Returns:
        Config instance (loads on first call)
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset cached config (for testing only)."""
    global _config
    _config = None
