"""
CLI helper utilities.

This module provides shared utilities for CLI commands including:
- Configuration loading
- Logging setup
"""

import json
import logging
import os
import sys
import tempfile
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Dict, Any, Literal

# Type alias for log levels
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CLISettings:
    """
    Settings read from the JSON configuration file.

    Attributes:
        log_level: Log level name.
        log_file: Optional log file path.
        enable_csv: Register the CSV parser before running a command.
    """
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    enable_csv: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CLISettings":
        """
        Build settings from a config dictionary, ignoring unknown keys.

        Raises:
            ValueError: If a known key has a value of the wrong kind.
        """
        known = {f.name for f in fields(cls)}
        settings = cls(**{k: v for k, v in data.items() if k in known})

        if not isinstance(settings.log_level, str) or settings.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level {settings.log_level!r}. Must be one of: {', '.join(LOG_LEVELS)}"
            )
        if settings.log_file is not None and not isinstance(settings.log_file, str):
            raise ValueError(f"Invalid log_file {settings.log_file!r}. Must be a path string")
        if not isinstance(settings.enable_csv, bool):
            raise ValueError(f"Invalid enable_csv {settings.enable_csv!r}. Must be true or false")
        return settings


def setup_logging(
    level: LogLevel = "INFO",
    log_file: Optional[str] = None
) -> Optional[str]:
    """
    Setup logging configuration with fallback locations.

    If the requested log file cannot be opened, the system temp directory
    and then the user home directory are tried before falling back to
    console-only logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path. If None, logs to console only.

    Returns:
        The actual log file path used, or None if logging to console only.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list = [logging.StreamHandler(sys.stderr)]
    actual_log_file = None

    if log_file:
        log_filename = os.path.basename(log_file) or "ontformat.log"
        fallback_locations = [
            log_file,
            os.path.join(tempfile.gettempdir(), log_filename),
            os.path.join(Path.home(), log_filename),
        ]

        for fallback_path in fallback_locations:
            try:
                log_dir = os.path.dirname(fallback_path)
                if log_dir and not os.path.exists(log_dir):
                    os.makedirs(log_dir, exist_ok=True)

                handlers.append(logging.FileHandler(fallback_path, encoding='utf-8'))
                actual_log_file = fallback_path

                if fallback_path != log_file:
                    print(f"Note: Using fallback log file: {fallback_path}", file=sys.stderr)
                break

            except OSError as e:
                print(f"  Could not create log at {fallback_path}: {e}", file=sys.stderr)
                continue

        if actual_log_file is None:
            print("Warning: Could not write log file to any location", file=sys.stderr)
            print(f"  Requested: {log_file}", file=sys.stderr)
            print("  Logging to console only", file=sys.stderr)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if actual_log_file:
        logger.info(f"Logging to: {actual_log_file}")

    return actual_log_file


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Dictionary containing the configuration.

    Raises:
        ValueError: If config_path is empty or file contains invalid JSON.
        FileNotFoundError: If the configuration file doesn't exist.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in configuration file {path} at line {e.lineno}, column {e.colno}: {e.msg}"
        )
    except UnicodeDecodeError as e:
        raise ValueError(f"File encoding error in {path}: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(config)}")

    return config
