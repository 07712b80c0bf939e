"""Logging configuration and utilities."""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .io import load_config

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'

def _parse_level(level: str) -> int:
    value = getattr(logging, str(level).upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level}")
    return value

def _add_file_handler(logger: logging.Logger, log_file: str) -> None:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)

def get_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None
) -> logging.Logger:
    """Get configured logger instance.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Don't add handlers if they already exist
    if logger.handlers:
        return logger

    logger.setLevel(_parse_level(level))

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    # File handler (optional)
    if log_file:
        _add_file_handler(logger, log_file)

    return logger

def configure_logging(
    config: Union[str, Path, Dict[str, Any], None],
    name: str = "tea_timer"
) -> logging.Logger:
    """Apply the ``logging`` section of a config to a logger.

    Call once at application start-up; importing the package installs
    no handlers.

    Args:
        config: Path to a YAML config file, or an already parsed mapping
            (may be None or lack a ``logging`` section, in which case
            defaults are kept)
        name: Logger to reconfigure

    Returns:
        The reconfigured logger
    """
    if isinstance(config, (str, Path)):
        config = load_config(config)

    logger = get_logger(name)
    section = (config or {}).get("logging") or {}

    if "level" in section:
        logger.setLevel(_parse_level(section["level"]))

    log_file = section.get("log_file")
    if log_file:
        existing = {
            getattr(h, "baseFilename", None) for h in logger.handlers
        }
        if os.path.abspath(log_file) not in existing:
            _add_file_handler(logger, log_file)

    return logger
