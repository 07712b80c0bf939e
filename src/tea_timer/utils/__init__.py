"""Utility functions and helpers."""

from .logging import get_logger, configure_logging
from .io import load_config

__all__ = ["get_logger", "configure_logging", "load_config"]
