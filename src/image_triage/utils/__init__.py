"""Utility functions for configuration and logging."""

from image_triage.utils.config import Config
from image_triage.utils.logger import setup_logger

__all__ = ["Config", "setup_logger"]
