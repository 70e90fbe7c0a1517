"""Configuration module for the questionnaire and document pipeline."""

from .logging_config import configure_from_settings, configure_logging, get_logger, log_context
from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "log_context",
]
