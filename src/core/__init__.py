"""
Core utilities and constants for the Notebook API.

Contains shared constants, configuration, logging setup and error handling.
"""

from .constants import *
from .settings import Settings
from .logging_config import configure_logging

__all__ = [
    # Export all constants for easy import
    "API_TITLE",
    "API_VERSION",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_PAGE_LIMIT",
    "STARTUP_MESSAGE",
    "SHUTDOWN_MESSAGE",
    # ... other constants available for import
    "Settings",
    "configure_logging",
]
