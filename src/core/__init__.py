"""
Core utilities and constants for the Books API.

Contains shared constants, configuration, logging and error handling.
"""

from .constants import *
from .config import ServerSettings

__all__ = [
    # Export the most used constants for easy import
    "API_TITLE",
    "API_VERSION",
    "API_PREFIX",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_LOG_LEVEL",
    "STARTUP_MESSAGE",
    "SHUTDOWN_MESSAGE",
    "ServerSettings",
    # ... other constants available for import
]
