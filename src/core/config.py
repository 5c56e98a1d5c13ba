"""
Server configuration read from the process environment.

Values fall back to the defaults in core.constants. A ``.env`` file in the
working directory is honoured, but never overrides variables that are
already set.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from core.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_LOG_LEVEL,
    ENV_HOST,
    ENV_PORT,
    ENV_LOG_LEVEL,
    LOG_LEVELS,
)

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when an environment variable holds an unusable value."""
    pass


def load_environment_file() -> bool:
    """Load variables from a .env file if one exists."""
    return load_dotenv(override=False)


def parse_port(raw_port: str) -> int:
    """
    Parse a bind port from its string form.

    Raises:
        ConfigurationError: If the value is not an integer in 1-65535
    """
    try:
        port = int(raw_port)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{ENV_PORT} must be an integer, got {raw_port!r}")

    if not 0 < port < 65536:
        raise ConfigurationError(f"{ENV_PORT} must be between 1 and 65535, got {port}")
    return port


def normalize_log_level(raw_level: str) -> Optional[str]:
    """Return a known log level name, None if the value is not one."""
    level = (raw_level or "").strip().lower()
    return level if level in LOG_LEVELS else None


@dataclass(frozen=True)
class ServerSettings:
    """Bind address and verbosity for the HTTP server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    # Raw LOG_LEVEL value that was replaced by the default, if any
    rejected_log_level: Optional[str] = None

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_environment(cls) -> "ServerSettings":
        """Build settings from HOST, PORT and LOG_LEVEL."""
        raw_log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
        log_level = normalize_log_level(raw_log_level)
        return cls(
            host=os.getenv(ENV_HOST, DEFAULT_HOST),
            port=parse_port(os.getenv(ENV_PORT, str(DEFAULT_PORT))),
            log_level=log_level or DEFAULT_LOG_LEVEL,
            rejected_log_level=None if log_level else raw_log_level,
        )

    def report_fallbacks(self) -> None:
        """Log replaced values; call once logging is configured."""
        if self.rejected_log_level is not None:
            logger.warning(
                f"Unknown {ENV_LOG_LEVEL} {self.rejected_log_level!r}, using {self.log_level!r}"
            )
