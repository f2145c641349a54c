"""Centralized configuration for the codec and its command-line front end.

Defines immutable defaults for stream chunking, output wrapping, text
encoding and logging.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

from clockwork32.alphabet import CLOCKWORK_ALPHABET


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Stream processing
    DEFAULT_CHUNK_SIZE: int = 64 * 1024
    DEFAULT_WRAP: int = 0
    DEFAULT_TEXT_ENCODING: str = "latin-1"

    # Logging
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(module)s:%(lineno)d] %(message)s"
    LOG_LEVEL: str = "WARNING"


# Convenience re-exports and constants
ALPHABET_NAME: str = CLOCKWORK_ALPHABET.name


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON


def configure_logging(verbosity: int = 0) -> int:
    """Configure root logging for command-line use and return the chosen level.

    ``verbosity`` 0 keeps ``Config.LOG_LEVEL``; 1 selects INFO; 2 or more
    selects DEBUG.
    """

    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(Config.LOG_LEVEL)
    logging.basicConfig(level=level, format=Config.LOG_FORMAT)
    logging.getLogger("clockwork32").setLevel(level)
    return level
