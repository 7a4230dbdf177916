"""
Logging setup shared by the API server and the admin CLI.
"""

import logging
import sys

from .config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging once per process from the settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for _noisy in ("aiosqlite", "passlib"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)
