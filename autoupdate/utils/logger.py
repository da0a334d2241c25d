"""File logging for the ``autoupdate`` logger tree."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..api.config.get_home_dir import get_home_dir

LOG_FILE_NAME = "autoupdate.log"
_MAX_BYTES = 5 * 1024 * 1024
_BACKUPS = 3

# Set after the first attempt, successful or not
_CONFIGURED = False


def configure_logging(home: Path | None = None) -> None:
    """Send ``autoupdate.*`` records to a rotating file under ``home``.

    Args:
        home: Directory for the log file; defaults to AUTOUPDATE_HOME.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    home = home or get_home_dir()
    package_logger = logging.getLogger("autoupdate")
    _CONFIGURED = True

    try:
        home.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(home / LOG_FILE_NAME, maxBytes=_MAX_BYTES, backupCount=_BACKUPS)
    except OSError as exc:
        # Unusable home: run without a log file rather than fail the command
        package_logger.addHandler(logging.NullHandler())
        print(f"autoupdate: not logging to {home}: {exc}", file=sys.stderr)
        return

    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))

    package_logger.setLevel(logging.INFO)
    package_logger.addHandler(handler)
