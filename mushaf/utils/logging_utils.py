"""Logging setup for mushaf.

Standard Logger Initialization Pattern
--------------------------------------
Library modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

Configuration happens once at the application level. The TUI owns the
terminal, so its logs go to a rotating file instead of stderr.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _is_console_handler(handler: logging.Handler) -> bool:
    """Plain stream handlers writing to the terminal (not files or capture buffers)."""
    return type(handler) is logging.StreamHandler and handler.stream in (
        sys.stderr,
        sys.stdout,
        sys.__stderr__,
        sys.__stdout__,
    )


def setup_tui_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Set up file logging for the TUI.

    The root logger is set to WARNING to avoid noise from third-party libs
    (httpx logs every request at INFO). mushaf's own loggers use ``level``,
    falling back to MUSHAF_LOG_LEVEL. Console handlers left by
    setup_cli_logging are removed; Textual owns the terminal from here on.

    Returns:
        The ``mushaf`` package logger.
    """
    from mushaf.config.settings import get_config_dir, get_log_level

    level_name = (level or get_log_level()).upper()
    mushaf_logger = logging.getLogger("mushaf")

    try:
        log_dir = get_config_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "tui.log"

        root = logging.getLogger()
        for console in [h for h in root.handlers if _is_console_handler(h)]:
            root.removeHandler(console)

        if not root.handlers:
            handler = RotatingFileHandler(
                log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
            )
            handler.setFormatter(logging.Formatter(_FORMAT))
            logging.basicConfig(level=logging.WARNING, handlers=[handler])
    except OSError as e:
        # We can't log this failure since logging is what's failing
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)

    mushaf_logger.setLevel(getattr(logging, level_name, logging.INFO))
    return mushaf_logger


def setup_cli_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure stderr logging for one-shot CLI commands."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=logging.WARNING, format=_FORMAT, stream=sys.stderr)
    logging.getLogger("mushaf").setLevel(level)
