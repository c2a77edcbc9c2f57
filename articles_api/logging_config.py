"""
Logging setup for the Articles API.

Every module logs through ``logging.getLogger(__name__)``; this module only
attaches handlers to the root logger.  ``setup_logging`` is idempotent so it
is safe to call from both ``create_app`` and the uvicorn entry point.
"""
import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: str | None = None) -> None:
    """
    Configure the root logger with a console handler and, when *logfile*
    is given, a UTF-8 file handler.

    Does nothing if the root logger already has handlers (pytest's
    logging plugin, a second ``create_app`` call, uvicorn's own config).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
