#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/log.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Logging setup for the cube renderer.

Frames are drawn on stdout, so log output goes to a rotating file when one
is configured. Without a file only warnings and above reach stderr, unless
verbose is set, in which case everything goes to stderr.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "ascii_cube_renderer"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(verbose: bool = False,
                  log_file: Optional[str] = None) -> logging.Logger:
    """Configure the package logger. Safe to call more than once."""
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
        handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler.setFormatter(formatter)

    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.propagate = False
    return root
