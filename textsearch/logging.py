"""Logging setup shared by the library and the CLI.

Modules use:
    from textsearch.logging import get_logger
    logger = get_logger(__name__)

Only the CLI entry point calls configure_logging().  Logs go to stderr so
they never mix with `kwic search --json` output on stdout, and the default
level is WARNING so a plain search prints nothing but its results.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Subsystem tags prefixed to log messages.
TOKENIZER = "[TOKENIZER]"
INDEX = "[INDEX]"
SEARCH = "[SEARCH]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"


def configure_logging(
    level: int = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
) -> None:
    """Install a single root handler.  Repeated calls only change the level."""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
