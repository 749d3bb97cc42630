"""Exception hierarchy for textsearch.

Library code raises; the CLI catches TextSearchError at its boundary.
"""

from __future__ import annotations


class TextSearchError(Exception):
    """Base class for every error raised by textsearch."""


class SourceUnavailableError(TextSearchError):
    """The document could not be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read document '{path}': {reason}")


class ConfigError(TextSearchError, ValueError):
    """Malformed word pattern or config file."""


class QueryError(TextSearchError, ValueError):
    """A search was called with arguments outside its contract."""
