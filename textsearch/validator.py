"""Two-level config validation: syntactic, then semantic.

Syntactic = keys, types and ranges.
Semantic  = the values actually work (pattern compiles and cannot match
            empty text, encoding is a known codec).
"""

from __future__ import annotations

import codecs
import json
import re
from pathlib import Path

from textsearch.errors import ConfigError

KNOWN_KEYS = frozenset({"word_pattern", "context_words", "encoding"})

# Probe for zero-width matches: string edges, spaces, punctuation, digits.
_EMPTY_PROBE = " Ab, 1'c.\n"


def _matches_empty(regex: re.Pattern) -> bool:
    return any(m.start() == m.end() for m in regex.finditer(_EMPTY_PROBE))


def read_config_file(config_path: str | Path) -> dict:
    """Parse a config file.  Raises ConfigError on I/O or JSON problems."""
    path = Path(config_path)
    try:
        config = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Config {config_path} must be a JSON object.")
    return config


# ── Syntactic Validation ────────────────────────────────────────────

def validate_syntactic(config: dict) -> list[str]:
    """Check keys and types.  Returns list of error strings."""
    errors: list[str] = []

    unknown = sorted(set(config) - KNOWN_KEYS)
    if unknown:
        errors.append(f"Unknown config keys: {unknown}. Known keys: {sorted(KNOWN_KEYS)}.")

    if "word_pattern" in config and (
        not isinstance(config["word_pattern"], str) or not config["word_pattern"]
    ):
        errors.append("'word_pattern' must be a non-empty string.")

    if "context_words" in config:
        cw = config["context_words"]
        if isinstance(cw, bool) or not isinstance(cw, int) or cw < 0:
            errors.append("'context_words' must be an integer >= 0.")

    if "encoding" in config and (
        not isinstance(config["encoding"], str) or not config["encoding"]
    ):
        errors.append("'encoding' must be a non-empty string.")

    return errors


# ── Semantic Validation ─────────────────────────────────────────────

def validate_semantic(config: dict) -> list[str]:
    """Check that the configured values are usable.  Assumes syntactic checks passed."""
    errors: list[str] = []

    if "word_pattern" in config:
        pattern = config["word_pattern"]
        try:
            regex = re.compile(pattern)
        except re.error as e:
            errors.append(f"'word_pattern' {pattern!r} is not a valid regular expression: {e}.")
        else:
            if _matches_empty(regex):
                errors.append(
                    f"'word_pattern' {pattern!r} matches the empty string. "
                    "Word tokens must contain at least one character."
                )

    if "encoding" in config:
        encoding = config["encoding"]
        try:
            codecs.lookup(encoding)
        except LookupError:
            errors.append(f"'encoding' '{encoding}' is not a known text encoding.")

    return errors


def collect_errors(config: dict) -> list[str]:
    """Syntactic errors if any, otherwise semantic errors."""
    return validate_syntactic(config) or validate_semantic(config)


def check_config(config: dict) -> dict:
    """Return `config` unchanged, or raise ConfigError listing every problem."""
    errors = collect_errors(config)
    if errors:
        raise ConfigError("; ".join(errors))
    return config


# ── Top-level validate ──────────────────────────────────────────────

def validate_config(config_path: str) -> tuple[bool, list[str]]:
    """Run syntactic + semantic validation on a config file.

    Returns (passed, errors).
    """
    try:
        config = read_config_file(config_path)
    except ConfigError as e:
        return False, [str(e)]

    errors = collect_errors(config)
    return not errors, errors
