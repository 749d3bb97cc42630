"""Search settings: defaults plus optional JSON config files.

Every config that leaves this module has passed both validation levels,
so the CLI never hands a zero-width or uncompilable pattern, or an
unusable encoding, to the tokenizer.
"""

from __future__ import annotations

from pathlib import Path

from textsearch.logging import CONFIG, get_logger
from textsearch.tokenizer import WORD_PATTERN
from textsearch.validator import check_config, read_config_file

logger = get_logger(__name__)

DEFAULT_CONFIG: dict = {
    "word_pattern": WORD_PATTERN,
    "context_words": 3,
    "encoding": "utf-8",
}


def load_config(config_path: str | Path | None = None, **overrides) -> dict:
    """Return the defaults, overlaid with `config_path` and then `overrides`.

    Overrides set to None are ignored.  Raises ConfigError if the file is
    unreadable or the merged settings fail validation.
    """
    config = dict(DEFAULT_CONFIG)
    if config_path is not None:
        config.update(read_config_file(config_path))
        logger.info(f"{CONFIG} loaded {config_path}")

    config.update({k: v for k, v in overrides.items() if v is not None})
    return check_config(config)
