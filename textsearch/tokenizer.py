"""Tokenizer shared by the indexer and the CLI.

Splits a text into an ordered run of tokens that alternate between
words (matches of a word pattern) and filler (everything in between).
Joining every token's text reproduces the input exactly.

Precondition: the word pattern must not match the empty string.  A
zero-width pattern yields empty word tokens; the config validator
rejects such patterns before they reach this module.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from textsearch.errors import ConfigError
from textsearch.logging import TOKENIZER, get_logger

logger = get_logger(__name__)

# Runs of word characters with embedded apostrophes ("animal's", "1844").
WORD_PATTERN = r"\b[\w']+\b"


@dataclass(frozen=True)
class Token:
    text: str
    is_word: bool
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


def compile_pattern(pattern: str | re.Pattern) -> re.Pattern:
    """Compile a word pattern, raising ConfigError if it is malformed."""
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise ConfigError(f"Word pattern must be a string, got {type(pattern).__name__}.")
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigError(f"Invalid word pattern {pattern!r}: {e}") from e


class TextTokenizer:
    """Eagerly tokenizes `text` and hands the tokens out in order.

    Two ways to consume it:
      - has_next() / next(), where next() returns None once exhausted
      - plain iteration (`for token in tokenizer`)
    Both share one cursor; reset() rewinds it.
    """

    def __init__(self, text: str, word_pattern: str | re.Pattern = WORD_PATTERN):
        self.regex = compile_pattern(word_pattern)
        self._tokens = tuple(self._tokenize(text))
        self._cursor = 0
        logger.debug(
            f"{TOKENIZER} {len(self._tokens)} tokens from {len(text)} chars "
            f"(pattern={self.regex.pattern!r})"
        )

    def _tokenize(self, text: str):
        position = 0
        for match in self.regex.finditer(text):
            if match.start() > position:
                yield Token(text[position : match.start()], False, position)
            yield Token(match.group(), True, match.start())
            position = match.end()
        if position < len(text):
            yield Token(text[position:], False, position)

    # ── Cursor ──────────────────────────────────────────────────────

    def has_next(self) -> bool:
        return self._cursor < len(self._tokens)

    def next(self) -> Token | None:
        """Return the next token, or None when no tokens remain."""
        if not self.has_next():
            return None
        token = self._tokens[self._cursor]
        self._cursor += 1
        return token

    def reset(self) -> None:
        self._cursor = 0

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    # ── Inspection ──────────────────────────────────────────────────

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def is_word(self, token: Token | str) -> bool:
        """True only if the whole string is a single match of the word pattern."""
        text = token.text if isinstance(token, Token) else token
        return self.regex.fullmatch(text) is not None
