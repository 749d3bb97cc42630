"""Indexer: loads a document and builds the word-occurrence index.

The index is built once per searcher.  It keeps the word tokens in
document order plus a case-folded lookup from word to positions, and is
never mutated afterwards, so any number of searches can share it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from textsearch.errors import SourceUnavailableError
from textsearch.logging import INDEX, get_logger
from textsearch.tokenizer import Token

logger = get_logger(__name__)


# ── Document loading ────────────────────────────────────────────────

def read_document(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a whole file as text or raise SourceUnavailableError."""
    path = Path(path)
    try:
        # newline="" keeps "\r\n" so context strings stay verbatim
        with path.open(encoding=encoding, newline="") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise SourceUnavailableError(str(path), "file not found") from e
    except IsADirectoryError as e:
        raise SourceUnavailableError(str(path), "is a directory") from e
    except UnicodeDecodeError as e:
        raise SourceUnavailableError(str(path), f"not valid {encoding}: {e.reason}") from e
    except LookupError as e:
        raise SourceUnavailableError(str(path), f"unknown encoding '{encoding}'") from e
    except OSError as e:
        raise SourceUnavailableError(str(path), e.strerror or str(e)) from e

    logger.info(f"{INDEX} read {len(text)} chars from {path}")
    return text


# ── Word index ──────────────────────────────────────────────────────

def normalize(word: str) -> str:
    return word.casefold()


@dataclass(frozen=True)
class WordOccurrence:
    index: int  # position among word tokens
    token: Token

    @property
    def text(self) -> str:
        return self.token.text


@dataclass(frozen=True)
class WordIndex:
    words: tuple[WordOccurrence, ...]
    positions: Mapping[str, tuple[int, ...]] = field(repr=False)

    def __len__(self) -> int:
        return len(self.words)

    def lookup(self, word: str) -> tuple[int, ...]:
        """Word positions whose text case-insensitively equals `word`."""
        return self.positions.get(normalize(word), ())


def build_index(tokens: Iterable[Token]) -> WordIndex:
    """Keep only word tokens, in order, and map each folded word to its positions."""
    words: list[WordOccurrence] = []
    positions: dict[str, list[int]] = {}

    for token in tokens:
        if not token.is_word:
            continue
        occurrence = WordOccurrence(len(words), token)
        words.append(occurrence)
        positions.setdefault(normalize(token.text), []).append(occurrence.index)

    frozen = MappingProxyType({w: tuple(p) for w, p in positions.items()})
    logger.info(f"{INDEX} {len(words)} words, {len(frozen)} distinct")
    return WordIndex(tuple(words), frozen)
