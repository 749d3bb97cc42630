"""Searcher: keyword-in-context lookups over a single document.

Construction tokenizes the text and builds the word index once.
`search()` then answers any number of (word, context) queries from that
index: each hit is the verbatim slice of the document running from the
first to the last word of its window, filler included.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from textsearch.errors import QueryError
from textsearch.indexer import WordIndex, build_index, read_document
from textsearch.logging import SEARCH, get_logger
from textsearch.tokenizer import WORD_PATTERN, TextTokenizer

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContextHit:
    text: str
    word: str
    word_index: int
    start: int
    end: int

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "word": self.word,
            "word_index": self.word_index,
            "start": self.start,
            "end": self.end,
        }


def _check_query(query_word: str, context_words: int) -> None:
    if not isinstance(query_word, str) or not query_word:
        raise QueryError("'query_word' must be a non-empty string.")
    # bool is an int subclass but never a meaningful width
    if isinstance(context_words, bool) or not isinstance(context_words, int):
        raise QueryError(
            f"'context_words' must be an integer, got {type(context_words).__name__}."
        )
    if context_words < 0:
        raise QueryError(f"'context_words' must be >= 0, got {context_words}.")


class TextSearcher:
    def __init__(self, text: str, word_pattern: str | re.Pattern = WORD_PATTERN):
        self._text = text
        tokenizer = TextTokenizer(text, word_pattern)
        self._index: WordIndex = build_index(tokenizer)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        encoding: str = "utf-8",
        word_pattern: str | re.Pattern = WORD_PATTERN,
    ) -> "TextSearcher":
        """Load `path` and build a searcher.  Raises SourceUnavailableError."""
        return cls(read_document(path, encoding), word_pattern)

    # ── Stats ───────────────────────────────────────────────────────

    @property
    def word_count(self) -> int:
        return len(self._index)

    @property
    def vocabulary_size(self) -> int:
        return len(self._index.positions)

    def count(self, query_word: str) -> int:
        return len(self._index.lookup(query_word))

    # ── Search ──────────────────────────────────────────────────────

    def search_hits(self, query_word: str, context_words: int) -> list[ContextHit]:
        """One ContextHit per occurrence of `query_word`, in document order.

        Windows are clipped at the document edges and never merged, so
        overlapping occurrences each get their own hit.
        """
        _check_query(query_word, context_words)

        words = self._index.words
        hits: list[ContextHit] = []
        for position in self._index.lookup(query_word):
            first = words[max(0, position - context_words)].token
            last = words[min(len(words) - 1, position + context_words)].token
            hits.append(
                ContextHit(
                    text=self._text[first.start : last.end],
                    word=words[position].text,
                    word_index=position,
                    start=first.start,
                    end=last.end,
                )
            )

        logger.debug(
            f"{SEARCH} {query_word!r} context={context_words}: {len(hits)} hit(s)"
        )
        return hits

    def search(self, query_word: str, context_words: int) -> list[str]:
        """Return one context string for each time `query_word` appears."""
        return [hit.text for hit in self.search_hits(query_word, context_words)]
