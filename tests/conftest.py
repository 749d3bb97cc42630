"""Shared fixtures: the Darwin excerpt used across searcher and CLI tests."""

from __future__ import annotations

import pytest

from textsearch.searcher import TextSearcher

SHORT_EXCERPT = (
    "I will here give a brief sketch of the progress of opinion on the Origin "
    "of Species.  Until recently the great majority of naturalists believed "
    "that species were immutable productions, and had been separately created.  "
    "This view has been ably maintained by many authors.  Some few naturalists, "
    "on the other hand, have believed that species undergo modification, and "
    "that the existing forms of life are the descendants by true generation of "
    "pre existing forms."
)

LONG_EXCERPT = (
    "Release date first edition [xxxxx10x.xxx] please check for updates.\r\n"
    "My first sketch was enlarged in 1844 into a sketch of 1844--honoured me "
    "with his approval.  It is not indeed to the animal's or plant's own good, "
    "and we habitually speak of an animal's organisation as\r\nsomething plastic."
)


def _write(path, text: str):
    # write bytes so "\r\n" survives on every platform
    path.write_bytes(text.encode("utf-8"))
    return path


@pytest.fixture
def short_excerpt_path(tmp_path):
    return _write(tmp_path / "short_excerpt.txt", SHORT_EXCERPT)


@pytest.fixture
def long_excerpt_path(tmp_path):
    return _write(tmp_path / "long_excerpt.txt", LONG_EXCERPT)


@pytest.fixture
def short_searcher(short_excerpt_path):
    return TextSearcher.from_file(short_excerpt_path)


@pytest.fixture
def long_searcher(long_excerpt_path):
    return TextSearcher.from_file(long_excerpt_path)
