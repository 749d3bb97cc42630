from __future__ import annotations

import re

import pytest

from textsearch.errors import ConfigError
from textsearch.tokenizer import WORD_PATTERN, TextTokenizer, Token

from conftest import LONG_EXCERPT, SHORT_EXCERPT


def _drain(tokenizer: TextTokenizer) -> list[Token]:
    tokens = []
    while tokenizer.has_next():
        tokens.append(tokenizer.next())
    return tokens


def test_digits_pattern():
    lexer = TextTokenizer("123, 789: def", "[0-9]+")

    assert [t.text for t in _drain(lexer)] == ["123", ", ", "789", ": def"]

    assert lexer.is_word("1029384")
    assert not lexer.is_word("1029388 ")
    assert not lexer.is_word("123,456")


@pytest.mark.parametrize(
    "text",
    ["", " ", "word", "  leading and trailing  ", "a-b.c", SHORT_EXCERPT, LONG_EXCERPT],
)
def test_tokens_reproduce_input(text):
    assert "".join(t.text for t in TextTokenizer(text).tokens) == text


@pytest.mark.parametrize("text", [SHORT_EXCERPT, LONG_EXCERPT, "...hi!! there..."])
def test_words_and_filler_alternate(text):
    tokenizer = TextTokenizer(text)
    kinds = [tokenizer.is_word(t) for t in tokenizer.tokens]
    assert all(a != b for a, b in zip(kinds, kinds[1:]))


def test_stored_kind_matches_is_word():
    tokenizer = TextTokenizer(LONG_EXCERPT)
    assert all(t.is_word == tokenizer.is_word(t) for t in tokenizer.tokens)


def test_empty_input_has_no_tokens():
    tokenizer = TextTokenizer("")
    assert not tokenizer.has_next()
    assert tokenizer.next() is None


def test_no_empty_filler_at_edges():
    tokens = TextTokenizer("start middle end").tokens
    assert [t.text for t in tokens] == ["start", " ", "middle", " ", "end"]
    assert all(t.text for t in tokens)


def test_only_filler():
    tokens = TextTokenizer(" ,.; ").tokens
    assert [(t.text, t.is_word) for t in tokens] == [(" ,.; ", False)]


def test_offsets_point_into_source():
    text = "Some few naturalists, on the other"
    for token in TextTokenizer(text).tokens:
        assert text[token.start : token.end] == token.text


def test_next_keeps_returning_none_when_exhausted():
    tokenizer = TextTokenizer("one two")
    assert len(_drain(tokenizer)) == 3
    assert tokenizer.next() is None
    assert tokenizer.next() is None
    assert not tokenizer.has_next()


def test_iteration_and_reset():
    tokenizer = TextTokenizer("one, two")
    first = [t.text for t in tokenizer]
    assert first == ["one", ", ", "two"]
    assert list(tokenizer) == []

    tokenizer.reset()
    assert tokenizer.next().text == "one"
    assert [t.text for t in tokenizer] == [", ", "two"]


def test_default_pattern_keeps_embedded_apostrophes():
    tokenizer = TextTokenizer("the animal's 'quoted' words")
    words = [t.text for t in tokenizer.tokens if t.is_word]
    assert words == ["the", "animal's", "quoted", "words"]


def test_is_word_requires_full_match():
    tokenizer = TextTokenizer("", WORD_PATTERN)
    assert tokenizer.is_word("plant's")
    assert tokenizer.is_word("xxxxx10x")
    assert not tokenizer.is_word("two words")
    assert not tokenizer.is_word("forms.")
    assert not tokenizer.is_word("")


def test_accepts_compiled_pattern():
    tokenizer = TextTokenizer("ab12cd", re.compile(r"[a-z]+"))
    assert [t.text for t in tokenizer.tokens] == ["ab", "12", "cd"]


def test_adjacent_matches_are_separate_words():
    tokens = TextTokenizer("123", "[0-9]").tokens
    assert [(t.text, t.is_word) for t in tokens] == [("1", True), ("2", True), ("3", True)]


def test_malformed_pattern_raises_config_error():
    with pytest.raises(ConfigError):
        TextTokenizer("text", "[unclosed")
