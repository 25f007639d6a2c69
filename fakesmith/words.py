"""Sentences and paragraphs built from word and sentence generators."""

from __future__ import annotations

from collections.abc import Callable


def sentence(word_count: int, word: Callable[[], str]) -> str:
    """Join word_count words into a capitalised sentence ending in '.'."""
    if word_count <= 0:
        return ""
    words = [word() for _ in range(word_count)]
    first = words[0]
    words[0] = first[:1].title() + first[1:]
    return " ".join(words) + "."


def paragraph(
    paragraph_count: int,
    sentence_count: int,
    word_count: int,
    separator: str,
    sentence: Callable[[int], str],
) -> str:
    """Build paragraphs of sentences, joined by separator."""
    if paragraph_count <= 0 or sentence_count <= 0 or word_count <= 0:
        return ""
    return separator.join(
        " ".join(sentence(word_count) for _ in range(sentence_count))
        for _ in range(paragraph_count)
    )