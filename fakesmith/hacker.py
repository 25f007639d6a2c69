"""Hacker-speak words and phrases."""

from __future__ import annotations

from fakesmith.generate import generate
from fakesmith.randomness import get_rand_value


def _is_separator(char: str) -> bool:
    """Tell whether char ends a word for the purpose of title-casing."""
    if char.isascii():
        return not (char.isalnum() or char == "_")
    if char.isalpha() or char.isdigit():
        return False
    return char.isspace()


def _title(word: str) -> str:
    """Upper-case the first letter of every word part, leaving the rest alone."""
    result = []
    at_start = True
    for char in word:
        result.append(char.upper() if at_start else char)
        at_start = _is_separator(char)
    return "".join(result)


def hacker_phrase() -> str:
    """Return a random hacker sentence with its first word capitalised."""
    words = generate(get_rand_value("hacker", "phrase")).split(" ")
    words[0] = _title(words[0])
    return " ".join(words)


def hacker_abbreviation() -> str:
    """Return a random hacker abbreviation."""
    return get_rand_value("hacker", "abbreviation")


def hacker_adjective() -> str:
    """Return a random hacker adjective."""
    return get_rand_value("hacker", "adjective")


def hacker_noun() -> str:
    """Return a random hacker noun."""
    return get_rand_value("hacker", "noun")


def hacker_verb() -> str:
    """Return a random hacker verb."""
    return get_rand_value("hacker", "verb")


def hacker_ingverb() -> str:
    """Return a random hacker verb in its -ing form."""
    return get_rand_value("hacker", "ingverb")