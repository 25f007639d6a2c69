import re

import pytest

from fakesmith.data import HACKER, INTERNET
from fakesmith.generate import generate
from fakesmith.randomness import seed


def test_generate_unknown_tables_and_placeholders():
    seed(11)
    pattern = re.compile(r"   \d[a-z]\d[a-z]\d[a-z]")
    results = [
        generate("{person.first} {person.last} {contact.email} #?#?#?") for _ in range(100)
    ]
    assert [r for r in results if not pattern.fullmatch(r)] == []
    assert len(results[0]) == 9


def test_generate_known_table():
    seed(11)
    for _ in range(50):
        assert generate("{hacker.noun}") in HACKER["noun"]


def test_generate_mixed_template():
    seed(11)
    result = generate("{hacker.abbreviation}@{internet.domain_suffix}")
    abbreviation, suffix = result.split("@")
    assert abbreviation in HACKER["abbreviation"]
    assert suffix in INTERNET["domain_suffix"]


def test_generate_single_part_key_is_removed():
    assert generate("a{hacker}b") == "ab"


def test_generate_digits_leading_not_zero():
    seed(11)
    pattern = re.compile(r"[1-9]\d\d")
    results = [generate("###") for _ in range(100)]
    assert [r for r in results if not pattern.fullmatch(r)] == []


def test_generate_unclosed_brace_left_alone():
    assert generate("{a.b") == "{a.b"


def test_generate_reversed_braces_raise():
    with pytest.raises(ValueError):
        generate("} {")